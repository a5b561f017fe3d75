"""
Summary statistics over a fetched list of animal records.

Everything here is a pure function of its input: no I/O, no state kept
between calls, and malformed or missing fields fall back to defaults
instead of raising.
"""
from __future__ import annotations
from typing import Dict, Iterable, List, Optional, Sequence

from .models import AGE_MAPPING, AnimalRecord, PetAge, StatsSummary, TypeCount
from .utils import parse_leading_int, round_half_up

def average_age(records: Sequence[AnimalRecord]) -> float:
    """Mean of the AGE_MAPPING proxies; unknown labels count as 0, empty input gives 0."""
    total = sum(AGE_MAPPING.get(age, 0) if isinstance(age, str) else 0
                for age in (r.get("age") for r in records))
    return round_half_up(total / (len(records) or 1), 2)

def count_types(records: Iterable[AnimalRecord]) -> Dict[Optional[str], int]:
    counts: Dict[Optional[str], int] = {}
    for r in records:
        t = r.get("type")
        if t is not None and not isinstance(t, str):
            t = str(t)
        counts[t] = counts.get(t, 0) + 1
    return counts

def most_common_type(type_counts: Dict[Optional[str], int]) -> TypeCount:
    """First type with the strictly highest count; earliest wins ties."""
    best: TypeCount = {"type": None, "count": 0}
    for t, count in type_counts.items():
        if count > best["count"]:
            best = {"type": t, "count": count}
    return best

def oldest_pet(records: Iterable[AnimalRecord]) -> PetAge:
    """
    Record with the strictly greatest integer age, compared against a baseline of 0.
    Ages that don't parse (e.g. "Adult") never win, so all-label input keeps the
    initial {"name": None, "age": 0}.
    """
    oldest: PetAge = {"name": None, "age": 0}
    for r in records:
        age = parse_leading_int(r.get("age"))
        if age is not None and age > oldest["age"]:
            oldest = {"name": r.get("name"), "age": age}
    return oldest

def youngest_pet(records: Iterable[AnimalRecord]) -> Optional[PetAge]:
    """
    Record with the strictly smallest integer age, or None if no age parses.
    The accumulator starts empty, so a genuine age of 0 is kept once seen.
    """
    youngest: Optional[PetAge] = None
    for r in records:
        age = parse_leading_int(r.get("age"))
        if age is None:
            continue
        if youngest is None or age < youngest["age"]:
            youngest = {"name": r.get("name"), "age": age}
    return youngest

def compute_stats(records: Sequence[AnimalRecord]) -> StatsSummary:
    records = list(records)
    type_counts = count_types(records)
    return {
        "total": len(records),
        "avg_age": average_age(records),
        "type_counts": type_counts,
        "most_common_type": most_common_type(type_counts),
        "oldest_pet": oldest_pet(records),
        "youngest_pet": youngest_pet(records),
    }

def empty_stats() -> StatsSummary:
    return compute_stats([])

def summary_lines(stats: StatsSummary) -> List[str]:
    """Human-readable lines for the summary block (CLI and dashboard share this wording)."""
    lines = [
        f"Total Pets: {stats['total']}",
        f"Average Age (if numeric): {stats['avg_age']:.2f}",
        "Type Distribution: " + ", ".join(f"{t}: {c}" for t, c in stats["type_counts"].items()),
    ]
    mct = stats["most_common_type"]
    lines.append(f"Most Common Type: {mct['type']} ({mct['count']})")
    oldest = stats["oldest_pet"]
    if oldest["name"]:
        lines.append(f"Oldest Pet: {oldest['name']} ({oldest['age']} years old)")
    youngest = stats["youngest_pet"]
    if youngest is not None and youngest["name"]:
        lines.append(f"Youngest Pet: {youngest['name']} ({youngest['age']} years old)")
    return lines
