from __future__ import annotations
from typing import Dict, Iterable, List, Optional

from .models import AGE_GROUPS, AnimalRecord

DISPLAY_LIMIT = 10
TYPE_OPTIONS = ["Dog", "Cat", "Bird", "Rabbit", "Small & Furry"]

def matches_name(record: AnimalRecord, query: str) -> bool:
    """Case-insensitive substring match; records without a name never match."""
    name = record.get("name")
    if not isinstance(name, str):
        return False
    return query.lower() in name.lower()

def matches_type(record: AnimalRecord, type_filter: str) -> bool:
    return not type_filter or record.get("type") == type_filter

def filter_animals(records: Iterable[AnimalRecord], query: str = "", type_filter: str = "") -> List[AnimalRecord]:
    return [r for r in records if matches_name(r, query or "") and matches_type(r, type_filter or "")]

def visible_animals(records: Iterable[AnimalRecord], query: str = "", type_filter: str = "") -> List[AnimalRecord]:
    """Filtered list capped at DISPLAY_LIMIT, in fetch order."""
    return filter_animals(records, query, type_filter)[:DISPLAY_LIMIT]

def age_group_counts(records: Iterable[AnimalRecord]) -> Dict[str, int]:
    """Counts for the fixed Baby/Young/Adult/Senior buckets; other labels are ignored."""
    counts = {group: 0 for group in AGE_GROUPS}
    for r in records:
        age = r.get("age")
        if isinstance(age, str) and age in counts:
            counts[age] += 1
    return counts

def primary_breed(record: AnimalRecord) -> Optional[str]:
    breeds = record.get("breeds") or {}
    return breeds.get("primary")

def first_photo(record: AnimalRecord, size: str = "medium") -> Optional[str]:
    photos = record.get("photos") or []
    if not photos:
        return None
    return (photos[0] or {}).get(size)
