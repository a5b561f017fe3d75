from __future__ import annotations
from decimal import Decimal, ROUND_HALF_UP
from typing import Any, Optional
import math
import re

LEADING_INT_RE = re.compile(r"^\s*([+-]?\d+)")

def parse_leading_int(value: Any) -> Optional[int]:
    """
    Parse the leading base-10 integer of a value the way browsers' parseInt does:
    "7" -> 7, " 3 years" -> 3, "2.5" -> 2, "Adult" -> None, None -> None.
    Floats that stringify in exponent form parse their mantissa: 1e21 -> 1, 1e-7 -> 1.
    """
    if value is None or isinstance(value, bool):
        return None
    if isinstance(value, int):
        return value
    if isinstance(value, float):
        if not math.isfinite(value):
            return None
        if value == 0 or 1e-6 <= abs(value) < 1e21:
            return int(value)
        value = repr(value)
    m = LEADING_INT_RE.match(str(value))
    return int(m.group(1)) if m else None

def round_half_up(value: float, places: int = 2) -> float:
    """Round like JavaScript's toFixed: half-up on the exact binary value (0.125 -> 0.13)."""
    if math.isnan(value):
        return 0.0
    quantum = Decimal(1).scaleb(-places)
    return float(Decimal(value).quantize(quantum, rounding=ROUND_HALF_UP))
