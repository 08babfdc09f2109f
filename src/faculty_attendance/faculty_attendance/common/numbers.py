from __future__ import annotations

import math
from typing import Any


def round_half_up(value: float) -> int:
    """Round .5 away from zero for positives (round() would pick the even side)."""
    return int(math.floor(value + 0.5))


def to_count(value: Any) -> float:
    """Coerce a spreadsheet cell to a non-negative count (bad values -> 0)."""
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0
    if math.isnan(number) or math.isinf(number) or number < 0:
        return 0
    return number
