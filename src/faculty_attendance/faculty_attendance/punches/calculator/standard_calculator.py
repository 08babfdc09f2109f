from __future__ import annotations

from ...common.datetime_utils import combine
from .base import DurationCalculator


class StandardDurationCalculator(DurationCalculator):
    """Standard rule: out - in in whole minutes, not below 0; 0 if a part is missing."""

    def duration_minutes(self, *, in_date: str, in_time: str, out_date: str, out_time: str) -> int:
        start = combine(in_date, in_time)
        end = combine(out_date, out_time)
        if start is None or end is None:
            return 0
        minutes = int((end - start).total_seconds() // 60)
        return max(minutes, 0)
