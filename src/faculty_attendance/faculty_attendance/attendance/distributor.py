from __future__ import annotations

from datetime import date
from typing import Any, Optional

from ..common.datetime_utils import window_dates
from ..common.numbers import round_half_up, to_count
from ..core.constants import DEFAULT_WINDOW_DAYS
from ..core.enums import AttendanceStatus
from .model import AttendanceCounts, AttendanceRecord


def scale_counts(counts: AttendanceCounts, window_days: int = DEFAULT_WINDOW_DAYS) -> tuple[int, int, int]:
    """Rescale counts so they add up to exactly `window_days`.

    Present and absent are rounded half-up, leave takes the remainder.
    """
    total = counts.total
    scale = window_days / total if total > 0 else 1
    present = min(round_half_up(counts.present * scale), window_days)
    absent = min(round_half_up(counts.absent * scale), window_days - present)
    leave = max(0, window_days - present - absent)
    return present, absent, leave


def build_attendance_from_counts(
    present: Any,
    absent: Any,
    leave: Any,
    window_days: int = DEFAULT_WINDOW_DAYS,
    *,
    today: Optional[date] = None,
) -> list[AttendanceRecord]:
    """Spread summary counts over the last `window_days` days.

    Records are laid out as a Present block, then Absent, then On Leave;
    positions inside the window do not reflect real calendar days.
    """
    counts = AttendanceCounts(present=to_count(present), absent=to_count(absent), leave=to_count(leave))
    p, a, l = scale_counts(counts, window_days)

    statuses = [AttendanceStatus.PRESENT] * p + [AttendanceStatus.ABSENT] * a + [AttendanceStatus.ON_LEAVE] * l
    dates = window_dates(window_days, end=today)
    return [AttendanceRecord(date=d, status=s) for d, s in zip(dates, statuses)]


def placeholder_attendance(window_days: int = DEFAULT_WINDOW_DAYS, *, today: Optional[date] = None) -> list[AttendanceRecord]:
    """Deterministic stand-in used until summary counts are known."""
    dates = window_dates(window_days, end=today)
    records = []
    for position, d in enumerate(dates):
        back = window_days - 1 - position
        r = (back * 17 + 7) % 10
        if r < 7:
            status = AttendanceStatus.PRESENT
        elif r < 9:
            status = AttendanceStatus.ABSENT
        else:
            status = AttendanceStatus.ON_LEAVE
        records.append(AttendanceRecord(date=d, status=status))
    return records
