from __future__ import annotations

from typing import Iterable

from ..common.numbers import round_half_up
from ..core.constants import (
    HOD_DURATION_BONUS_MINUTES,
    HOD_MAX_AVG_MINUTES,
    HOD_MIN_AVG_MINUTES,
    HOD_UNDER_RATIO,
    OBSERVATIONS_PER_CL,
    SHORT_DAY_MINUTES,
)
from ..punches.model import PunchRow
from .model import CumulativeSummary, DurationSummary


def _hours(minutes: int) -> str:
    return f"{minutes / 60:.2f}"


class LeaveCreditService:
    """Casual-leave (CL) arithmetic over a set of punch rows.

    Every `observations_per_cl` late-in/early-out observations cost one CL,
    and so does every `observations_per_cl` days shorter than
    `short_day_minutes`.
    """

    def __init__(
        self,
        *,
        short_day_minutes: int = SHORT_DAY_MINUTES,
        observations_per_cl: int = OBSERVATIONS_PER_CL,
    ):
        self._short_day = int(short_day_minutes)
        self._per_cl = max(int(observations_per_cl), 1)

    def grace_cl(self, rows: Iterable[PunchRow]) -> int:
        rows = list(rows)
        late = sum(1 for r in rows if r.late_in)
        early = sum(1 for r in rows if r.early_out)
        return (late + early) // self._per_cl

    def cumulative(self, rows: Iterable[PunchRow]) -> CumulativeSummary:
        rows = list(rows)
        late = sum(1 for r in rows if r.late_in)
        early = sum(1 for r in rows if r.early_out)
        return CumulativeSummary(
            grace_in_count=sum(1 for r in rows if r.grace_in),
            grace_out_count=sum(1 for r in rows if r.grace_out),
            late_in_count=late,
            early_out_count=early,
            double_grace=sum(1 for r in rows if r.grace_in and r.grace_out),
            observations=sum(1 for r in rows if r.late_in or r.early_out or r.grace_in or r.grace_out),
            cls=(late + early) // self._per_cl,
        )

    def is_short_day(self, row: PunchRow) -> bool:
        return 0 < row.duration_minutes < self._short_day

    def duration(self, rows: Iterable[PunchRow]) -> DurationSummary:
        rows = list(rows)
        worked = [r.duration_minutes for r in rows if r.duration_minutes > 0]
        avg = round_half_up(sum(worked) / len(worked)) if worked else 0
        under = sum(1 for r in rows if self.is_short_day(r))
        additional = under // self._per_cl
        grace = self.grace_cl(rows)
        return DurationSummary(
            avg_minutes=avg,
            normalized_hours=_hours(avg),
            under_count=under,
            additional_cl=additional,
            grace_cl=grace,
            total_cl=grace + additional,
        )

    def hod_estimate(self, faculty: DurationSummary) -> DurationSummary:
        """Rough HOD row derived from the faculty figures.

        HODs carry no grace-based CL; their average is the faculty average plus
        a bonus, clamped to the normal working-day band.
        """
        avg = max(HOD_MIN_AVG_MINUTES, min(HOD_MAX_AVG_MINUTES, faculty.avg_minutes + HOD_DURATION_BONUS_MINUTES))
        under = max(0, round_half_up(faculty.under_count * HOD_UNDER_RATIO))
        additional = under // self._per_cl
        return DurationSummary(
            avg_minutes=avg,
            normalized_hours=_hours(avg),
            under_count=under,
            additional_cl=additional,
            grace_cl=0,
            total_cl=additional,
        )
