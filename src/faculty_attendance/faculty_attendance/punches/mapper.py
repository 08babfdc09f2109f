from __future__ import annotations

from typing import Any, Hashable, Iterable, Mapping, Optional

from ..common.datetime_utils import parse_date, parse_time, to_bool
from ..common.log import get_logger
from ..core.constants import AGGREGATE_MARKERS
from .calculator.base import DurationCalculator
from .calculator.standard_calculator import StandardDurationCalculator
from .columns import ColumnResolver
from .model import PunchRow

logger = get_logger(__name__)

Row = Mapping[Hashable, Any]


class PunchRowMapper:
    """Turn decoded spreadsheet rows into canonical PunchRow entities."""

    def __init__(
        self,
        resolver: Optional[ColumnResolver] = None,
        *,
        calculator: Optional[DurationCalculator] = None,
    ):
        self._resolver = resolver or ColumnResolver()
        self._calculator = calculator or StandardDurationCalculator()

    @property
    def resolver(self) -> ColumnResolver:
        return self._resolver

    def map_row(self, row: Row) -> PunchRow:
        r = self._resolver
        in_date = parse_date(r.value(row, "in_date"))
        in_time = parse_time(r.value(row, "in_time"))
        out_date = parse_date(r.value(row, "out_date"))
        out_time = parse_time(r.value(row, "out_time"))

        grace_in = to_bool(r.value(row, "grace_in", False))
        grace_out = to_bool(r.value(row, "grace_out", False))
        # no dedicated lateness column -> the grace flag stands in
        late_in = to_bool(r.value(row, "late_in")) if r.has(row, "late_in") else grace_in
        early_out = to_bool(r.value(row, "early_out")) if r.has(row, "early_out") else grace_out

        return PunchRow(
            card_id=r.text(row, "card_id"),
            employee_id=r.text(row, "employee_id"),
            name=r.text(row, "employee_name"),
            in_date=in_date,
            in_time=in_time,
            out_date=out_date,
            out_time=out_time,
            department=r.text(row, "department"),
            organization=r.text(row, "organization"),
            grace_in=grace_in,
            grace_out=grace_out,
            late_in=late_in,
            early_out=early_out,
            duration_minutes=self._calculator.duration_minutes(
                in_date=in_date, in_time=in_time, out_date=out_date, out_time=out_time
            ),
        )

    def map_rows(self, rows: Iterable[Row]) -> list[PunchRow]:
        """Map every usable row; nameless and total/summary rows are skipped."""
        out: list[PunchRow] = []
        skipped = 0
        for row in rows:
            punch = self.map_row(row)
            if not punch.name or punch.name in AGGREGATE_MARKERS:
                skipped += 1
                continue
            out.append(punch)
        if skipped:
            logger.debug("skipped %d punch rows without a person name", skipped)
        return out
