from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Hashable, Iterable, Mapping, Optional

from ..attendance.distributor import build_attendance_from_counts
from ..common.log import get_logger
from ..common.text_utils import normalize_name
from ..punches.columns import COUNT_FIELDS
from ..punches.index import PunchIndex
from ..punches.mapper import PunchRowMapper
from ..roster.model import Department, FacultyMember
from ..roster.service import RosterService

logger = get_logger(__name__)

Row = Mapping[Hashable, Any]


@dataclass(frozen=True)
class Organization:
    """Hierarchy plus the flat punch collection used for detail lookups."""

    departments: list[Department]
    punches: PunchIndex

    def to_dict(self) -> dict:
        return {
            "departments": [d.to_dict() for d in self.departments],
            "totals": {
                "departments": len(self.departments),
                "hods": sum(len(d.hods) for d in self.departments),
                "faculties": sum(d.faculty_count for d in self.departments),
                "punches": len(self.punches),
            },
        }


class OrganizationService:
    """Merge spreadsheet rows into the roster hierarchy."""

    def __init__(self, roster: Optional[RosterService] = None, mapper: Optional[PunchRowMapper] = None):
        self._roster = roster or RosterService()
        self._mapper = mapper or PunchRowMapper()

    def build(self, roster_text: str, rows: Iterable[Row] = ()) -> Organization:
        return self._assemble(self._roster.build_hierarchy(roster_text), list(rows))

    def build_from_csv(self, csv_text: str, rows: Iterable[Row] = ()) -> Organization:
        return self._assemble(self._roster.build_from_csv(csv_text), list(rows))

    def _assemble(self, departments: list[Department], rows: list[Row]) -> Organization:
        punches = PunchIndex(self._mapper.map_rows(rows))
        if rows:
            departments = self.merge_summaries(departments, rows)
        return Organization(departments=departments, punches=punches)

    def summaries_by_name(self, rows: Iterable[Row]) -> dict[str, Row]:
        """Spreadsheet rows keyed by normalized person name; later rows win."""
        resolver = self._mapper.resolver
        out: dict[str, Row] = {}
        for row in rows:
            name = normalize_name(resolver.text(row, "employee_name"))
            if name:
                out[name] = row
        return out

    def merge_summaries(self, departments: list[Department], rows: Iterable[Row]) -> list[Department]:
        """Attach matching rows to faculty and rebuild attendance from counts.

        Only faculty are matched; HODs keep the attendance they were built with.
        """
        by_name = self.summaries_by_name(rows)
        today = self._roster.today()
        matched = 0

        def merge(f: FacultyMember) -> FacultyMember:
            nonlocal matched
            row = by_name.get(normalize_name(f.name))
            if row is None:
                return f
            matched += 1
            return replace(f, excel_summary=dict(row), attendance=self._attendance_from(row, f, today))

        merged = [
            replace(d, hods=[replace(h, faculties=[merge(f) for f in h.faculties]) for h in d.hods])
            for d in departments
        ]
        logger.info("merged spreadsheet summaries into %d faculty members", matched)
        return merged

    def _attendance_from(self, row: Row, faculty: FacultyMember, today):
        resolver = self._mapper.resolver
        if not any(resolver.has(row, f) for f in COUNT_FIELDS):
            return faculty.attendance
        present, absent, leave = (resolver.value(row, f, 0) for f in COUNT_FIELDS)
        return build_attendance_from_counts(present, absent, leave, self._roster.window_days, today=today)
