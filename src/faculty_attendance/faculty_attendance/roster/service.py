from __future__ import annotations

from datetime import date
from typing import Callable, Optional, Sequence

from ..attendance.distributor import build_attendance_from_counts, placeholder_attendance
from ..attendance.model import AttendanceRecord
from ..common.datetime_utils import today_local
from ..common.log import get_logger
from ..common.text_utils import to_email, to_phone
from ..core.constants import DEFAULT_EMAIL_DOMAIN, DEFAULT_WINDOW_DAYS
from ..core.enums import Role
from .classifier import DepartmentClassifier, DepartmentGroup
from .csv_source import CsvRosterRow, parse_attendance_csv
from .model import HOD, Department, FacultyMember, RosterEntry
from .tokenizer import RosterTokenizer

logger = get_logger(__name__)


class RosterService:
    """Roster text (or CSV) -> Department -> HOD -> Faculty hierarchy."""

    def __init__(
        self,
        tokenizer: Optional[RosterTokenizer] = None,
        classifier: Optional[DepartmentClassifier] = None,
        *,
        window_days: int = DEFAULT_WINDOW_DAYS,
        email_domain: str = DEFAULT_EMAIL_DOMAIN,
        today: Callable[[], date] = today_local,
    ):
        self._tokenizer = tokenizer or RosterTokenizer()
        self._classifier = classifier or DepartmentClassifier()
        self._window_days = int(window_days)
        self._email_domain = email_domain
        self._today = today

    @property
    def window_days(self) -> int:
        return self._window_days

    def today(self) -> date:
        return self._today()

    def parse_entries(self, text: str) -> list[RosterEntry]:
        return self._tokenizer.tokenize(text)

    def build_hierarchy(self, text: str) -> list[Department]:
        """Departments from roster text; everyone gets placeholder attendance."""
        entries = self.parse_entries(text)
        groups = self._classifier.group(entries, key=lambda e: e.department)
        today = self._today()
        departments = [
            self._department(g, lambda _row: placeholder_attendance(self._window_days, today=today))
            for g in groups
        ]
        logger.info("roster: %d entries -> %d departments", len(entries), len(departments))
        return departments

    def build_from_csv(self, text: str) -> list[Department]:
        """Departments from the CSV-style roster; attendance comes from counts."""
        rows = parse_attendance_csv(text)
        groups = self._classifier.group(rows, key=lambda r: r.department)
        today = self._today()

        def attendance(row: CsvRosterRow) -> list[AttendanceRecord]:
            return build_attendance_from_counts(row.present, row.absent, row.leave, self._window_days, today=today)

        departments = [self._department(g, attendance) for g in groups]
        logger.info("csv roster: %d rows -> %d departments", len(rows), len(departments))
        return departments

    def _department(self, group: DepartmentGroup, attendance) -> Department:
        faculties = [self._faculty(row, idx, group, attendance(row)) for idx, row in enumerate(group.members)]
        head = group.head
        hod = HOD(
            id=f"{group.id}-hod-1",
            name=head.name,
            department_id=group.id,
            faculties=faculties,
            attendance=attendance(head),
        )
        return Department(id=group.id, name=group.label, code=group.code, hods=[hod])

    def _faculty(self, row, idx: int, group: DepartmentGroup, records: Sequence[AttendanceRecord]) -> FacultyMember:
        return FacultyMember(
            id=row.identifier,
            name=row.name,
            role=Role.FACULTY.value,
            email=to_email(row.name, group.code, domain=self._email_domain),
            phone=to_phone(idx, group.code, group.id),
            attendance=list(records),
        )
