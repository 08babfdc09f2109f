from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Optional

from ..attendance.model import AttendanceRecord
from ..core.enums import Role


@dataclass(frozen=True)
class RosterEntry:
    """One person tokenized out of the roster text.

    `organization`, `period` and `count` come from the trailing metadata of the
    entry (e.g. ``TINT 2025-08 18``) and are carried along untouched.
    """

    identifier: str
    name: str
    department: str
    organization: Optional[str] = None
    period: Optional[str] = None
    count: Optional[int] = None


@dataclass(frozen=True)
class FacultyMember:
    id: str
    name: str
    role: str
    email: str
    phone: str
    attendance: list[AttendanceRecord] = field(default_factory=list)
    excel_summary: Optional[dict[str, Any]] = None

    def to_dict(self) -> dict:
        data = {
            "id": self.id,
            "name": self.name,
            "role": self.role,
            "email": self.email,
            "phone": self.phone,
            "attendance": [r.to_dict() for r in self.attendance],
        }
        if self.excel_summary is not None:
            data["excelSummary"] = {str(k): _plain(v) for k, v in self.excel_summary.items()}
        return data


@dataclass(frozen=True)
class HOD:
    id: str
    name: str
    department_id: str
    faculties: list[FacultyMember] = field(default_factory=list)
    attendance: list[AttendanceRecord] = field(default_factory=list)
    role: str = Role.HOD.value

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "departmentId": self.department_id,
            "role": self.role,
            "attendance": [r.to_dict() for r in self.attendance],
            "faculties": [f.to_dict() for f in self.faculties],
        }


@dataclass(frozen=True)
class Department:
    id: str
    name: str
    code: str
    hods: list[HOD] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "code": self.code,
            "hods": [h.to_dict() for h in self.hods],
        }

    @property
    def faculty_count(self) -> int:
        return sum(len(h.faculties) for h in self.hods)


def _plain(value: Any) -> Any:
    """Spreadsheet cells may hold dates or numpy scalars; keep JSON-friendly."""
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if hasattr(value, "isoformat"):
        return value.isoformat()
    if hasattr(value, "item"):
        return value.item()
    return str(value)
