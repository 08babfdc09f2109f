from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class PunchRow:
    """Domain entity: one decoded in/out punch from the attendance workbook."""

    card_id: str
    employee_id: str
    name: str
    in_date: str
    in_time: str
    out_date: str
    out_time: str
    department: str
    organization: str
    grace_in: bool = False
    grace_out: bool = False
    late_in: bool = False
    early_out: bool = False
    duration_minutes: int = 0

    @property
    def day(self) -> str:
        return self.in_date or self.out_date

    def to_dict(self) -> dict:
        return {
            "cardId": self.card_id,
            "empId": self.employee_id,
            "name": self.name,
            "inDate": self.in_date,
            "inTime": self.in_time,
            "outDate": self.out_date,
            "outTime": self.out_time,
            "department": self.department,
            "college": self.organization,
            "graceIn": self.grace_in,
            "graceOut": self.grace_out,
            "lateIn": self.late_in,
            "earlyOut": self.early_out,
            "durationMinutes": self.duration_minutes,
        }
