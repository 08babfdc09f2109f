from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """One day of a person's attendance window."""

    date: str
    status: AttendanceStatus

    def to_dict(self) -> dict:
        return {"date": self.date, "status": self.status.value}


@dataclass(frozen=True)
class AttendanceCounts:
    """Raw present/absent/leave counts read from a summary row."""

    present: float = 0
    absent: float = 0
    leave: float = 0

    @property
    def total(self) -> float:
        return self.present + self.absent + self.leave
