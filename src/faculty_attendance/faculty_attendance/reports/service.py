from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional

from ..leave.model import CumulativeSummary, DurationSummary
from ..leave.service import LeaveCreditService
from ..punches.index import DepartmentPeople
from ..punches.model import PunchRow


@dataclass(frozen=True)
class SummaryReport:
    cumulative: CumulativeSummary
    faculty: DurationSummary
    hod: DurationSummary

    def to_dict(self) -> dict:
        return {
            "cumulative": self.cumulative.to_dict(),
            "duration": {"faculty": self.faculty.to_dict(), "hod": self.hod.to_dict()},
        }


class ReportService:
    """Flat table rows for the detail, cumulative, duration and people reports."""

    def __init__(self, leave: Optional[LeaveCreditService] = None):
        self._leave = leave or LeaveCreditService()

    def summary(self, punches: Iterable[PunchRow]) -> SummaryReport:
        punches = list(punches)
        faculty = self._leave.duration(punches)
        return SummaryReport(
            cumulative=self._leave.cumulative(punches),
            faculty=faculty,
            hod=self._leave.hod_estimate(faculty),
        )

    def detailed_rows(self, punches: Iterable[PunchRow]) -> list[dict]:
        return [
            {
                "Card Id": p.card_id,
                "Employee ID": p.employee_id,
                "Employee Name": p.name,
                "In Date": p.in_date,
                "In Time": p.in_time,
                "Out Date": p.out_date,
                "Out Time": p.out_time,
                "Department": p.department,
                "College": p.organization,
            }
            for p in punches
        ]

    def cumulative_rows(self, punches: Iterable[PunchRow]) -> list[dict]:
        c = self._leave.cumulative(punches)
        return [
            {
                "Grace In": c.grace_in_count,
                "Grace Out": c.grace_out_count,
                "Late In": c.late_in_count,
                "Early Out": c.early_out_count,
                "# Late In (cumulative)": c.late_in_count,
                "# Early Out (cum)": c.early_out_count,
                "# Double Grace (cumulative)": c.double_grace,
                "# Observations (cumulative)": c.observations,
                "# CLs (cumulative)": c.cls,
            }
        ]

    def duration_rows(self, punches: Iterable[PunchRow]) -> list[dict]:
        report = self.summary(punches)
        return [
            self._duration_row("Faculty", report.faculty),
            self._duration_row("HOD (rough)", report.hod),
        ]

    def people_rows(self, people: Iterable[DepartmentPeople]) -> list[dict]:
        return [
            {
                "Department": p.department,
                "HOD": p.hod or "",
                "People Count": p.count,
                "People": ", ".join(p.names),
            }
            for p in people
        ]

    @staticmethod
    def _duration_row(role: str, d: DurationSummary) -> dict:
        return {
            "Role": role,
            "Duration": f"{d.avg_minutes} min (avg)",
            "Normalized Duration": f"{d.normalized_hours} h",
            "Avg Monthly Duration": f"{d.normalized_hours} h",
            "Avg <7.5h": d.under_count,
            "Addnl CL for Average Duration": d.additional_cl,
            "Total CL": d.total_cl,
        }
