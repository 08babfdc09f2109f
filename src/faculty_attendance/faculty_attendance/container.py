from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping

from .core.constants import DEFAULT_EMAIL_DOMAIN, DEFAULT_ID_PREFIX, DEFAULT_WINDOW_DAYS
from .ingest.source import WorkbookRowSource, file_loader
from .leave.service import LeaveCreditService
from .organization.dashboard import DashboardService, read_roster
from .organization.service import OrganizationService
from .punches.columns import ColumnResolver
from .punches.mapper import PunchRowMapper
from .reports.service import ReportService
from .roster.service import RosterService
from .roster.tokenizer import RosterTokenizer


@dataclass(frozen=True)
class Container:
    roster_service: RosterService
    punch_mapper: PunchRowMapper
    organization_service: OrganizationService
    leave_service: LeaveCreditService
    report_service: ReportService
    dashboard_service: DashboardService


def build_container(*, settings: Mapping[str, Any]) -> Container:
    roster_service = RosterService(
        RosterTokenizer(id_prefix=str(settings.get("ID_PREFIX") or DEFAULT_ID_PREFIX)),
        window_days=int(settings.get("WINDOW_DAYS") or DEFAULT_WINDOW_DAYS),
        email_domain=str(settings.get("EMAIL_DOMAIN") or DEFAULT_EMAIL_DOMAIN),
    )
    punch_mapper = PunchRowMapper(ColumnResolver())
    organization_service = OrganizationService(roster_service, punch_mapper)
    leave_service = LeaveCreditService()
    report_service = ReportService(leave_service)

    workbook_path = str(settings.get("WORKBOOK_PATH") or "")
    rows = WorkbookRowSource(file_loader(workbook_path) if workbook_path else None)
    dashboard_service = DashboardService(
        organization_service,
        roster_text=read_roster(str(settings.get("ROSTER_PATH") or "")),
        rows=rows,
    )

    return Container(
        roster_service=roster_service,
        punch_mapper=punch_mapper,
        organization_service=organization_service,
        leave_service=leave_service,
        report_service=report_service,
        dashboard_service=dashboard_service,
    )
