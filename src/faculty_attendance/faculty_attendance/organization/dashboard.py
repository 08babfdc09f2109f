from __future__ import annotations

import threading
from pathlib import Path
from typing import Optional

from ..common.log import get_logger
from ..ingest.source import WorkbookRowSource
from .service import Organization, OrganizationService

logger = get_logger(__name__)


def read_roster(path: str) -> str:
    """Roster text from disk; a missing file yields an empty roster."""
    if not path:
        return ""
    p = Path(path)
    if not p.is_file():
        logger.warning("roster file not found: %s", p)
        return ""
    return p.read_text(encoding="utf-8")


class DashboardService:
    """The organization built from the configured roster and workbook.

    Built on first use and reused for the lifetime of the app.
    """

    def __init__(self, organizations: OrganizationService, *, roster_text: str, rows: WorkbookRowSource):
        self._organizations = organizations
        self._roster_text = roster_text
        self._rows = rows
        self._lock = threading.Lock()
        self._current: Optional[Organization] = None

    @property
    def ingestion_error(self) -> Optional[str]:
        return self._rows.error

    def current(self) -> Organization:
        with self._lock:
            if self._current is None:
                self._current = self._organizations.build(self._roster_text, self._rows.rows())
            return self._current
