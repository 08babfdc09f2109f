from __future__ import annotations

import io
from datetime import date
from typing import Optional

import pandas as pd

from ..common.datetime_utils import today_local
from ..core.enums import ExportKind

SHEETS = {
    ExportKind.DETAILED: ("Detailed Punches", "detailed-punches"),
    ExportKind.CUMULATIVE: ("Cumulative", "cumulative"),
    ExportKind.DURATION: ("Duration & CL", "duration-cl"),
    ExportKind.PEOPLE: ("Dept People", "dept-people"),
}


def export_filename(kind: ExportKind, *, today: Optional[date] = None) -> str:
    _, prefix = SHEETS[kind]
    return f"{prefix}-{(today or today_local()).isoformat()}.xlsx"


def rows_to_xlsx(rows: list[dict], kind: ExportKind) -> bytes:
    """Write one sheet with the given rows; column order follows the first row."""
    sheet_name, _ = SHEETS[kind]
    df = pd.DataFrame(rows)
    out = io.BytesIO()
    with pd.ExcelWriter(out, engine="openpyxl") as writer:
        df.to_excel(writer, index=False, sheet_name=sheet_name)
    return out.getvalue()
