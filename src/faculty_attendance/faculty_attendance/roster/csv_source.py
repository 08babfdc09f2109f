from __future__ import annotations

import io
from dataclasses import dataclass
from typing import Any, Optional, Sequence

import pandas as pd

from ..common.log import get_logger
from ..common.numbers import to_count
from .classifier import normalize_code

logger = get_logger(__name__)

CSV_COLUMNS = {
    "identifier": "Employee ID",
    "name": "Employee Name",
    "department": "Department",
    "present": "Present",
    "absent": "Absent",
    "leave": "Leave",
}


@dataclass(frozen=True)
class CsvRosterRow:
    """One person of the CSV-style roster with raw summary counts."""

    identifier: str
    name: str
    department: str
    present: float = 0
    absent: float = 0
    leave: float = 0


def _column(columns: Sequence[str], label: str) -> Optional[int]:
    wanted = label.lower()
    for i, c in enumerate(columns):
        if wanted in c.lower():
            return i
    return None


def _cell(values: Sequence[Any], index: Optional[int]) -> str:
    if index is None:
        return ""
    value = values[index]
    # short lines are padded with NaN even with keep_default_na=False
    if not isinstance(value, str):
        return ""
    return value.strip()


def parse_attendance_csv(text: str) -> list[CsvRosterRow]:
    """Read the CSV-style roster: a header row then one person per line.

    Columns are found by case-insensitive substring of their label. Rows
    missing an id, a name or a department are skipped.
    """
    text = (text or "").strip()
    if not text:
        return []
    try:
        df = pd.read_csv(
            io.StringIO(text),
            dtype=str,
            keep_default_na=False,
            index_col=False,
            on_bad_lines="skip",
        )
    except (pd.errors.EmptyDataError, pd.errors.ParserError) as e:
        logger.warning("csv roster could not be read: %s", e)
        return []

    columns = [str(c).strip() for c in df.columns]
    idx = {key: _column(columns, label) for key, label in CSV_COLUMNS.items()}

    rows: list[CsvRosterRow] = []
    for values in df.itertuples(index=False, name=None):
        identifier = _cell(values, idx["identifier"])
        name = _cell(values, idx["name"])
        department = normalize_code(_cell(values, idx["department"]))
        if not identifier or not name or not department:
            logger.debug("skipping csv roster line: %s", values)
            continue
        rows.append(
            CsvRosterRow(
                identifier=identifier,
                name=name,
                department=department,
                present=to_count(_cell(values, idx["present"])),
                absent=to_count(_cell(values, idx["absent"])),
                leave=to_count(_cell(values, idx["leave"])),
            )
        )
    return rows
