from __future__ import annotations

import re
import warnings
from datetime import date, datetime, time, timedelta
from typing import Any, Optional

import pandas as pd

_DAY_FIRST = re.compile(r"(?<!\d)(\d{1,2})[/-](\d{1,2})[/-](\d{2,4})(?!\d)")
_CLOCK = re.compile(r"(\d{1,2}):(\d{1,2})")
_CLOCK_TEXT = re.compile(r"\d{1,2}:\d{1,2}(:\d{1,2})?\s*([ap]\.?m\.?)?", re.IGNORECASE)
_YEAR = re.compile(r"(?<!\d)\d{4}(?!\d)")

MIN_YEAR = 1900
RELATIVE_WORDS = frozenset({"now", "today", "tomorrow", "yesterday"})

TRUE_WORDS = frozenset({"yes", "y", "true", "1"})
FALSE_WORDS = frozenset({"no", "n", "false", "0"})


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    try:
        return bool(pd.isna(value))
    except (TypeError, ValueError):
        return False


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now().date()


def window_dates(days: int, *, end: Optional[date] = None) -> list[str]:
    """ISO dates of the `days` calendar days ending at `end`, oldest first."""
    end = end or today_local()
    return [(end - timedelta(days=offset)).isoformat() for offset in range(days - 1, -1, -1)]


def _general_date(text: str) -> str:
    # only text with an explicit four-digit year reaches the general parser;
    # bare numbers, clock values and relative words never do
    if text.isdigit() or _CLOCK_TEXT.fullmatch(text) or text.lower() in RELATIVE_WORDS:
        return ""
    if not _YEAR.search(text):
        return ""
    with warnings.catch_warnings():
        warnings.simplefilter("ignore")
        try:
            parsed = pd.to_datetime(text, errors="coerce")
        except (TypeError, ValueError, OverflowError):
            return ""
    if _is_missing(parsed) or parsed.year < MIN_YEAR:
        return ""
    return parsed.date().isoformat()


def _day_first_date(text: str) -> str:
    m = _DAY_FIRST.search(text)
    if not m:
        return ""
    dd, mm, yyyy = m.groups()
    year = int(f"20{yyyy}" if len(yyyy) == 2 else yyyy)
    if year < MIN_YEAR:
        return ""
    try:
        return date(year, int(mm), int(dd)).isoformat()
    except ValueError:
        return ""


def parse_date(value: Any) -> str:
    """Normalize a date cell to YYYY-MM-DD, or "" when nothing parses.

    Native date values pass straight through; text goes through general
    calendar parsing first and a numeric D/M/Y (or D-M-Y) pattern second.
    Two-digit years are taken to be in the 2000s. Text without a year (or
    with one before 1900) and relative words such as "now" give "".
    """
    if _is_missing(value):
        return ""
    if isinstance(value, datetime):
        return value.date().isoformat()
    if isinstance(value, date):
        return value.isoformat()

    text = str(value).strip()
    if not text:
        return ""
    return _general_date(text) or _day_first_date(text)


def parse_time(value: Any) -> str:
    """Extract the first H:MM / HH:MM clock value as zero-padded HH:MM."""
    if _is_missing(value):
        return ""
    if isinstance(value, (datetime, time)):
        return value.strftime("%H:%M")

    text = str(value).strip()
    m = _CLOCK.search(text)
    if not m:
        return ""
    hours, minutes = m.groups()
    return f"{hours.zfill(2)}:{minutes.zfill(2)}"


def to_bool(value: Any) -> bool:
    if _is_missing(value):
        return False
    word = " ".join(str(value).split()).lower()
    if word in TRUE_WORDS:
        return True
    if word in FALSE_WORDS:
        return False
    return bool(value)


def combine(day: str, clock: str) -> Optional[datetime]:
    """Join an ISO date and an HH:MM time; None when either is unusable."""
    if not day or not clock:
        return None
    try:
        return datetime.strptime(f"{day} {clock}", "%Y-%m-%d %H:%M")
    except ValueError:
        return None
