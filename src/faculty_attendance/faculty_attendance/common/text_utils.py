from __future__ import annotations

import re
from typing import Any

_NON_LETTERS = re.compile(r"[^a-z]+")


def normalize_name(value: Any) -> str:
    """Case-fold, collapse whitespace and trim. Used as the person lookup key."""
    if value is None:
        return ""
    return " ".join(str(value).split()).lower()


def collapse_spaces(value: str) -> str:
    return " ".join(value.split())


def to_email(name: str, code: str, *, domain: str) -> str:
    handle = _NON_LETTERS.sub(".", name.lower()).strip(".")
    return f"{handle}@{code.lower()}.{domain}"


def to_phone(index: int, code: str, dept_id: str) -> str:
    """Derived contact number; stable for a given position in a department."""
    return f"+91 98{index}{len(code)}{len(dept_id)}0{(index + 3) % 10}{(index + 6) % 10}"
