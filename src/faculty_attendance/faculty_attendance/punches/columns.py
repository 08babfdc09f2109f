from __future__ import annotations

import re
import threading
from collections import OrderedDict
from dataclasses import dataclass
from typing import Any, Hashable, Iterable, Mapping, Optional, Pattern

from ..common.text_utils import normalize_name


@dataclass(frozen=True)
class FieldRule:
    """How to find one semantic field among arbitrary headers.

    `patterns` are tried in priority order, each against every header
    (lower-cased); `aliases` are compared with whitespace-normalized equality
    when no pattern hits.

    Pattern order outranks header order: every header is tried against the
    first pattern before the second is tried. With headers ``Card Id,
    Employee ID`` the employee id resolves to ``Employee ID`` even though the
    looser ``id$`` would have matched the first header.
    """

    patterns: tuple[Pattern[str], ...]
    aliases: tuple[str, ...] = ()


def _rule(*patterns: str, aliases: tuple[str, ...] = ()) -> FieldRule:
    return FieldRule(patterns=tuple(re.compile(p, re.IGNORECASE) for p in patterns), aliases=aliases)


FIELD_RULES: dict[str, FieldRule] = {
    "card_id": _rule(r"card\s*id", r"card\s*no", r"card\s*number", aliases=("Card", "Badge No")),
    "employee_id": _rule(r"employee\s*id", r"emp\s*id", r"id$", aliases=("Emp Code", "Employee Code", "Staff No")),
    "employee_name": _rule(r"employee\s*name", r"name", aliases=("Staff", "Faculty")),
    "department": _rule(r"department", r"dept", aliases=("Branch", "Section")),
    "organization": _rule(r"college", r"institute", r"org", aliases=("Campus", "Unit")),
    "in_date": _rule(r"in\s*date", r"date\s*in", r"entry\s*date", aliases=("Date", "Punch Date", "Attendance Date")),
    "in_time": _rule(r"in\s*time", r"time\s*in", r"entry\s*time", aliases=("Check In", "First Punch")),
    "out_date": _rule(r"out\s*date", r"date\s*out", r"exit\s*date", aliases=("Date", "Punch Date", "Attendance Date")),
    "out_time": _rule(r"out\s*time", r"time\s*out", r"exit\s*time", aliases=("Check Out", "Last Punch")),
    "grace_in": _rule(r"grace\s*in", r"late\s*in"),
    "grace_out": _rule(r"grace\s*out", r"early\s*out"),
    "late_in": _rule(r"late\s*in"),
    "early_out": _rule(r"early\s*out"),
    "present": _rule(r"\bpresent\b", r"^p$", aliases=("Days Present",)),
    "absent": _rule(r"\babsent\b", r"^a$", aliases=("Days Absent",)),
    "leave": _rule(r"\bleave\b", r"^l$", aliases=("Leaves",)),
}

COUNT_FIELDS = ("present", "absent", "leave")

MAX_HEADER_SHAPES = 32


def find_key(
    headers: Iterable[Hashable],
    patterns: Iterable[Pattern[str]],
    aliases: Iterable[str] = (),
) -> Optional[Hashable]:
    """Return the header matching a field, or None. Never raises."""
    keys = list(headers)
    for pattern in patterns:
        for key in keys:
            if pattern.search(str(key).lower()):
                return key
    for alias in aliases:
        wanted = normalize_name(alias)
        for key in keys:
            if normalize_name(key) == wanted:
                return key
    return None


def resolve_value(row: Mapping[Hashable, Any], rule: FieldRule, default: Any = "") -> Any:
    key = find_key(row.keys(), rule.patterns, rule.aliases)
    if key is None:
        return default
    return row.get(key, default)


class ColumnResolver:
    """Resolve semantic fields on spreadsheet rows.

    Lookups are memoized per header shape (the ordered tuple of headers), so a
    workbook whose rows share one header row is scanned only once. At most
    `max_shapes` shapes are kept; the least recently used one is dropped.
    """

    def __init__(self, rules: Optional[Mapping[str, FieldRule]] = None, *, max_shapes: int = MAX_HEADER_SHAPES):
        self._rules = dict(rules or FIELD_RULES)
        self._max_shapes = max(int(max_shapes), 1)
        self._memo: OrderedDict[tuple, dict[str, Optional[Hashable]]] = OrderedDict()
        self._lock = threading.Lock()

    @property
    def fields(self) -> tuple[str, ...]:
        return tuple(self._rules)

    def keys_for(self, row: Mapping[Hashable, Any]) -> dict[str, Optional[Hashable]]:
        fingerprint = tuple(row.keys())
        with self._lock:
            return self._resolve(fingerprint)

    def _resolve(self, fingerprint: tuple) -> dict[str, Optional[Hashable]]:
        resolved = self._memo.get(fingerprint)
        if resolved is not None:
            self._memo.move_to_end(fingerprint)
            return resolved

        resolved = {name: find_key(fingerprint, rule.patterns, rule.aliases) for name, rule in self._rules.items()}
        self._memo[fingerprint] = resolved
        while len(self._memo) > self._max_shapes:
            self._memo.popitem(last=False)
        return resolved

    def key(self, row: Mapping[Hashable, Any], field: str) -> Optional[Hashable]:
        return self.keys_for(row).get(field)

    def has(self, row: Mapping[Hashable, Any], field: str) -> bool:
        return self.key(row, field) is not None

    def value(self, row: Mapping[Hashable, Any], field: str, default: Any = "") -> Any:
        key = self.key(row, field)
        if key is None:
            return default
        value = row.get(key, default)
        return default if value is None else value

    def text(self, row: Mapping[Hashable, Any], field: str) -> str:
        value = self.value(row, field)
        if isinstance(value, float) and value != value:
            return ""
        if isinstance(value, float) and value.is_integer():
            # numeric ids come back from spreadsheets as 1001.0
            return str(int(value))
        return str(value).strip()

    def cache_size(self) -> int:
        with self._lock:
            return len(self._memo)
