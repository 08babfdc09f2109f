from __future__ import annotations

import re
from dataclasses import dataclass, field
from typing import Optional, Sequence

from ..common.log import get_logger
from ..core.constants import ADMIN_CODE, AGGREGATE_MARKERS, DEFAULT_ID_PREFIX
from ..core.enums import ScanState
from ..core.exceptions import MalformedEntryError
from .model import RosterEntry

logger = get_logger(__name__)

_PERIOD = re.compile(r"^\d{4}-\d{2}$")


@dataclass(frozen=True)
class DepartmentKeywords:
    """Department markers the tokenizer stops a name at.

    `single` holds one-word markers, `sequences` two-word markers that are
    consumed together (title token + continuation). Markers listed in
    `admin_markers` are reported as the single administrative code.
    """

    single: frozenset[str]
    sequences: tuple[tuple[str, str], ...] = ()
    admin_markers: frozenset[str] = field(default_factory=frozenset)

    def match(self, words: Sequence[str], index: int) -> int:
        """Number of words forming a department marker at `index` (0 if none)."""
        word = words[index]
        nxt = words[index + 1] if index + 1 < len(words) else None
        for first, second in self.sequences:
            if word == first and nxt == second:
                return 2
        return 1 if word in self.single else 0

    def normalize(self, marker: str) -> str:
        return ADMIN_CODE if marker in self.admin_markers else marker


DEFAULT_KEYWORDS = DepartmentKeywords(
    single=frozenset(
        {"AEIE", "BSH", "CE", "CSE", "ECE", "EE", "IT", "MBA", "MCA", "ME", "Admin", "PRINCIPAL", "ASST.", "REGISTRATAR"}
    ),
    sequences=(("ASST.", "REGISTRATAR"),),
    admin_markers=frozenset({"Admin", "PRINCIPAL", "ASST.", "REGISTRATAR", "ASST. REGISTRATAR"}),
)


@dataclass
class _Pending:
    identifier: str
    name_words: list[str] = field(default_factory=list)
    department: Optional[str] = None
    trailing: list[str] = field(default_factory=list)


class RosterTokenizer:
    """Finite-state scanner turning the roster blob into RosterEntry items.

    EXPECT_IDENTIFIER -> SCANNING_NAME on an identifier token,
    SCANNING_NAME -> DEPT_FOUND on a department marker,
    any state -> SCANNING_NAME on the next identifier token.
    """

    def __init__(self, keywords: DepartmentKeywords = DEFAULT_KEYWORDS, *, id_prefix: str = DEFAULT_ID_PREFIX):
        self._keywords = keywords
        self._identifier = re.compile(rf"^{re.escape(id_prefix)}\d+$")

    def is_identifier(self, word: str) -> bool:
        return bool(self._identifier.match(word))

    def tokenize(self, text: str) -> list[RosterEntry]:
        words = (text or "").split()
        entries: list[RosterEntry] = []
        state = ScanState.EXPECT_IDENTIFIER
        pending: Optional[_Pending] = None

        i = 0
        while i < len(words):
            word = words[i]
            if self.is_identifier(word):
                self._emit(pending, entries)
                pending = _Pending(identifier=word)
                state = ScanState.SCANNING_NAME
                i += 1
                continue

            if state == ScanState.SCANNING_NAME:
                consumed = self._keywords.match(words, i)
                if consumed:
                    pending.department = " ".join(words[i : i + consumed])
                    state = ScanState.DEPT_FOUND
                    i += consumed
                    continue
                pending.name_words.append(word)
            elif state == ScanState.DEPT_FOUND:
                pending.trailing.append(word)
            # EXPECT_IDENTIFIER: text before the first identifier is dropped
            i += 1

        self._emit(pending, entries)
        return entries

    def _emit(self, pending: Optional[_Pending], entries: list[RosterEntry]) -> None:
        if pending is None:
            return
        try:
            entries.append(self._build(pending))
        except MalformedEntryError as e:
            logger.debug("skipping roster entry %s: %s", pending.identifier, e)

    def _build(self, pending: _Pending) -> RosterEntry:
        name = " ".join(pending.name_words).strip()
        if not name:
            raise MalformedEntryError("empty name")
        if all(w in AGGREGATE_MARKERS for w in pending.name_words):
            raise MalformedEntryError("aggregate row")
        if not pending.department:
            raise MalformedEntryError("no department marker")

        organization, period, count = _split_trailing(pending.trailing)
        return RosterEntry(
            identifier=pending.identifier,
            name=name,
            department=self._keywords.normalize(pending.department),
            organization=organization,
            period=period,
            count=count,
        )


def _split_trailing(words: Sequence[str]) -> tuple[Optional[str], Optional[str], Optional[int]]:
    organization = period = None
    count = None
    for w in words:
        if w in AGGREGATE_MARKERS:
            break
        if _PERIOD.match(w):
            period = period or w
        elif w.isdigit():
            if count is None:
                count = int(w)
        elif organization is None:
            organization = w
    return organization, period, count
