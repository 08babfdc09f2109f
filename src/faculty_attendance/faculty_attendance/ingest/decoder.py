from __future__ import annotations

from typing import Any, Hashable, Protocol

Rows = list[dict[Hashable, Any]]

XLSX_MAGIC = b"PK\x03\x04"
XLS_MAGIC = b"\xd0\xcf\x11\xe0"


def looks_like_workbook(data: bytes) -> bool:
    """True for xlsx (zip) and legacy xls (OLE) payloads; anything else is text."""
    return data.startswith(XLSX_MAGIC) or data.startswith(XLS_MAGIC)


def decode_text(data: bytes) -> str:
    return data.decode("utf-8-sig", errors="replace")


class WorkbookDecoder(Protocol):
    """Turns raw workbook bytes into header -> value rows of the first sheet."""

    name: str
    requires: tuple[str, ...]

    def decode(self, data: bytes) -> Rows:
        raise NotImplementedError
