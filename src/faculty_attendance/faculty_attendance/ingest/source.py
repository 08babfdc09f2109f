from __future__ import annotations

import importlib.util
import threading
from pathlib import Path
from typing import Callable, Optional, Sequence

from ..common.log import get_logger
from ..core.exceptions import IngestionError
from .csv_decoder import CsvWorkbookDecoder
from .decoder import Rows, WorkbookDecoder
from .pandas_decoder import PandasWorkbookDecoder

logger = get_logger(__name__)

BytesLoader = Callable[[], bytes]


def _available(modules: Sequence[str]) -> bool:
    return all(importlib.util.find_spec(m) is not None for m in modules)


def select_decoder(candidates: Optional[Sequence[WorkbookDecoder]] = None) -> WorkbookDecoder:
    """Pick the first decoder whose modules can be imported (synchronous probe)."""
    candidates = candidates or (PandasWorkbookDecoder(), CsvWorkbookDecoder())
    for decoder in candidates:
        if _available(decoder.requires):
            return decoder
    raise IngestionError("no workbook decoder available")


def file_loader(path: str | Path) -> BytesLoader:
    def load() -> bytes:
        p = Path(path)
        if not p.is_file():
            raise IngestionError(f"workbook not found: {p}")
        return p.read_bytes()

    return load


def bytes_loader(data: bytes) -> BytesLoader:
    return lambda: data


class WorkbookRowSource:
    """Acquire and decode the workbook once; hand out the rows afterwards.

    A failed acquisition is remembered as well: callers get an empty row list
    and `error` describes what went wrong. There is no retry.
    """

    def __init__(self, loader: Optional[BytesLoader], *, decoder: Optional[WorkbookDecoder] = None):
        self._loader = loader
        self._decoder = decoder
        self._lock = threading.Lock()
        self._rows: Optional[Rows] = None
        self._error: Optional[str] = None
        self._decoder_name: Optional[str] = None

    @property
    def error(self) -> Optional[str]:
        return self._error

    @property
    def decoder_name(self) -> Optional[str]:
        return self._decoder_name

    def rows(self) -> Rows:
        with self._lock:
            if self._rows is None:
                self._rows = self._acquire()
            return list(self._rows)

    def _acquire(self) -> Rows:
        if self._loader is None:
            return []
        try:
            data = self._loader()
            decoder = self._decoder or select_decoder()
            self._decoder_name = decoder.name
            rows = decoder.decode(data)
        except (IngestionError, OSError) as e:
            self._error = str(e)
            logger.warning("workbook ingestion failed, continuing with roster only: %s", e)
            return []
        logger.info("workbook decoded with %s: %d rows", self._decoder_name, len(rows))
        return rows
