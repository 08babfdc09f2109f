from __future__ import annotations

import csv
import io

from ..core.exceptions import IngestionError
from .decoder import Rows, decode_text, looks_like_workbook


class CsvWorkbookDecoder:
    """Fallback decoder: stdlib csv only, used when no spreadsheet engine is installed."""

    name = "csv"
    requires: tuple[str, ...] = ()

    def decode(self, data: bytes) -> Rows:
        if looks_like_workbook(data):
            raise IngestionError("binary workbook received but no spreadsheet engine is available")
        try:
            reader = csv.DictReader(io.StringIO(decode_text(data)))
            rows = []
            for record in reader:
                rows.append({str(k).strip(): ("" if v is None else v) for k, v in record.items() if k is not None})
        except csv.Error as e:
            raise IngestionError(f"csv could not decode workbook: {e}") from e
        return rows
