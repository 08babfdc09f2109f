from __future__ import annotations

import io
import zipfile

import pandas as pd

from ..core.exceptions import IngestionError
from .decoder import Rows, decode_text, looks_like_workbook


class PandasWorkbookDecoder:
    """Primary decoder: pandas (openpyxl engine) for workbooks, read_csv for text."""

    name = "pandas"
    requires = ("pandas", "openpyxl")

    def decode(self, data: bytes) -> Rows:
        try:
            if looks_like_workbook(data):
                df = pd.read_excel(io.BytesIO(data), sheet_name=0, dtype=object)
            else:
                df = pd.read_csv(io.StringIO(decode_text(data)), dtype=str, keep_default_na=False)
        except (ValueError, ImportError, OSError, KeyError, zipfile.BadZipFile, pd.errors.ParserError) as e:
            raise IngestionError(f"pandas could not decode workbook: {e}") from e

        df = df.astype(object).where(df.notna(), "")
        df.columns = [str(c).strip() for c in df.columns]
        return df.to_dict(orient="records")
