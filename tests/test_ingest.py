import pytest

from src.faculty_attendance.faculty_attendance.core.enums import ExportKind
from src.faculty_attendance.faculty_attendance.core.exceptions import IngestionError
from src.faculty_attendance.faculty_attendance.ingest.csv_decoder import CsvWorkbookDecoder
from src.faculty_attendance.faculty_attendance.ingest.decoder import looks_like_workbook
from src.faculty_attendance.faculty_attendance.ingest.pandas_decoder import PandasWorkbookDecoder
from src.faculty_attendance.faculty_attendance.ingest.source import WorkbookRowSource, bytes_loader, file_loader, select_decoder
from src.faculty_attendance.faculty_attendance.reports.export import rows_to_xlsx

CSV_BYTES = "\ufeffEmployee Name ,Present,In Time\nAsha Rao,3,9:05\nRavi Kumar,,\n".encode("utf-8")


class FakeDecoder:
    def __init__(self, name, requires=(), rows=None):
        self.name = name
        self.requires = requires
        self._rows = rows or []

    def decode(self, data):
        return list(self._rows)


class CountingLoader:
    def __init__(self, data=b"", error=None):
        self.calls = 0
        self._data = data
        self._error = error

    def __call__(self):
        self.calls += 1
        if self._error:
            raise self._error
        return self._data


def test_pandas_decodes_csv_text():
    rows = PandasWorkbookDecoder().decode(CSV_BYTES)

    assert rows == [
        {"Employee Name": "Asha Rao", "Present": "3", "In Time": "9:05"},
        {"Employee Name": "Ravi Kumar", "Present": "", "In Time": ""},
    ]


def test_pandas_decodes_xlsx_first_sheet():
    data = rows_to_xlsx([{"Employee Name": "Asha Rao", "Present": 3}], ExportKind.PEOPLE)

    assert looks_like_workbook(data)
    rows = PandasWorkbookDecoder().decode(data)

    assert rows[0]["Employee Name"] == "Asha Rao"
    assert rows[0]["Present"] == 3


def test_pandas_wraps_broken_workbook():
    with pytest.raises(IngestionError):
        PandasWorkbookDecoder().decode(b"PK\x03\x04 not really a zip")


def test_csv_decoder_reads_text():
    rows = CsvWorkbookDecoder().decode(CSV_BYTES)

    assert rows[0] == {"Employee Name": "Asha Rao", "Present": "3", "In Time": "9:05"}
    assert rows[1]["Present"] == ""


def test_csv_decoder_rejects_binary_workbooks():
    with pytest.raises(IngestionError):
        CsvWorkbookDecoder().decode(b"PK\x03\x04...")
    with pytest.raises(IngestionError):
        CsvWorkbookDecoder().decode(b"\xd0\xcf\x11\xe0...")


def test_select_decoder_falls_back_when_modules_are_missing():
    missing = FakeDecoder("engine", requires=("no_such_spreadsheet_engine_xyz",))
    fallback = FakeDecoder("fallback")

    assert select_decoder([missing, fallback]) is fallback
    assert select_decoder().name == "pandas"


def test_select_decoder_without_candidates_raises():
    with pytest.raises(IngestionError):
        select_decoder([FakeDecoder("engine", requires=("no_such_spreadsheet_engine_xyz",))])


def test_source_acquires_once():
    loader = CountingLoader(b"data")
    source = WorkbookRowSource(loader, decoder=FakeDecoder("fake", rows=[{"Name": "A"}]))

    assert source.rows() == [{"Name": "A"}]
    assert source.rows() == [{"Name": "A"}]
    assert loader.calls == 1
    assert source.error is None
    assert source.decoder_name == "fake"


def test_failed_acquisition_gives_empty_rows_and_error():
    loader = CountingLoader(error=OSError("disk gone"))
    source = WorkbookRowSource(loader)

    assert source.rows() == []
    assert source.rows() == []
    assert loader.calls == 1
    assert "disk gone" in source.error


def test_missing_file(tmp_path):
    source = WorkbookRowSource(file_loader(tmp_path / "absent.xlsx"))

    assert source.rows() == []
    assert "workbook not found" in source.error


def test_no_loader_means_no_rows():
    source = WorkbookRowSource(None)

    assert source.rows() == []
    assert source.error is None


def test_bytes_loader_with_selected_decoder():
    source = WorkbookRowSource(bytes_loader(CSV_BYTES))

    assert [r["Employee Name"] for r in source.rows()] == ["Asha Rao", "Ravi Kumar"]
    assert source.decoder_name == "pandas"
