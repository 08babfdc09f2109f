from datetime import date

from src.faculty_attendance.faculty_attendance.core.enums import ExportKind
from src.faculty_attendance.faculty_attendance.punches.index import DepartmentPeople
from src.faculty_attendance.faculty_attendance.punches.model import PunchRow
from src.faculty_attendance.faculty_attendance.reports.export import export_filename, rows_to_xlsx
from src.faculty_attendance.faculty_attendance.reports.service import ReportService


def _punch(name, minutes, *, late=False):
    return PunchRow(
        card_id="C-1",
        employee_id="TIG1",
        name=name,
        in_date="2024-01-02",
        in_time="09:00",
        out_date="2024-01-02",
        out_time="17:00",
        department="CSE",
        organization="TINT",
        grace_in=late,
        late_in=late,
        duration_minutes=minutes,
    )


ROWS = [_punch("Asha Rao", 480, late=True), _punch("Asha Rao", 420, late=True), _punch("Ravi Kumar", 400, late=True)]


def test_summary_report():
    report = ReportService().summary(ROWS)
    data = report.to_dict()

    assert report.faculty.avg_minutes == 433
    assert report.faculty.under_count == 2
    assert report.hod.avg_minutes == 450
    assert data["cumulative"]["late_in_count"] == 3
    assert set(data["duration"]) == {"faculty", "hod"}


def test_detailed_rows():
    rows = ReportService().detailed_rows(ROWS[:1])

    assert rows == [
        {
            "Card Id": "C-1",
            "Employee ID": "TIG1",
            "Employee Name": "Asha Rao",
            "In Date": "2024-01-02",
            "In Time": "09:00",
            "Out Date": "2024-01-02",
            "Out Time": "17:00",
            "Department": "CSE",
            "College": "TINT",
        }
    ]


def test_cumulative_rows():
    (row,) = ReportService().cumulative_rows(ROWS + [_punch("Neha Das", 480, late=True)])

    assert row["Grace In"] == 4
    assert row["# Late In (cumulative)"] == 4
    assert row["# CLs (cumulative)"] == 1


def test_duration_rows():
    faculty, hod = ReportService().duration_rows(ROWS)

    assert faculty["Role"] == "Faculty"
    assert faculty["Duration"] == "433 min (avg)"
    assert faculty["Normalized Duration"] == "7.22 h"
    assert faculty["Avg <7.5h"] == 2
    assert hod["Role"] == "HOD (rough)"
    assert hod["Total CL"] == 0


def test_people_rows():
    people = [DepartmentPeople(department="CSE", hod="Asha Rao", count=2, names=["Asha Rao", "Ravi Kumar"])]

    assert ReportService().people_rows(people) == [
        {"Department": "CSE", "HOD": "Asha Rao", "People Count": 2, "People": "Asha Rao, Ravi Kumar"}
    ]


def test_export_filename_and_workbook():
    assert export_filename(ExportKind.DURATION, today=date(2024, 1, 31)) == "duration-cl-2024-01-31.xlsx"
    assert export_filename(ExportKind.PEOPLE, today=date(2024, 1, 31)) == "dept-people-2024-01-31.xlsx"

    data = rows_to_xlsx(ReportService().detailed_rows(ROWS), ExportKind.DETAILED)

    assert data[:4] == b"PK\x03\x04"
