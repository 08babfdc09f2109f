import shutil
from pathlib import Path

import pytest

from src.faculty_attendance.faculty_attendance.main import create_app

DATA = Path(__file__).resolve().parents[1] / "data"
ROSTER = "TIG18701035 Reyansh Verma AEIE TIG18701036 Aditya Joshi AEIE TIG18701058 Vihaan Patel BSH"


@pytest.fixture()
def client(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    roster = tmp_path / "roster.txt"
    roster.write_text(ROSTER, encoding="utf-8")
    workbook = tmp_path / "punches.csv"
    shutil.copy(DATA / "punches.csv", workbook)

    app = create_app({"ROSTER_PATH": str(roster), "WORKBOOK_PATH": str(workbook), "TESTING": True})
    return app.test_client()


def _faculty(data, name):
    for d in data["departments"]:
        for h in d["hods"]:
            for f in h["faculties"]:
                if f["name"] == name:
                    return f
    raise AssertionError(name)


def test_health(client):
    res = client.get("/api/health")

    assert res.status_code == 200
    assert res.get_json()["success"] is True


def test_departments_merge_configured_workbook(client):
    data = client.get("/api/departments").get_json()

    assert [d["code"] for d in data["departments"]] == ["AEIE", "BSH"]
    assert data["ingestionError"] is None
    assert data["totals"]["punches"] == 5
    aditya = _faculty(data, "Aditya Joshi")
    assert aditya["excelSummary"]["Employee ID"] == "TIG18701036"
    statuses = [a["status"] for a in aditya["attendance"]]
    assert len(statuses) == 14
    assert statuses.count("Present") == 11
    assert statuses.count("Absent") == 2


def test_missing_workbook_degrades(tmp_path, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    roster = tmp_path / "roster.txt"
    roster.write_text(ROSTER, encoding="utf-8")
    app = create_app({"ROSTER_PATH": str(roster), "WORKBOOK_PATH": str(tmp_path / "nope.xlsx")})

    data = app.test_client().get("/api/departments").get_json()

    assert len(data["departments"]) == 2
    assert "workbook not found" in data["ingestionError"]
    assert data["totals"]["punches"] == 0


def test_post_roster_text(client):
    res = client.post("/api/departments", data="TIG1 Asha Rao CSE TIG2 Ravi Kumar CSE", content_type="text/plain")

    assert res.status_code == 200
    data = res.get_json()
    assert data["departments"][0]["hods"][0]["name"] == "Asha Rao"
    assert data["totals"] == {"departments": 1, "hods": 1, "faculties": 1, "punches": 0}


def test_post_roster_form_field(client):
    res = client.post("/api/departments", data={"roster": "TIG1 Asha Rao IT TIG2 Ravi Kumar IT"})

    assert res.status_code == 200
    assert res.get_json()["departments"][0]["code"] == "IT"


def test_post_empty_roster_is_rejected(client):
    res = client.post("/api/departments", data="   ", content_type="text/plain")

    assert res.status_code == 400
    assert res.get_json()["success"] is False


def test_post_csv_roster(client):
    csv_text = "Employee ID,Employee Name,Department,Present,Absent,Leave\nE1,Asha Rao,CSE,14,0,0\nE2,Ravi Kumar,CSE,0,14,0\n"

    res = client.post("/api/departments/csv", data={"csv": csv_text})

    ravi = _faculty(res.get_json(), "Ravi Kumar")
    assert {a["status"] for a in ravi["attendance"]} == {"Absent"}


def test_punch_listing_and_filters(client):
    data = client.get("/api/punches?dept=BSH").get_json()

    assert data["departments"] == ["All", "AEIE", "BSH"]
    assert {r["name"] for r in data["rows"]} == {"Vihaan Patel"}

    rows = client.get("/api/punches/aditya%20joshi").get_json()
    assert len(rows) == 2
    assert rows[0]["inTime"] == "09:05"


def test_department_people(client):
    people = client.get("/api/departments/people").get_json()

    assert people[0] == {
        "department": "AEIE",
        "hod": "Aditya Joshi",
        "count": 2,
        "names": ["Aditya Joshi", "Reyansh Verma"],
    }


def test_summary(client):
    data = client.get("/api/summary?dept=AEIE").get_json()

    assert data["cumulative"]["grace_in_count"] == 1
    assert data["duration"]["faculty"]["under_count"] == 1


def test_export(client):
    res = client.get("/export/people.xlsx")

    assert res.status_code == 200
    assert res.data[:4] == b"PK\x03\x04"
    assert "dept-people-" in res.headers["Content-Disposition"]


def test_unknown_export_is_rejected(client):
    assert client.get("/export/payroll.xlsx").status_code == 400
