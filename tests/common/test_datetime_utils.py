from datetime import date, datetime, time

import pytest

from src.faculty_attendance.faculty_attendance.common.datetime_utils import combine, parse_date, parse_time, to_bool


def test_parse_time_pads_hour_and_minute():
    assert parse_time("9:5") == "09:05"
    assert parse_time("09:05") == "09:05"
    assert parse_time("IN 7:45 AM") == "07:45"
    assert parse_time("") == ""
    assert parse_time("late") == ""


def test_parse_time_accepts_native_values():
    assert parse_time(time(8, 3)) == "08:03"
    assert parse_time(datetime(2024, 1, 2, 17, 40)) == "17:40"
    assert parse_time(None) == ""


@pytest.mark.parametrize("value", ["2024-01-02", "2025-12-31", "2000-02-29"])
def test_parse_date_is_idempotent_on_iso(value):
    assert parse_date(value) == value
    assert parse_date(parse_date(value)) == value


def test_parse_date_native_values():
    assert parse_date(date(2024, 1, 2)) == "2024-01-02"
    assert parse_date(datetime(2024, 1, 2, 9, 5)) == "2024-01-02"


def test_parse_date_day_first_fallback():
    assert parse_date("13/01/2024") == "2024-01-13"
    assert parse_date("31-12-24") == "2024-12-31"


def test_parse_date_general_text():
    assert parse_date("2 January 2024") == "2024-01-02"
    assert parse_date("2024-01-02 09:05") == "2024-01-02"


def test_parse_date_rejects_noise():
    assert parse_date("") == ""
    assert parse_date("   ") == ""
    assert parse_date("not a date") == ""
    assert parse_date("09:05") == ""
    assert parse_date(None) == ""
    assert parse_date(float("nan")) == ""


@pytest.mark.parametrize("value", ["yes", "Y", " TRUE ", "1", 1, True])
def test_to_bool_true_words(value):
    assert to_bool(value) is True


@pytest.mark.parametrize("value", ["no", "N", "false", "0", 0, False, "", None])
def test_to_bool_false_words(value):
    assert to_bool(value) is False


def test_to_bool_falls_back_to_truthiness():
    assert to_bool("late") is True
    assert to_bool(2) is True


def test_combine():
    assert combine("2024-01-02", "09:05") == datetime(2024, 1, 2, 9, 5)
    assert combine("2024-01-02", "") is None
    assert combine("2024-01-02", "25:00") is None


@pytest.mark.parametrize("value", ["1/2", "Sat 2 Mar", "2 March", "9:05 AM", "09:05:00 pm", "now", "Today", "0001-01-02"])
def test_parse_date_never_invents_a_year(value):
    assert parse_date(value) == ""


def test_parse_date_with_weekday_and_year():
    assert parse_date("Sat 2 Mar 2024") == "2024-03-02"
    # two-digit years only go through the day-first pattern
    assert parse_date("1/2/24") == "2024-02-01"
