from collections import Counter
from datetime import date

import pytest

from src.faculty_attendance.faculty_attendance.attendance.distributor import build_attendance_from_counts, placeholder_attendance, scale_counts
from src.faculty_attendance.faculty_attendance.attendance.model import AttendanceCounts
from src.faculty_attendance.faculty_attendance.core.enums import AttendanceStatus

TODAY = date(2024, 3, 1)


def test_scales_counts_to_window():
    assert scale_counts(AttendanceCounts(present=7, absent=2, leave=1), 14) == (10, 3, 1)


def test_records_are_blocks_over_last_days():
    records = build_attendance_from_counts(7, 2, 1, 14, today=TODAY)

    assert len(records) == 14
    assert [r.status for r in records] == (
        [AttendanceStatus.PRESENT] * 10 + [AttendanceStatus.ABSENT] * 3 + [AttendanceStatus.ON_LEAVE]
    )
    # leap year: window ends on 1 March, starts 17 February
    assert records[0].date == "2024-02-17"
    assert records[-1].date == "2024-03-01"


@pytest.mark.parametrize(
    "present,absent,leave",
    [(0, 0, 0), (1, 1, 0), (20, 3, 2), (0, 5, 0), (3, 3, 3), (1, 0, 100), (22, 0, 0)],
)
def test_window_is_exact_and_consecutive(present, absent, leave):
    records = build_attendance_from_counts(present, absent, leave, 14, today=TODAY)

    assert len(records) == 14
    dates = [date.fromisoformat(r.date) for r in records]
    assert all((b - a).days == 1 for a, b in zip(dates, dates[1:]))

    total = present + absent + leave
    if total:
        counts = Counter(r.status for r in records)
        for status, raw in ((AttendanceStatus.PRESENT, present), (AttendanceStatus.ABSENT, absent)):
            assert abs(counts[status] - raw * 14 / total) <= 1


def test_zero_counts_fall_into_leave():
    records = build_attendance_from_counts(0, 0, 0, 14, today=TODAY)

    assert {r.status for r in records} == {AttendanceStatus.ON_LEAVE}


def test_bad_counts_are_treated_as_zero():
    records = build_attendance_from_counts("n/a", -3, None, 5, today=TODAY)

    assert [r.status for r in records] == [AttendanceStatus.ON_LEAVE] * 5


def test_rounding_never_overflows_window():
    # 1.5 + 1.5 would round to 4 days in a 3-day window
    assert scale_counts(AttendanceCounts(present=1, absent=1, leave=0), 3) == (2, 1, 0)


def test_placeholder_is_deterministic():
    first = placeholder_attendance(14, today=TODAY)
    second = placeholder_attendance(14, today=TODAY)

    assert first == second
    assert len(first) == 14
    # newest day: (0 * 17 + 7) % 10 == 7 -> Absent
    assert first[-1].status == AttendanceStatus.ABSENT
    # (1 * 17 + 7) % 10 == 4 -> Present
    assert first[-2].status == AttendanceStatus.PRESENT
