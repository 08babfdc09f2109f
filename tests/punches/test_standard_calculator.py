from src.faculty_attendance.faculty_attendance.punches.calculator.standard_calculator import StandardDurationCalculator


def test_standard_calculator_whole_minutes():
    calc = StandardDurationCalculator()

    assert calc.duration_minutes(in_date="2025-01-01", in_time="09:05", out_date="2025-01-01", out_time="17:40") == 515


def test_standard_calculator_overnight_shift():
    calc = StandardDurationCalculator()

    assert calc.duration_minutes(in_date="2025-01-01", in_time="22:00", out_date="2025-01-02", out_time="06:30") == 510


def test_standard_calculator_missing_or_negative():
    calc = StandardDurationCalculator()

    assert calc.duration_minutes(in_date="", in_time="09:00", out_date="2025-01-01", out_time="17:00") == 0
    assert calc.duration_minutes(in_date="2025-01-01", in_time="17:00", out_date="2025-01-01", out_time="09:00") == 0
