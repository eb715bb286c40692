import pytest

from hr_attendance.attendance.duration import duration_hours, duration_minutes, time_to_minutes


@pytest.mark.parametrize(
    "clock_in,clock_out,expected",
    [
        ("08:00", "16:00", 8.0),
        ("22:00", "06:00", 8.0),
        ("08:00", "08:00", 0.0),
        ("08:00", "08:01", 0.02),
        ("00:00", "23:59", 23.98),
        ("23:59", "00:00", 0.02),
        ("07:00", "14:42", 7.7),
        ("08:00:30", "09:30", 1.5),
    ],
)
def test_duration_hours(clock_in, clock_out, expected):
    assert duration_hours(clock_in, clock_out) == expected


@pytest.mark.parametrize(
    "clock_in,clock_out",
    [
        ("", "16:00"),
        ("08:00", ""),
        (None, None),
        ("25:00", "08:00"),
        ("ab:cd", "10:00"),
        ("8", "10:00"),
        ("08:00:zz", "16:00"),
        ("08:00:75", "16:00"),
        ("+8:00", "16:00"),
        ("-0:30", "01:30"),
        ("٠٨:٠٠", "16:00"),
    ],
)
def test_unusable_times_give_zero(clock_in, clock_out):
    assert duration_hours(clock_in, clock_out) == 0.0


def test_overnight_wraparound_adds_exactly_one_day():
    assert duration_minutes("20:00", "04:00") == (4 * 60 + 24 * 60) - 20 * 60


def test_duration_always_within_a_day():
    times = [f"{h:02d}:{m:02d}" for h in range(0, 24, 3) for m in (0, 29, 59)]
    for a in times:
        for b in times:
            assert 0 <= duration_hours(a, b) < 24


def test_time_to_minutes():
    assert time_to_minutes("01:30") == 90
    assert time_to_minutes(" 23:59 ") == 1439
    assert time_to_minutes("12:60") is None
    assert time_to_minutes("08:15:59") == 495
    assert time_to_minutes("08:15:5") is None
    assert time_to_minutes("+08:15") is None
