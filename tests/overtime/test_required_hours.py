from datetime import date

from hr_attendance.attendance.classifier import CalendarClassifier
from hr_attendance.holidays.model import RamadanDateRange
from hr_attendance.overtime.required_hours import RequiredHoursAccumulator


def test_full_month_without_holidays():
    acc = RequiredHoursAccumulator(CalendarClassifier())

    # January 2025: 22 days that are neither Friday nor Saturday
    assert acc.work_days("e1", date(2025, 1, 1), date(2025, 1, 31)) == 22
    assert acc.required_hours("e1", date(2025, 1, 1), date(2025, 1, 31)) == 154
    assert acc.totals("e1", date(2025, 1, 1), date(2025, 1, 31)) == (154, 22)


def test_holidays_and_leave_contribute_nothing(jan_holidays, make_leave):
    leave = make_leave("e1", date(2025, 1, 6), date(2025, 1, 7))
    acc = RequiredHoursAccumulator(CalendarClassifier(jan_holidays, [leave]))

    assert acc.required_hours("e1", date(2025, 1, 1), date(2025, 1, 31)) == 18 * 7
    assert acc.required_hours("e2", date(2025, 1, 1), date(2025, 1, 31)) == 20 * 7


def test_ramadan_days_use_reduced_quota():
    ramadan = {2025: RamadanDateRange(date(2025, 1, 12), date(2025, 1, 31))}
    acc = RequiredHoursAccumulator(CalendarClassifier(ramadan_ranges=ramadan))

    # Jan 1-11: 7 work days at 7h, Jan 12-31: 15 work days at 5h
    assert acc.required_hours("e1", date(2025, 1, 1), date(2025, 1, 31)) == 7 * 7 + 15 * 5


def test_inverted_range_is_zero():
    acc = RequiredHoursAccumulator(CalendarClassifier())

    assert acc.required_hours("e1", date(2025, 1, 31), date(2025, 1, 1)) == 0
