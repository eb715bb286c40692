from __future__ import annotations

from datetime import date

from hr_attendance.common.datetime_utils import iter_days

# January 2025 starts on a Wednesday; with Jan 1-2 as holidays it has 20 work days.
JAN_HOLIDAYS = (date(2025, 1, 1), date(2025, 1, 2))


def work_days_of(start: date, end: date, holidays=()):
    return [d for d in iter_days(start, end) if d.weekday() not in (4, 5) and d not in holidays]
