from __future__ import annotations

from datetime import date
from typing import NamedTuple

from ..attendance.classifier import CalendarClassifier
from ..attendance.model import DayClassification
from ..common.datetime_utils import iter_days
from ..core.constants import DEFAULT_DAILY_HOURS, RAMADAN_DAILY_HOURS


def daily_quota(classification: DayClassification) -> int:
    """Expected hours for one classified day (0 on weekend, holiday or leave)."""
    if not classification.is_work_day:
        return 0
    return RAMADAN_DAILY_HOURS if classification.is_ramadan else DEFAULT_DAILY_HOURS


class RequiredHours(NamedTuple):
    hours: float
    work_days: int


class RequiredHoursAccumulator:
    """Sums expected hours over a date range, whether or not time was logged."""

    def __init__(self, classifier: CalendarClassifier):
        self._classifier = classifier

    def totals(self, employee_id: str, start: date, end: date) -> RequiredHours:
        hours = 0.0
        work_days = 0
        for day in iter_days(start, end):
            c = self._classifier.classify(day, employee_id)
            if c.is_work_day:
                work_days += 1
                hours += daily_quota(c)
        return RequiredHours(hours, work_days)

    def required_hours(self, employee_id: str, start: date, end: date) -> float:
        return self.totals(employee_id, start, end).hours

    def work_days(self, employee_id: str, start: date, end: date) -> int:
        return self.totals(employee_id, start, end).work_days
