from __future__ import annotations

import logging
from collections import defaultdict
from datetime import date
from typing import Iterable, Mapping, Optional

from ..core.constants import WEEKEND_DAYS
from ..holidays.model import PublicHoliday, RamadanDateRange
from ..leaves.model import LeaveRequest
from ..leaves.strategies.base import LeaveSelectionStrategy
from ..leaves.strategies.first_match_strategy import FirstMatchStrategy
from .model import DayClassification

logger = logging.getLogger(__name__)


class CalendarClassifier:
    """Single source of weekend/holiday/Ramadan/leave facts for every report.

    Built from an immutable snapshot; lookups are indexed once at
    construction and never mutated afterwards, so one instance may be shared
    across concurrent report runs.
    """

    def __init__(
        self,
        holidays: Iterable[PublicHoliday] = (),
        leave_requests: Iterable[LeaveRequest] = (),
        ramadan_ranges: Optional[Mapping[int, RamadanDateRange]] = None,
        *,
        leave_strategy: Optional[LeaveSelectionStrategy] = None,
    ):
        self._holiday_dates = frozenset(h.holiday_date for h in holidays if h.holiday_date is not None)
        self._ramadan = dict(ramadan_ranges or {})
        self._strategy = leave_strategy or FirstMatchStrategy()

        approved: dict[str, list[LeaveRequest]] = defaultdict(list)
        for lr in leave_requests:
            if lr.is_approved:
                approved[lr.employee_id].append(lr)
        self._approved_by_employee = {k: tuple(v) for k, v in approved.items()}

    @staticmethod
    def is_weekend(day: date) -> bool:
        return day.weekday() in WEEKEND_DAYS

    def is_holiday(self, day: date) -> bool:
        return day in self._holiday_dates

    def is_ramadan(self, day: date) -> bool:
        ramadan = self._ramadan.get(day.year)
        return ramadan is not None and ramadan.contains(day)

    def approved_leave(self, day: date, employee_id: str) -> Optional[LeaveRequest]:
        candidates = [lr for lr in self._approved_by_employee.get(employee_id, ()) if lr.covers(day)]
        if len(candidates) > 1:
            logger.debug("Employee %s has %d approved leaves on %s", employee_id, len(candidates), day)
        return self._strategy.select(candidates)

    def classify(self, day: Optional[date], employee_id: str) -> DayClassification:
        if not isinstance(day, date):
            return DayClassification(day=None)
        return DayClassification(
            day=day,
            is_weekend=self.is_weekend(day),
            is_holiday=self.is_holiday(day),
            is_ramadan=self.is_ramadan(day),
            approved_leave=self.approved_leave(day, employee_id),
        )
