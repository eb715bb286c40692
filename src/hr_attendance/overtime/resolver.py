from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from ..attendance.classifier import CalendarClassifier
from ..attendance.duration import duration_hours
from ..common.datetime_utils import month_bounds
from ..core.constants import HOURS_PRECISION
from ..employees.model import Employee
from ..timelogs.model import TimeLog
from .calculator.base import CompensationCalculator
from .calculator.standard_calculator import StandardCompensationCalculator
from .model import OvertimeRecord
from .required_hours import RequiredHoursAccumulator

logger = logging.getLogger(__name__)


def index_logs_by_date(employee_id: str, time_logs: Iterable[TimeLog], start: date, end: date) -> dict[date, TimeLog]:
    """Logs of one employee inside [start, end], keyed by day; the first log of a day wins."""
    by_date: dict[date, TimeLog] = {}
    for log in time_logs:
        if log.employee_id != employee_id or log.work_date is None:
            continue
        if not start <= log.work_date <= end:
            continue
        if log.work_date in by_date:
            logger.warning("Duplicate time log for employee %s on %s ignored", employee_id, log.work_date)
            continue
        by_date[log.work_date] = log
    return by_date


class OvertimeResolver:
    """Derives one employee's monthly overtime and compensatory days.

    Stateless between calls: everything comes from the classifier snapshot and
    the arguments, so identical inputs give identical records.
    """

    def __init__(self, classifier: CalendarClassifier, *, calculator: Optional[CompensationCalculator] = None):
        self._classifier = classifier
        self._required = RequiredHoursAccumulator(classifier)
        self._calculator = calculator or StandardCompensationCalculator()

    def resolve_month(self, employee: Employee, time_logs: Iterable[TimeLog], year: int, month: int) -> OvertimeRecord:
        start, end = month_bounds(year, month)
        logs = index_logs_by_date(employee.employee_id, time_logs, start, end)

        total_required, work_days = self._required.totals(employee.employee_id, start, end)

        total_actual = 0.0
        work_days_on_holidays = 0
        for day, log in sorted(logs.items()):
            total_actual += duration_hours(log.clock_in, log.clock_out)
            if self._classifier.classify(day, employee.employee_id).is_off_day:
                work_days_on_holidays += 1

        result = self._calculator.compensate(
            total_required_hours=total_required,
            total_actual_hours=total_actual,
            number_of_work_days=work_days,
            work_days_on_holidays=work_days_on_holidays,
        )

        return OvertimeRecord(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            department=employee.department,
            total_required_hours=round(total_required, HOURS_PRECISION),
            total_actual_hours=round(total_actual, HOURS_PRECISION),
            total_overtime_hours=result.total_overtime_hours,
            work_days_on_holidays=work_days_on_holidays,
            compensatory_days_due=result.compensatory_days_due,
            number_of_work_days=work_days,
        )
