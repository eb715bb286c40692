from __future__ import annotations

import calendar
import logging
from collections import Counter
from datetime import date
from typing import Iterable, Optional, Sequence

from ..attendance.classifier import CalendarClassifier
from ..attendance.duration import duration_hours
from ..common.datetime_utils import iter_days, month_bounds
from ..common.validators import require_month, require_year
from ..core.constants import HOURS_PRECISION
from ..core.enums import LeaveTieBreak, Role
from ..core.exceptions import AuthorizationError, NotFoundError
from ..employees.model import Employee
from ..leaves.factory import LeaveSelectionStrategyFactory
from ..leaves.model import LeaveRequest
from ..leaves.validation import (
    LeaveOverlap,
    approved_leaves_on,
    ensure_no_overlapping_approved_leaves,
    find_overlapping_approved_leaves,
)
from ..records.repository import HRDataRepository
from .calculator.base import CompensationCalculator
from .model import (
    AttendanceSheet,
    AttendanceSheetRow,
    DepartmentSummary,
    OvertimeRecord,
    YearlyCompensationRow,
)
from .resolver import OvertimeResolver, index_logs_by_date

logger = logging.getLogger(__name__)

HOLIDAY_LABEL = "Public Holiday"


class OvertimeReportService:
    """Report use-cases built on the overtime engine.

    Every call reads a fresh snapshot from the repository; nothing is cached
    between calls.
    """

    def __init__(
        self,
        records: HRDataRepository,
        *,
        tie_break: LeaveTieBreak = LeaveTieBreak.FIRST_MATCH,
        strategy_factory: Optional[LeaveSelectionStrategyFactory] = None,
        calculator: Optional[CompensationCalculator] = None,
    ):
        self._records = records
        self._factory = strategy_factory or LeaveSelectionStrategyFactory()
        self._leave_strategy = self._factory.for_tie_break(tie_break)
        self._calculator = calculator

    def _build_resolver(self, start: date, end: date) -> tuple[CalendarClassifier, OvertimeResolver]:
        leaves = self._records.list_leave_requests()
        self._warn_overlaps(leaves, start, end)
        classifier = CalendarClassifier(
            self._records.list_holidays(),
            leaves,
            self._records.get_ramadan_ranges(),
            leave_strategy=self._leave_strategy,
        )
        return classifier, OvertimeResolver(classifier, calculator=self._calculator)

    @staticmethod
    def _warn_overlaps(leaves, start: date, end: date) -> None:
        for o in find_overlapping_approved_leaves(leaves):
            if o.overlap_start <= end and o.overlap_end >= start:
                logger.warning(
                    "Overlapping approved leave for employee %s (%s / %s) between %s and %s",
                    o.employee_id,
                    o.first.request_id,
                    o.second.request_id,
                    o.overlap_start,
                    o.overlap_end,
                )

    def _visible_employees(
        self,
        current_user: Optional[Employee],
        departments: Optional[Iterable[str]] = None,
    ) -> Sequence[Employee]:
        employees = self._records.list_employees()
        if current_user is not None and current_user.role == Role.EMPLOYEE:
            return [e for e in employees if e.employee_id == current_user.employee_id]

        wanted = set(departments or ())
        if not wanted:
            return list(employees)
        return [e for e in employees if e.department in wanted]

    def resolve_month(self, employee: Employee, *, year: int, month: int) -> OvertimeRecord:
        year, month = require_year(year), require_month(month)
        start, end = month_bounds(year, month)
        _, resolver = self._build_resolver(start, end)
        logs = self._records.list_time_logs(start=start, end=end, employee_id=employee.employee_id)
        return resolver.resolve_month(employee, logs, year, month)

    def monthly_report(
        self,
        *,
        year: int,
        month: int,
        current_user: Optional[Employee] = None,
        departments: Optional[Iterable[str]] = None,
    ) -> list[OvertimeRecord]:
        year, month = require_year(year), require_month(month)
        start, end = month_bounds(year, month)
        _, resolver = self._build_resolver(start, end)
        logs = self._records.list_time_logs(start=start, end=end)

        report = []
        for employee in self._visible_employees(current_user, departments):
            record = resolver.resolve_month(employee, logs, year, month)
            if record.is_empty:
                continue
            report.append(record)

        logger.debug("Monthly overtime report %04d-%02d: %d rows", year, month, len(report))
        return report

    def department_review(
        self,
        *,
        year: int,
        month: int,
        current_user: Optional[Employee] = None,
    ) -> list[DepartmentSummary]:
        records = self.monthly_report(year=year, month=month, current_user=current_user)
        employee_counts = Counter(e.department for e in self._records.list_employees())

        totals: dict[str, dict] = {}
        for r in records:
            t = totals.get(r.department)
            if not t:
                t = {"required": 0.0, "actual": 0.0, "overtime": 0.0, "days": 0}
                totals[r.department] = t
            t["required"] += r.total_required_hours
            t["actual"] += r.total_actual_hours
            t["overtime"] += r.total_overtime_hours
            t["days"] += r.compensatory_days_due

        summary = []
        for name, t in totals.items():
            required = round(t["required"], HOURS_PRECISION)
            actual = round(t["actual"], HOURS_PRECISION)
            percentage = round(actual / required * 100, HOURS_PRECISION) if required > 0 else 0.0
            summary.append(
                DepartmentSummary(
                    department=name,
                    required=required,
                    actual=actual,
                    overtime=round(t["overtime"], HOURS_PRECISION),
                    compensatory_days=int(t["days"]),
                    employee_count=employee_counts.get(name, 0),
                    attendance_percentage=percentage,
                )
            )
        return summary

    def yearly_summary(
        self,
        *,
        year: int,
        current_user: Optional[Employee] = None,
        departments: Optional[Iterable[str]] = None,
    ) -> list[YearlyCompensationRow]:
        """Compensatory days month by month; each month is resolved on its own."""
        year = require_year(year)
        start, end = date(year, 1, 1), date(year, 12, 31)
        _, resolver = self._build_resolver(start, end)
        logs = self._records.list_time_logs(start=start, end=end)

        rows = []
        for employee in self._visible_employees(current_user, departments):
            monthly_days = tuple(
                resolver.resolve_month(employee, logs, year, month).compensatory_days_due for month in range(1, 13)
            )
            rows.append(
                YearlyCompensationRow(
                    employee_id=employee.employee_id,
                    employee_number=employee.employee_number,
                    employee_name=employee.name,
                    department=employee.department,
                    monthly_days=monthly_days,
                    total_yearly_days=sum(monthly_days),
                )
            )
        return rows

    def attendance_sheet(
        self,
        *,
        employee_id: str,
        year: int,
        month: int,
        current_user: Optional[Employee] = None,
    ) -> AttendanceSheet:
        year, month = require_year(year), require_month(month)
        if (
            current_user is not None
            and current_user.role == Role.EMPLOYEE
            and current_user.employee_id != employee_id
        ):
            raise AuthorizationError("Employees can only view their own attendance sheet")

        employee = self._records.get_employee(employee_id)
        if not employee:
            raise NotFoundError(f"Employee {employee_id} not found")

        start, end = month_bounds(year, month)
        classifier, resolver = self._build_resolver(start, end)
        time_logs = self._records.list_time_logs(start=start, end=end, employee_id=employee_id)
        record = resolver.resolve_month(employee, time_logs, year, month)
        logs = index_logs_by_date(employee_id, time_logs, start, end)
        shift_names = {s.shift_id: s.name for s in self._records.list_shifts()}

        rows = []
        for day in iter_days(start, end):
            c = classifier.classify(day, employee_id)
            log = logs.get(day)

            label = shift_names.get(log.shift_id, "-") if log and log.shift_id else "-"
            if c.is_holiday:
                label = HOLIDAY_LABEL
            if c.approved_leave:
                label = c.approved_leave.leave_type

            rows.append(
                AttendanceSheetRow(
                    date=day.isoformat(),
                    weekday=calendar.day_name[day.weekday()],
                    label=label,
                    day_kind=c.kind.value,
                    clock_in=log.clock_in if log else "-",
                    clock_out=log.clock_out if log else "-",
                    worked_hours=duration_hours(log.clock_in, log.clock_out) if log else 0.0,
                )
            )

        return AttendanceSheet(
            employee_id=employee.employee_id,
            employee_name=employee.name,
            year=year,
            month=month,
            rows=rows,
            total_required_hours=record.total_required_hours,
            total_actual_hours=record.total_actual_hours,
            total_overtime_hours=record.total_overtime_hours,
            work_days_on_holidays=record.work_days_on_holidays,
        )

    def leave_conflicts(self) -> list[LeaveOverlap]:
        return find_overlapping_approved_leaves(self._records.list_leave_requests())

    def validate_leaves(self, *, employee_id: Optional[str] = None) -> None:
        """Raise ValidationError when approved leave of one employee overlaps."""
        ensure_no_overlapping_approved_leaves(self._records.list_leave_requests(employee_id=employee_id))

    def on_leave(self, day: date, *, current_user: Optional[Employee] = None) -> list[LeaveRequest]:
        visible = {e.employee_id for e in self._visible_employees(current_user)}
        return [lr for lr in approved_leaves_on(self._records.list_leave_requests(), day) if lr.employee_id in visible]
