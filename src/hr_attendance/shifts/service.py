from __future__ import annotations

from datetime import date
from typing import Optional, Sequence

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError, ValidationError
from ..records.repository import HRDataRepository
from ..timelogs.model import TimeLog
from .model import Shift


class ShiftService:
    """Shift templates: listing and quick-assign pre-fill of time logs."""

    def __init__(self, records: HRDataRepository):
        self._records = records

    def list_for_department(self, department: Optional[str] = None) -> Sequence[Shift]:
        return self._records.list_shifts(department=department)

    def get(self, shift_id: str) -> Shift:
        for s in self._records.list_shifts():
            if s.shift_id == shift_id:
                return s
        raise NotFoundError(f"Shift {shift_id} not found")

    @staticmethod
    def shift_hours(shift: Shift) -> float:
        return shift.duration_hours

    @staticmethod
    def prefill_time_log(shift: Shift, *, employee_id: str, work_date: date, log_id: Optional[str] = None) -> TimeLog:
        """Time log carrying the shift's own start/end, as a quick assignment would save it."""
        employee_id = require_non_empty(employee_id, "employee_id")
        if not isinstance(work_date, date):
            raise ValidationError("work_date must be a date")
        return TimeLog(
            employee_id=employee_id,
            work_date=work_date,
            clock_in=shift.start_time,
            clock_out=shift.end_time,
            shift_id=shift.shift_id,
            log_id=log_id,
        )
