from __future__ import annotations

from datetime import date
from typing import Mapping, Optional, Protocol, Sequence

from ..employees.model import Employee
from ..holidays.model import PublicHoliday, RamadanDateRange
from ..leaves.model import LeaveRequest
from ..shifts.model import Shift
from ..timelogs.model import TimeLog


class HRDataRepository(Protocol):
    """Read side of the HR document store, as consumed by the reports."""

    def list_employees(self) -> Sequence[Employee]:
        raise NotImplementedError

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        raise NotImplementedError

    def list_time_logs(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[TimeLog]:
        raise NotImplementedError

    def list_shifts(self, *, department: Optional[str] = None) -> Sequence[Shift]:
        raise NotImplementedError

    def list_holidays(self) -> Sequence[PublicHoliday]:
        raise NotImplementedError

    def list_leave_requests(self, *, employee_id: Optional[str] = None) -> Sequence[LeaveRequest]:
        raise NotImplementedError

    def get_ramadan_ranges(self) -> Mapping[int, RamadanDateRange]:
        raise NotImplementedError
