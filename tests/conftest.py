from __future__ import annotations

import pytest

from hr_attendance.core.enums import LeaveStatus, Role
from hr_attendance.employees.model import Employee
from hr_attendance.holidays.model import PublicHoliday
from hr_attendance.leaves.model import LeaveRequest
from hr_attendance.timelogs.model import TimeLog
from helpers import JAN_HOLIDAYS


@pytest.fixture
def employee():
    return Employee(employee_id="e1", name="Sara", department="IT", employee_number="100", role=Role.ADMIN)


@pytest.fixture
def jan_holidays():
    return [PublicHoliday(holiday_id=f"h{i}", name="Holiday", holiday_date=d) for i, d in enumerate(JAN_HOLIDAYS)]


@pytest.fixture
def make_logs():
    def _make(employee_id, days, clock_in="08:00", clock_out="15:00", shift_id=None):
        return [
            TimeLog(employee_id=employee_id, work_date=d, clock_in=clock_in, clock_out=clock_out, shift_id=shift_id)
            for d in days
        ]

    return _make


@pytest.fixture
def make_leave():
    def _make(employee_id, start, end, status=LeaveStatus.APPROVED, leave_type="Annual", request_id=None):
        return LeaveRequest(
            request_id=request_id,
            employee_id=employee_id,
            leave_type=leave_type,
            start_date=start,
            end_date=end,
            status=status,
        )

    return _make
