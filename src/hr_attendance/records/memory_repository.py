from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from datetime import date
from pathlib import Path
from types import MappingProxyType
from typing import Mapping, Optional, Sequence

from ..employees.model import Employee
from ..holidays.model import PublicHoliday, RamadanDateRange, ramadan_ranges_from_dict
from ..leaves.model import LeaveRequest
from ..shifts.model import Shift
from ..timelogs.model import TimeLog

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InMemoryHRDataRepository:
    """Immutable snapshot of the HR collections.

    Payload keys follow the document store: ``employees``, ``timeLogs``,
    ``shifts``, ``publicHolidays``, ``leaveRequests``, ``ramadanDates``.
    """

    employees: tuple[Employee, ...] = ()
    time_logs: tuple[TimeLog, ...] = ()
    shifts: tuple[Shift, ...] = ()
    holidays: tuple[PublicHoliday, ...] = ()
    leave_requests: tuple[LeaveRequest, ...] = ()
    ramadan_ranges: Mapping[int, RamadanDateRange] = field(default_factory=dict)

    def __post_init__(self):
        for name in ("employees", "time_logs", "shifts", "holidays", "leave_requests"):
            object.__setattr__(self, name, tuple(getattr(self, name)))
        object.__setattr__(self, "ramadan_ranges", MappingProxyType(dict(self.ramadan_ranges)))

    @classmethod
    def from_payload(cls, payload: dict) -> "InMemoryHRDataRepository":
        return cls(
            employees=tuple(Employee.from_dict(e) for e in payload.get("employees", [])),
            time_logs=tuple(TimeLog.from_dict(t) for t in payload.get("timeLogs", [])),
            shifts=tuple(Shift.from_dict(s) for s in payload.get("shifts", [])),
            holidays=tuple(PublicHoliday.from_dict(h) for h in payload.get("publicHolidays", [])),
            leave_requests=tuple(LeaveRequest.from_dict(lr) for lr in payload.get("leaveRequests", [])),
            ramadan_ranges=ramadan_ranges_from_dict(payload.get("ramadanDates", {})),
        )

    @classmethod
    def load_json(cls, path) -> "InMemoryHRDataRepository":
        path = Path(path)
        with path.open(encoding="utf-8") as fh:
            payload = json.load(fh)
        repo = cls.from_payload(payload)
        logger.info(
            "Loaded HR snapshot %s (employees=%d, time_logs=%d)", path, len(repo.employees), len(repo.time_logs)
        )
        return repo

    def list_employees(self) -> Sequence[Employee]:
        return self.employees

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        for e in self.employees:
            if e.employee_id == employee_id:
                return e
        return None

    def list_time_logs(self, *, start: date, end: date, employee_id: Optional[str] = None) -> Sequence[TimeLog]:
        return tuple(
            t
            for t in self.time_logs
            if t.work_date is not None
            and start <= t.work_date <= end
            and (employee_id is None or t.employee_id == employee_id)
        )

    def list_shifts(self, *, department: Optional[str] = None) -> Sequence[Shift]:
        if department is None:
            return self.shifts
        return tuple(s for s in self.shifts if s.department == department)

    def list_holidays(self) -> Sequence[PublicHoliday]:
        return self.holidays

    def list_leave_requests(self, *, employee_id: Optional[str] = None) -> Sequence[LeaveRequest]:
        if employee_id is None:
            return self.leave_requests
        return tuple(lr for lr in self.leave_requests if lr.employee_id == employee_id)

    def get_ramadan_ranges(self) -> Mapping[int, RamadanDateRange]:
        return self.ramadan_ranges
