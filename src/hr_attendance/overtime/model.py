from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Optional


@dataclass(frozen=True)
class OvertimeRecord:
    """Monthly result for one employee; derived, never persisted here."""

    employee_id: str
    employee_name: str
    department: str
    total_required_hours: float
    total_actual_hours: float
    total_overtime_hours: float
    work_days_on_holidays: int
    compensatory_days_due: int
    number_of_work_days: int = 0

    @property
    def is_empty(self) -> bool:
        return self.total_actual_hours == 0 and self.total_required_hours == 0

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class DepartmentSummary:
    department: str
    required: float
    actual: float
    overtime: float
    compensatory_days: int
    employee_count: int
    attendance_percentage: float

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass(frozen=True)
class YearlyCompensationRow:
    employee_id: str
    employee_number: Optional[str]
    employee_name: str
    department: str
    monthly_days: tuple[int, ...]
    total_yearly_days: int

    def to_dict(self) -> dict:
        data = asdict(self)
        data["monthly_days"] = list(self.monthly_days)
        return data


@dataclass(frozen=True)
class AttendanceSheetRow:
    """One line of the per-employee monthly attendance sheet."""

    date: str
    weekday: str
    label: str
    day_kind: str
    clock_in: str
    clock_out: str
    worked_hours: float


@dataclass(frozen=True)
class AttendanceSheet:
    employee_id: str
    employee_name: str
    year: int
    month: int
    rows: list[AttendanceSheetRow] = field(default_factory=list)
    total_required_hours: float = 0.0
    total_actual_hours: float = 0.0
    total_overtime_hours: float = 0.0
    work_days_on_holidays: int = 0

    def to_dict(self) -> dict:
        return asdict(self)
