from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date_or_none
from ..core.enums import LeaveStatus


def _parse_status(value) -> Optional[LeaveStatus]:
    if isinstance(value, LeaveStatus):
        return value
    try:
        return LeaveStatus(value)
    except ValueError:
        return None


@dataclass(frozen=True)
class LeaveRequest:
    request_id: Optional[str]
    employee_id: str
    leave_type: str
    start_date: Optional[date]
    end_date: Optional[date]
    status: Optional[LeaveStatus]
    reason: Optional[str] = None

    @property
    def is_approved(self) -> bool:
        return self.status == LeaveStatus.APPROVED

    @property
    def span_days(self) -> int:
        if self.start_date is None or self.end_date is None:
            return 0
        return max((self.end_date - self.start_date).days + 1, 0)

    def covers(self, day: date) -> bool:
        """Closed interval check; a request with a broken date covers nothing."""
        if self.start_date is None or self.end_date is None:
            return False
        return self.start_date <= day <= self.end_date

    @classmethod
    def from_dict(cls, payload: dict) -> "LeaveRequest":
        return cls(
            request_id=payload.get("id"),
            employee_id=str(payload.get("employeeId") or ""),
            leave_type=str(payload.get("leaveType") or ""),
            start_date=parse_iso_date_or_none(payload.get("startDate")),
            end_date=parse_iso_date_or_none(payload.get("endDate")),
            status=_parse_status(payload.get("status")),
            reason=payload.get("reason"),
        )
