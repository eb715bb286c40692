from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date_or_none


@dataclass(frozen=True)
class TimeLog:
    """Domain entity: one clock-in/clock-out pair of an employee for one day.

    Clock times stay raw ``HH:MM`` strings; the duration calculator decides
    whether they are usable.
    """

    employee_id: str
    work_date: Optional[date]
    clock_in: str
    clock_out: str
    shift_id: Optional[str] = None
    log_id: Optional[str] = None

    @classmethod
    def from_dict(cls, payload: dict) -> "TimeLog":
        return cls(
            employee_id=str(payload.get("employeeId") or ""),
            work_date=parse_iso_date_or_none(payload.get("date")),
            clock_in=str(payload.get("clockIn") or ""),
            clock_out=str(payload.get("clockOut") or ""),
            shift_id=payload.get("shiftId") or None,
            log_id=payload.get("id"),
        )
