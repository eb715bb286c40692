from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import DayKind
from ..leaves.model import LeaveRequest


@dataclass(frozen=True)
class DayClassification:
    """Calendar facts about one day for one employee."""

    day: Optional[date]
    is_weekend: bool = False
    is_holiday: bool = False
    is_ramadan: bool = False
    approved_leave: Optional[LeaveRequest] = None

    @property
    def is_leave(self) -> bool:
        return self.approved_leave is not None

    @property
    def is_work_day(self) -> bool:
        return self.day is not None and not (self.is_weekend or self.is_holiday or self.is_leave)

    @property
    def is_off_day(self) -> bool:
        # Leave wins over holiday/weekend: a logged leave day is not an off-day worked.
        return (self.is_weekend or self.is_holiday) and not self.is_leave

    @property
    def kind(self) -> DayKind:
        if self.is_leave:
            return DayKind.LEAVE
        if self.is_holiday:
            return DayKind.HOLIDAY
        if self.is_weekend:
            return DayKind.WEEKEND
        return DayKind.WORK
