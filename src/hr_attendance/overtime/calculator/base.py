from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class CompensationResult:
    total_overtime_hours: float
    hours_per_day: float
    compensatory_days_from_overtime: int
    compensatory_days_due: int


class CompensationCalculator(ABC):
    """Calculator interface (Strategy Pattern for overtime compensation)."""

    @abstractmethod
    def compensate(
        self,
        *,
        total_required_hours: float,
        total_actual_hours: float,
        number_of_work_days: int,
        work_days_on_holidays: int,
    ) -> CompensationResult:
        raise NotImplementedError
