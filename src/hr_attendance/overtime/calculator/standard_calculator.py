from __future__ import annotations

import math

from ...core.constants import FALLBACK_HOURS_PER_DAY, HOURS_PRECISION
from .base import CompensationCalculator, CompensationResult


class StandardCompensationCalculator(CompensationCalculator):
    """Standard rule.

    Overtime is what exceeds the month's required hours. Compensatory days are
    only granted when the month was not short overall, and then equal the
    larger of whole quota-days of overtime and off-days actually worked.
    """

    def compensate(
        self,
        *,
        total_required_hours: float,
        total_actual_hours: float,
        number_of_work_days: int,
        work_days_on_holidays: int,
    ) -> CompensationResult:
        required = round(total_required_hours, HOURS_PRECISION)
        actual = round(total_actual_hours, HOURS_PRECISION)
        overtime = round(max(0.0, actual - required), HOURS_PRECISION)

        hours_per_day = required / number_of_work_days if number_of_work_days > 0 else FALLBACK_HOURS_PER_DAY
        from_overtime = math.floor(round(overtime / hours_per_day, 9)) if hours_per_day > 0 else 0

        due = max(from_overtime, work_days_on_holidays) if actual >= required else 0

        return CompensationResult(
            total_overtime_hours=overtime,
            hours_per_day=hours_per_day,
            compensatory_days_from_overtime=from_overtime,
            compensatory_days_due=due,
        )
