from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import LeaveTieBreak
from ..core.exceptions import ValidationError
from .strategies.base import LeaveSelectionStrategy
from .strategies.first_match_strategy import FirstMatchStrategy
from .strategies.shortest_span_strategy import ShortestSpanStrategy
from .strategies.start_date_strategy import EarliestStartStrategy, LatestStartStrategy


@dataclass
class LeaveSelectionStrategyFactory:
    """Factory Pattern: map the configured tie-break to its strategy."""

    def for_tie_break(self, tie_break) -> LeaveSelectionStrategy:
        try:
            tie_break = LeaveTieBreak(tie_break)
        except ValueError:
            raise ValidationError(f"Unknown leave tie-break: {tie_break!r}")

        if tie_break == LeaveTieBreak.EARLIEST_START:
            return EarliestStartStrategy()
        if tie_break == LeaveTieBreak.LATEST_START:
            return LatestStartStrategy()
        if tie_break == LeaveTieBreak.SHORTEST_SPAN:
            return ShortestSpanStrategy()
        return FirstMatchStrategy()
