from __future__ import annotations

from typing import Optional, Sequence

from ..model import LeaveRequest
from .base import LeaveSelectionStrategy


class ShortestSpanStrategy(LeaveSelectionStrategy):
    """The most specific request (fewest days)."""

    def select(self, candidates: Sequence[LeaveRequest]) -> Optional[LeaveRequest]:
        if not candidates:
            return None
        return min(candidates, key=lambda lr: lr.span_days)
