from __future__ import annotations

from typing import Optional, Sequence

from ..model import LeaveRequest
from .base import LeaveSelectionStrategy


class EarliestStartStrategy(LeaveSelectionStrategy):
    """The request that started first; input order breaks ties."""

    def select(self, candidates: Sequence[LeaveRequest]) -> Optional[LeaveRequest]:
        if not candidates:
            return None
        return min(candidates, key=lambda lr: lr.start_date)


class LatestStartStrategy(LeaveSelectionStrategy):
    """The most recently started request; input order breaks ties."""

    def select(self, candidates: Sequence[LeaveRequest]) -> Optional[LeaveRequest]:
        best = None
        for lr in candidates:
            if best is None or lr.start_date > best.start_date:
                best = lr
        return best
