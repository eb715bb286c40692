from __future__ import annotations

from typing import Optional, Sequence

from ..model import LeaveRequest
from .base import LeaveSelectionStrategy


class FirstMatchStrategy(LeaveSelectionStrategy):
    """Whichever request comes first in input order."""

    def select(self, candidates: Sequence[LeaveRequest]) -> Optional[LeaveRequest]:
        return candidates[0] if candidates else None
