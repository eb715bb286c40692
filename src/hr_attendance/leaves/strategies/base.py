from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional, Sequence

from ..model import LeaveRequest


class LeaveSelectionStrategy(ABC):
    """Strategy Pattern: pick one approved leave among those covering a day."""

    @abstractmethod
    def select(self, candidates: Sequence[LeaveRequest]) -> Optional[LeaveRequest]:
        raise NotImplementedError
