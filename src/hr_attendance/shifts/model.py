from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..attendance.duration import duration_hours


@dataclass(frozen=True)
class Shift:
    """Domain entity: named shift template of a department.

    Only used to pre-fill time logs; the engine reads the log's own times.
    """

    shift_id: str
    name: str
    start_time: str
    end_time: str
    department: str = ""
    color: Optional[str] = None

    @property
    def duration_hours(self) -> float:
        return duration_hours(self.start_time, self.end_time)

    @classmethod
    def from_dict(cls, payload: dict) -> "Shift":
        return cls(
            shift_id=str(payload.get("id") or ""),
            name=str(payload.get("name") or ""),
            start_time=str(payload.get("startTime") or ""),
            end_time=str(payload.get("endTime") or ""),
            department=str(payload.get("department") or ""),
            color=payload.get("color"),
        )
