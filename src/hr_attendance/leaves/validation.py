"""Data-quality checks for leave requests.

Overlapping approved requests of one employee make the day's leave type
ambiguous; the engine resolves that with the configured selection strategy,
but the overlap itself should be fixed upstream.
"""

from __future__ import annotations

from collections import defaultdict
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Sequence

from ..core.exceptions import ValidationError
from .model import LeaveRequest


@dataclass(frozen=True)
class LeaveOverlap:
    employee_id: str
    first: LeaveRequest
    second: LeaveRequest
    overlap_start: date
    overlap_end: date

    def to_dict(self) -> dict:
        return {
            "employee_id": self.employee_id,
            "first_request_id": self.first.request_id,
            "second_request_id": self.second.request_id,
            "first_leave_type": self.first.leave_type,
            "second_leave_type": self.second.leave_type,
            "overlap_start": self.overlap_start.isoformat(),
            "overlap_end": self.overlap_end.isoformat(),
        }


def _usable_approved(leaves: Iterable[LeaveRequest]) -> list[LeaveRequest]:
    return [
        lr
        for lr in leaves
        if lr.is_approved and lr.start_date is not None and lr.end_date is not None and lr.start_date <= lr.end_date
    ]


def find_overlapping_approved_leaves(leaves: Iterable[LeaveRequest]) -> list[LeaveOverlap]:
    by_employee: dict[str, list[LeaveRequest]] = defaultdict(list)
    for lr in _usable_approved(leaves):
        by_employee[lr.employee_id].append(lr)

    overlaps: list[LeaveOverlap] = []
    for employee_id, items in by_employee.items():
        for i, first in enumerate(items):
            for second in items[i + 1 :]:
                start = max(first.start_date, second.start_date)
                end = min(first.end_date, second.end_date)
                if start <= end:
                    overlaps.append(LeaveOverlap(employee_id, first, second, start, end))
    return overlaps


def ensure_no_overlapping_approved_leaves(leaves: Sequence[LeaveRequest]) -> None:
    overlaps = find_overlapping_approved_leaves(leaves)
    if overlaps:
        o = overlaps[0]
        raise ValidationError(
            f"Employee {o.employee_id} has overlapping approved leave "
            f"from {o.overlap_start.isoformat()} to {o.overlap_end.isoformat()}"
        )


def approved_leaves_on(leaves: Iterable[LeaveRequest], day: date) -> list[LeaveRequest]:
    """Approved requests covering ``day`` (the dashboard's "on leave today")."""
    return [lr for lr in leaves if lr.is_approved and lr.covers(day)]
