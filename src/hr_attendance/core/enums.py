from __future__ import annotations

from enum import Enum


class Role(str, Enum):
    """User role used for report visibility."""

    ADMIN = "Admin"
    EMPLOYEE = "Employee"
    HEAD_OF_DEPARTMENT = "Head of Department"


class LeaveStatus(str, Enum):
    """Approval state of a leave request."""

    PENDING = "Pending"
    APPROVED = "Approved"
    REJECTED = "Rejected"


class DayKind(str, Enum):
    """Display category of a calendar day, highest precedence first."""

    LEAVE = "LEAVE"
    HOLIDAY = "HOLIDAY"
    WEEKEND = "WEEKEND"
    WORK = "WORK"


class LeaveTieBreak(str, Enum):
    """How to pick one approved leave when several cover the same day."""

    FIRST_MATCH = "FIRST_MATCH"
    EARLIEST_START = "EARLIEST_START"
    LATEST_START = "LATEST_START"
    SHORTEST_SPAN = "SHORTEST_SPAN"
