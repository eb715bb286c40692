"""Worked-duration rules for a single clock-in/clock-out pair.

Clock times are local ``HH:MM`` strings. A clock-out that is numerically
earlier than the clock-in belongs to an overnight shift and wraps past
midnight. Unusable input contributes nothing instead of raising so a single
dirty log never blocks a report.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..core.constants import HOURS_PRECISION, MINUTES_PER_DAY, MINUTES_PER_HOUR

logger = logging.getLogger(__name__)


def time_to_minutes(value) -> Optional[int]:
    """Minutes since midnight for ``HH:MM`` (``HH:MM:SS`` tolerated), else None."""
    if not isinstance(value, str) or not value.strip():
        return None
    parts = value.strip().split(":")
    if len(parts) not in (2, 3):
        return None
    # ASCII digits only: no signs, no other scripts' numerals.
    if not all(p.isascii() and p.isdigit() for p in parts):
        return None
    if len(parts) == 3 and (len(parts[2]) != 2 or int(parts[2]) > 59):
        return None
    hours, minutes = int(parts[0]), int(parts[1])
    if not (0 <= hours < 24 and 0 <= minutes < 60):
        return None
    return hours * MINUTES_PER_HOUR + minutes


def duration_minutes(clock_in, clock_out) -> int:
    start = time_to_minutes(clock_in)
    end = time_to_minutes(clock_out)
    if start is None or end is None:
        if clock_in or clock_out:
            logger.debug("Unusable clock times %r-%r counted as 0 minutes", clock_in, clock_out)
        return 0

    minutes = end - start
    if minutes < 0:
        minutes += MINUTES_PER_DAY
    return minutes


def duration_hours(clock_in, clock_out) -> float:
    """Worked hours in [0, 24), rounded to 2 decimals."""
    return round(duration_minutes(clock_in, clock_out) / MINUTES_PER_HOUR, HOURS_PRECISION)
