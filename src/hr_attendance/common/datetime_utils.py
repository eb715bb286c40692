from __future__ import annotations

import calendar
from datetime import date, datetime, timedelta
from typing import Iterator, Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def parse_iso_date_or_none(value) -> Optional[date]:
    """Lenient variant of parse_iso_date: dates pass through, junk becomes None."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return parse_iso_date(value.strip())
    except ValueError:
        return None


def iter_days(start: date, end: date) -> Iterator[date]:
    """Every calendar day of the closed interval [start, end]."""
    day = start
    while day <= end:
        yield day
        day += timedelta(days=1)


def month_bounds(year: int, month: int) -> tuple[date, date]:
    last_day = calendar.monthrange(year, month)[1]
    return date(year, month, 1), date(year, month, last_day)
