from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..common.datetime_utils import parse_iso_date_or_none


@dataclass(frozen=True)
class PublicHoliday:
    """Official holiday; applies to every department."""

    holiday_id: Optional[str]
    name: str
    holiday_date: Optional[date]

    @classmethod
    def from_dict(cls, payload: dict) -> "PublicHoliday":
        return cls(
            holiday_id=payload.get("id"),
            name=str(payload.get("name") or ""),
            holiday_date=parse_iso_date_or_none(payload.get("date")),
        )


@dataclass(frozen=True)
class RamadanDateRange:
    """Inclusive Ramadan interval of one calendar year."""

    start: Optional[date]
    end: Optional[date]

    def contains(self, day: date) -> bool:
        if self.start is None or self.end is None:
            return False
        return self.start <= day <= self.end

    @classmethod
    def from_dict(cls, payload: dict) -> "RamadanDateRange":
        return cls(
            start=parse_iso_date_or_none(payload.get("start")),
            end=parse_iso_date_or_none(payload.get("end")),
        )


def ramadan_ranges_from_dict(payload: dict) -> dict[int, RamadanDateRange]:
    """``{"2025": {"start": ..., "end": ...}}`` -> ``{2025: RamadanDateRange}``.

    Keys that are not years are skipped.
    """
    ranges: dict[int, RamadanDateRange] = {}
    for key, value in (payload or {}).items():
        try:
            year = int(key)
        except (TypeError, ValueError):
            continue
        if isinstance(value, RamadanDateRange):
            ranges[year] = value
        elif isinstance(value, dict):
            ranges[year] = RamadanDateRange.from_dict(value)
    return ranges
