from __future__ import annotations

from ..core.exceptions import ValidationError


def require_non_empty(value: str, field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_year(value) -> int:
    try:
        year = int(value)
    except (TypeError, ValueError):
        raise ValidationError("year must be an integer")
    if not 1 <= year <= 9999:
        raise ValidationError("year out of range")
    return year


def require_month(value) -> int:
    try:
        month = int(value)
    except (TypeError, ValueError):
        raise ValidationError("month must be an integer")
    if not 1 <= month <= 12:
        raise ValidationError("month must be between 1 and 12")
    return month
