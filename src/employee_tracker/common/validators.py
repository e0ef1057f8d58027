from __future__ import annotations

from datetime import date
from typing import Optional

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if not value or not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def optional_text(value: Optional[str]) -> Optional[str]:
    return (value or "").strip() or None


def parse_int_param(value: Optional[str], field_name: str, *, required: bool = False) -> Optional[int]:
    if value is None or value == "":
        if required:
            raise ValidationError(f"{field_name} is required")
        return None
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValidationError(f"Invalid {field_name}") from None


def parse_date_param(value: Optional[str], field_name: str, *, required: bool = False) -> Optional[date]:
    if not value:
        if required:
            raise ValidationError(f"{field_name} is required")
        return None
    try:
        return parse_iso_date(value[:10])
    except ValueError:
        raise ValidationError(f"Invalid {field_name}, expected YYYY-MM-DD") from None


def parse_bool_param(value: Optional[str]) -> Optional[bool]:
    if value is None or value == "":
        return None
    return value.strip().lower() in {"1", "true", "yes"}


def validate_month_year(month: Optional[str], year: Optional[str]) -> tuple[Optional[int], Optional[int]]:
    """Both or neither; month 1-12 and year 1900-3000."""
    if not month and not year:
        return None, None
    if not month or not year:
        raise ValidationError("Month and year must be provided together")
    m = parse_int_param(month, "month")
    y = parse_int_param(year, "year")
    if m is None or not 1 <= m <= 12:
        raise ValidationError("Invalid month. Must be between 1 and 12")
    if y is None or not 1900 <= y <= 3000:
        raise ValidationError("Invalid year. Must be between 1900 and 3000")
    return m, y
