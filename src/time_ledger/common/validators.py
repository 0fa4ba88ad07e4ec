from __future__ import annotations

import math
from datetime import date
from typing import Union

from ..core.exceptions import ValidationError
from ..core.types import EntityId
from .datetime_utils import parse_iso_date


def require_id(value, field_name: str) -> EntityId:
    if value is None or (isinstance(value, str) and not value.strip()):
        raise ValidationError(f"{field_name} is required")
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} is not valid")
    return value.strip() if isinstance(value, str) else value


def require_positive_hours(value, field_name: str = "Hours") -> float:
    try:
        hours = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if math.isnan(hours) or math.isinf(hours):
        raise ValidationError(f"{field_name} must be a number")
    if hours <= 0:
        raise ValidationError(f"{field_name} must be greater than 0")
    return hours


def require_date(value: Union[date, str], field_name: str = "Date") -> date:
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date((value or "").strip())
    except (AttributeError, ValueError):
        raise ValidationError(f"{field_name} is not valid (YYYY-MM-DD)")


def require_month(year: int, month: int) -> tuple[int, int]:
    if not 1 <= int(month) <= 12:
        raise ValidationError("Month must be between 1 and 12")
    if not 1 <= int(year) <= 9999:
        raise ValidationError("Year is not valid")
    return int(year), int(month)


def coerce_id(value: str) -> EntityId:
    """Ids arrive as strings from URLs; numeric ids are stored as integers."""

    value = value.strip()
    return int(value) if value.isdigit() else value
