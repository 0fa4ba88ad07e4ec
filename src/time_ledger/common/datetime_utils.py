from __future__ import annotations

import re
from datetime import date, datetime
from typing import Optional

_DATE_KEY_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def date_key(point_in_time: Optional[str]) -> Optional[date]:
    """Calendar date of a stored timestamp, or None when it is not usable.

    Only the part before 'T' is considered and it must have the strict
    YYYY-MM-DD shape and name a real day.
    """

    if not point_in_time or not isinstance(point_in_time, str):
        return None
    day = point_in_time.split("T")[0]
    if not _DATE_KEY_RE.match(day):
        return None
    try:
        return parse_iso_date(day)
    except ValueError:
        return None


def entry_timestamp(work_date: date, time_of_day: str) -> str:
    return f"{work_date.isoformat()}T{time_of_day}"


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return datetime.now()
