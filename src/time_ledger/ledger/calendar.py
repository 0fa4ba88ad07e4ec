from __future__ import annotations

import calendar
from dataclasses import dataclass
from datetime import date
from typing import Optional, Union

from ..common.validators import require_month
from ..core.constants import FULL_DAY_HOURS
from ..core.enums import Intensity
from ..core.types import EntityId
from ..identity.model import LedgerKey
from .model import EmployeeLedger, LedgerMap


@dataclass(frozen=True)
class CalendarCell:
    """One square of the month grid; day_number 0 is leading padding."""

    day_number: int
    date: Optional[date]
    total_hours: float
    intensity: Intensity

    @property
    def is_padding(self) -> bool:
        return self.day_number == 0


def intensity_for(hours: float) -> Intensity:
    if hours <= 0:
        return Intensity.EMPTY
    if hours < FULL_DAY_HOURS:
        return Intensity.PARTIAL
    return Intensity.FULL


def _as_key(employee_key: Union[LedgerKey, EntityId]) -> LedgerKey:
    if isinstance(employee_key, LedgerKey):
        return employee_key
    return LedgerKey.for_employee(employee_key)


def build_month_grid(
    ledger_map: LedgerMap,
    employee_key: Union[LedgerKey, EntityId],
    year: int,
    month: int,
    *,
    week_starts_on: int = calendar.SUNDAY,
) -> list[CalendarCell]:
    year, month = require_month(year, month)
    ledger = ledger_map.get(_as_key(employee_key))
    hours_by_date = ledger.hours_by_date if ledger else {}

    first_weekday, days_in_month = calendar.monthrange(year, month)
    padding = (first_weekday - week_starts_on) % 7

    cells = [CalendarCell(day_number=0, date=None, total_hours=0.0, intensity=Intensity.EMPTY) for _ in range(padding)]
    for day_number in range(1, days_in_month + 1):
        day = date(year, month, day_number)
        hours = hours_by_date.get(day, 0.0)
        cells.append(CalendarCell(day_number=day_number, date=day, total_hours=hours, intensity=intensity_for(hours)))
    return cells


def month_total_hours(ledger: Optional[EmployeeLedger], year: int, month: int) -> float:
    year, month = require_month(year, month)
    if ledger is None:
        return 0.0
    return sum(h for d, h in ledger.hours_by_date.items() if d.year == year and d.month == month)
