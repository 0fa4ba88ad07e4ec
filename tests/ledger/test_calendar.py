from __future__ import annotations

import calendar
from datetime import date

import pytest

from time_ledger.core.enums import Intensity
from time_ledger.core.exceptions import ValidationError
from time_ledger.employees.model import EmployeeIdentity
from time_ledger.identity.model import KnownIdentity, LedgerKey
from time_ledger.ledger.calendar import build_month_grid, intensity_for, month_total_hours
from time_ledger.ledger.model import EmployeeLedger

ADA = EmployeeIdentity(id=1, display_name="Ada Lovelace")


def _ledger_map(hours_by_date):
    identity = KnownIdentity(ADA)
    return {identity.key: EmployeeLedger(key=identity.key, identity=identity, hours_by_date=dict(hours_by_date))}


def test_scenario_c_month_grid_and_total():
    ledger_map = _ledger_map({date(2025, 1, 3): 7.5, date(2025, 1, 4): 3.0, date(2025, 2, 1): 6.0})

    cells = build_month_grid(ledger_map, LedgerKey.for_employee(1), 2025, 1)
    by_day = {c.day_number: c for c in cells if not c.is_padding}

    assert by_day[3].intensity is Intensity.FULL
    assert by_day[4].intensity is Intensity.PARTIAL
    assert by_day[5].intensity is Intensity.EMPTY
    assert by_day[3].date == date(2025, 1, 3)
    assert month_total_hours(ledger_map[LedgerKey.for_employee(1)], 2025, 1) == pytest.approx(10.5)


def test_grid_pads_to_first_weekday_sunday_first():
    # 2025-01-01 is a Wednesday.
    cells = build_month_grid(_ledger_map({}), 1, 2025, 1)

    assert [c.day_number for c in cells[:4]] == [0, 0, 0, 1]
    assert len(cells) == 3 + 31
    assert all(c.date is None and c.total_hours == 0 for c in cells[:3])


def test_grid_pads_monday_first():
    cells = build_month_grid(_ledger_map({}), 1, 2025, 1, week_starts_on=calendar.MONDAY)

    assert [c.day_number for c in cells[:3]] == [0, 0, 1]


def test_grid_handles_leap_february():
    cells = build_month_grid(_ledger_map({}), 1, 2024, 2)

    assert [c.day_number for c in cells if not c.is_padding][-1] == 29


def test_missing_employee_gives_empty_grid():
    cells = build_month_grid({}, LedgerKey.for_name("Nobody"), 2025, 1)

    assert all(c.total_hours == 0 and c.intensity is Intensity.EMPTY for c in cells)
    assert month_total_hours(None, 2025, 1) == 0.0


@pytest.mark.parametrize("month", [0, 13, -1])
def test_invalid_month_is_rejected(month):
    with pytest.raises(ValidationError):
        build_month_grid(_ledger_map({}), 1, 2025, month)


@pytest.mark.parametrize(
    "hours, expected",
    [(0, Intensity.EMPTY), (0.25, Intensity.PARTIAL), (7.49, Intensity.PARTIAL), (7.5, Intensity.FULL), (12, Intensity.FULL)],
)
def test_intensity_thresholds(hours, expected):
    assert intensity_for(hours) is expected
