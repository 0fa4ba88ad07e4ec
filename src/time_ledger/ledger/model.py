from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date

from ..identity.model import LedgerKey, ResolvedIdentity
from ..timelogs.model import TimeLogRecord


@dataclass
class EmployeeLedger:
    """Hours of one identity, bucketed by calendar date.

    hours_by_date[d] is always the sum of the hours in entries_by_date[d].
    """

    key: LedgerKey
    identity: ResolvedIdentity
    hours_by_date: dict[date, float] = field(default_factory=dict)
    entries_by_date: dict[date, list[TimeLogRecord]] = field(default_factory=dict)

    @property
    def display_name(self) -> str:
        return self.identity.display_name

    @property
    def total_hours(self) -> float:
        return sum(self.hours_by_date.values())

    def add(self, day: date, record: TimeLogRecord) -> None:
        self.hours_by_date[day] = self.hours_by_date.get(day, 0.0) + record.hours
        self.entries_by_date.setdefault(day, []).append(record)


LedgerMap = dict[LedgerKey, EmployeeLedger]
