from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from ..core.enums import LedgerPhase
from ..core.types import EntityId
from ..employees.model import EmployeeIdentity
from ..ledger.model import LedgerMap
from ..projects.model import Project
from ..timelogs.model import TimeLogRecord


@dataclass(frozen=True)
class LedgerSnapshot:
    """Everything one reload read from the store, plus the ledger built from it."""

    records: tuple[TimeLogRecord, ...]
    employees: tuple[EmployeeIdentity, ...]
    projects: tuple[Project, ...]
    ledger: LedgerMap = field(compare=False)
    loaded_at: datetime

    def find_record(self, entry_id: EntityId) -> Optional[TimeLogRecord]:
        return next((r for r in self.records if str(r.id) == str(entry_id)), None)

    def find_employee(self, employee_id: EntityId) -> Optional[EmployeeIdentity]:
        return next((e for e in self.employees if str(e.id) == str(employee_id)), None)

    def find_project(self, project_id: EntityId) -> Optional[Project]:
        return next((p for p in self.projects if str(p.id) == str(project_id)), None)


class LedgerState:
    """Tracks the last applied snapshot and what the gateway is doing.

    Several writes and reloads may be in flight at once, so in-flight work is
    counted rather than flagged. Reloads are numbered in the order they start
    and a result older than the one already applied is discarded. A reload
    that started before the latest committed write may still be shown, but
    it cannot clear the STALE phase because it may be missing that write.
    """

    def __init__(self) -> None:
        self.snapshot: Optional[LedgerSnapshot] = None
        self.last_error: Optional[Exception] = None
        self._pending = 0
        self._reloading = 0
        self._stale = False
        self._issued = 0
        self._applied = 0
        self._committed_after = 0

    @property
    def phase(self) -> LedgerPhase:
        if self._pending:
            return LedgerPhase.PENDING
        if self._reloading:
            return LedgerPhase.RELOADING
        if self._stale:
            return LedgerPhase.STALE
        if self.snapshot is None:
            return LedgerPhase.EMPTY
        return LedgerPhase.FRESH

    def begin_write(self) -> None:
        self._pending += 1

    def end_write(self) -> None:
        self._pending -= 1

    def begin_reload(self) -> int:
        self._issued += 1
        self._reloading += 1
        return self._issued

    def end_reload(self) -> None:
        self._reloading -= 1

    def apply(self, sequence: int, snapshot: LedgerSnapshot) -> bool:
        if sequence <= self._applied:
            return False
        self._applied = sequence
        self.snapshot = snapshot
        if sequence > self._committed_after:
            self._stale = False
            self.last_error = None
        return True

    def mark_committed(self) -> None:
        # Only reloads numbered after this point can have read the write.
        self._committed_after = self._issued

    def record_error(self, exc: Exception) -> None:
        self.last_error = exc

    def mark_stale(self, exc: Exception) -> None:
        self._stale = True
        self.last_error = exc
