from __future__ import annotations

import logging
import math
from datetime import date
from typing import Awaitable, Callable, Optional, TypeVar, Union

from ..common.datetime_utils import entry_timestamp, now_local
from ..common.validators import require_date, require_id, require_positive_hours
from ..core.constants import ENTRY_TIME_OF_DAY
from ..core.enums import LedgerPhase
from ..core.exceptions import NotFoundError, StaleLedgerError, StoreError, ValidationError
from ..core.types import EntityId
from ..employees.repository import EmployeeRepository
from ..ledger.builder import build_ledger
from ..projects.model import Project
from ..projects.normalizer import normalize_projects
from ..projects.repository import ProjectRepository
from ..timelogs.model import NewTimeLog, TimeLogChanges, TimeLogRecord
from ..timelogs.repository import TimeLogRepository
from .state import LedgerSnapshot, LedgerState

logger = logging.getLogger(__name__)

T = TypeVar("T")


class MutationGateway:
    """Single entry point for changing time logs.

    Every write goes to the store first; the local ledger is only replaced by
    a full reload after the store has acknowledged it. A failed write leaves
    the current snapshot untouched.
    """

    def __init__(
        self,
        time_logs: TimeLogRepository,
        employees: EmployeeRepository,
        projects: ProjectRepository,
        *,
        clock: Callable = now_local,
    ):
        self._time_logs = time_logs
        self._employees = employees
        self._projects = projects
        self._clock = clock
        self._state = LedgerState()

    @property
    def phase(self) -> LedgerPhase:
        return self._state.phase

    @property
    def snapshot(self) -> Optional[LedgerSnapshot]:
        return self._state.snapshot

    @property
    def last_error(self) -> Optional[Exception]:
        return self._state.last_error

    async def current(self) -> LedgerSnapshot:
        """Latest snapshot, loading the first one on demand."""

        if self._state.snapshot is None:
            return await self.reload()
        return self._state.snapshot

    async def reload(self) -> LedgerSnapshot:
        sequence = self._state.begin_reload()
        try:
            employees = tuple(await self._employees.list_all())
            projects = tuple(normalize_projects(await self._projects.list_all()))
            records = tuple(await self._time_logs.list_all())
        except StoreError as exc:
            self._state.record_error(exc)
            raise
        finally:
            self._state.end_reload()

        snapshot = LedgerSnapshot(
            records=records,
            employees=employees,
            projects=projects,
            ledger=build_ledger(records, employees, projects),
            loaded_at=self._clock(),
        )
        if not self._state.apply(sequence, snapshot):
            logger.debug("Discarding reload #%d; a newer ledger is already applied", sequence)
        return self._state.snapshot

    async def add_entry(
        self,
        employee_id: EntityId,
        project_id: EntityId,
        work_date: Union[date, str],
        hours,
    ) -> TimeLogRecord:
        snapshot = await self.current()

        employee = snapshot.find_employee(require_id(employee_id, "Employee"))
        if employee is None or not employee.active:
            raise ValidationError("Employee does not exist or is inactive")
        project = self._require_project(snapshot, project_id)
        day = require_date(work_date)
        hours = require_positive_hours(hours)

        entry = NewTimeLog(
            point_in_time=entry_timestamp(day, ENTRY_TIME_OF_DAY),
            project_ref=project.id,
            project_name_snapshot=project.name,
            project_color_snapshot=project.color_token,
            hours=hours,
            employee_ref=employee.id,
        )
        record = await self._write("add", lambda: self._time_logs.insert(entry))
        logger.info("Added time log %s: %.2fh on %s for employee %s", record.id, hours, day, employee.id)

        await self._reload_after_write("add")
        return record

    async def update_entry(self, entry_id: EntityId, *, project_id: EntityId, hours) -> TimeLogRecord:
        snapshot = await self.current()

        existing = self._require_record(snapshot, entry_id)
        project = self._require_project(snapshot, project_id)
        hours = require_positive_hours(hours)

        changes = TimeLogChanges(
            project_ref=project.id,
            project_name_snapshot=project.name,
            project_color_snapshot=project.color_token,
            hours=hours,
        )
        updated = await self._write("update", lambda: self._time_logs.update_by_id(existing.id, changes))
        if updated is None:
            await self._refresh_after_miss("update")
            raise NotFoundError(f"Time log {existing.id} no longer exists")
        logger.info("Updated time log %s: %.2fh on project %s", existing.id, hours, project.id)

        await self._reload_after_write("update")
        return updated

    async def delete_entry(self, entry_id: EntityId) -> None:
        entry_id = require_id(entry_id, "Time log")

        deleted = await self._write("delete", lambda: self._time_logs.delete_by_id(entry_id))
        if not deleted:
            await self._refresh_after_miss("delete")
            raise NotFoundError(f"Time log {entry_id} does not exist")
        logger.info("Deleted time log %s", entry_id)

        await self._reload_after_write("delete")

    async def quick_adjust(self, entry: TimeLogRecord, delta) -> TimeLogRecord:
        """Nudge an entry's hours by delta, never below zero.

        Landing on zero is rejected like any other non-positive hours value;
        deleting is the way to remove an entry.
        """

        try:
            delta = float(delta)
        except (TypeError, ValueError):
            raise ValidationError("Adjustment must be a number")
        if math.isnan(delta) or math.isinf(delta):
            raise ValidationError("Adjustment must be a number")

        return await self.update_entry(entry.id, project_id=entry.project_ref, hours=max(0.0, entry.hours + delta))

    async def find_entry(self, entry_id: EntityId) -> TimeLogRecord:
        return self._require_record(await self.current(), entry_id)

    async def employee_has_entries(self, employee_id: EntityId) -> bool:
        return await self._time_logs.exists_for_employee(require_id(employee_id, "Employee"))

    async def _write(self, operation: str, call: Callable[[], Awaitable[T]]) -> T:
        self._state.begin_write()
        try:
            result = await call()
        except StoreError as exc:
            self._state.record_error(exc)
            logger.warning("Time log %s was not stored: %s", operation, exc)
            raise
        finally:
            self._state.end_write()
        self._state.mark_committed()
        return result

    async def _reload_after_write(self, operation: str) -> LedgerSnapshot:
        try:
            return await self.reload()
        except StoreError as exc:
            self._state.mark_stale(exc)
            logger.info("Time log %s was stored but the ledger could not be reloaded: %s", operation, exc)
            raise StaleLedgerError(
                f"Saved, but the ledger could not be refreshed: {exc.message}",
                operation=f"reload after {operation}",
                status_code=exc.status_code,
            ) from exc

    async def _refresh_after_miss(self, operation: str) -> None:
        """Reload after the store reported the target row missing.

        Another client removed the row, so the local ledger is behind. A
        failed reload is only logged; the missing row stays the error the
        caller sees.
        """

        try:
            await self.reload()
        except StoreError as exc:
            logger.warning("Time log %s hit a missing row and the ledger could not be reloaded: %s", operation, exc)

    @staticmethod
    def _require_project(snapshot: LedgerSnapshot, project_id) -> Project:
        project = snapshot.find_project(require_id(project_id, "Project"))
        if project is None or project.hidden:
            raise ValidationError("Project does not exist or is hidden")
        return project

    @staticmethod
    def _require_record(snapshot: LedgerSnapshot, entry_id) -> TimeLogRecord:
        entry_id = require_id(entry_id, "Time log")
        record = snapshot.find_record(entry_id)
        if record is None:
            raise NotFoundError(f"Time log {entry_id} does not exist")
        return record
