from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.types import EntityId
from .model import NewTimeLog, TimeLogChanges, TimeLogRecord


class TimeLogRepository(Protocol):
    async def list_all(self) -> Sequence[TimeLogRecord]:
        """All records, newest point_in_time first."""

        raise NotImplementedError

    async def insert(self, entry: NewTimeLog) -> TimeLogRecord:
        """Store assigns id and created_at."""

        raise NotImplementedError

    async def update_by_id(self, entry_id: EntityId, changes: TimeLogChanges) -> Optional[TimeLogRecord]:
        """Returns None when no record has that id."""

        raise NotImplementedError

    async def delete_by_id(self, entry_id: EntityId) -> bool:
        raise NotImplementedError

    async def exists_for_employee(self, employee_id: EntityId) -> bool:
        raise NotImplementedError
