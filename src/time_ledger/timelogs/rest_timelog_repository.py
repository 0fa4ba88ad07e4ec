from __future__ import annotations

import logging
from typing import Any, Dict, Optional, Sequence

from ..core.constants import TIME_LOGS_TABLE
from ..core.types import EntityId
from ..store.connection import StoreConnection
from ..store.rest_base import RestTable, normalize_number, normalize_optional_str
from .model import NewTimeLog, TimeLogChanges, TimeLogRecord
from .repository import TimeLogRepository

logger = logging.getLogger(__name__)


class RestTimeLogRepository(TimeLogRepository):
    def __init__(self, conn_factory: StoreConnection):
        self._table = RestTable(conn_factory, TIME_LOGS_TABLE)

    async def list_all(self) -> Sequence[TimeLogRecord]:
        rows = await self._table.read(order_by=[("timestamp", True)])
        return [to_record(r) for r in rows]

    async def insert(self, entry: NewTimeLog) -> TimeLogRecord:
        row = await self._table.insert(
            {
                "timestamp": entry.point_in_time,
                "project_id": entry.project_ref,
                "project_name": entry.project_name_snapshot,
                "project_color": entry.project_color_snapshot,
                "hours": entry.hours,
                "user_id": entry.employee_ref,
            }
        )
        return to_record(row)

    async def update_by_id(self, entry_id: EntityId, changes: TimeLogChanges) -> Optional[TimeLogRecord]:
        row = await self._table.update_by_id(
            entry_id,
            {
                "project_id": changes.project_ref,
                "project_name": changes.project_name_snapshot,
                "project_color": changes.project_color_snapshot,
                "hours": changes.hours,
            },
        )
        return to_record(row) if row else None

    async def delete_by_id(self, entry_id: EntityId) -> bool:
        return await self._table.delete_by_id(entry_id)

    async def exists_for_employee(self, employee_id: EntityId) -> bool:
        rows = await self._table.read(filters={"user_id": employee_id}, columns="id", limit=1)
        return bool(rows)


def to_record(r: Dict[str, Any]) -> TimeLogRecord:
    hours = normalize_number(r.get("hours"))
    if hours < 0:
        logger.warning("Time log %s has negative hours (%s); counting it as 0", r.get("id"), hours)
        hours = 0.0

    return TimeLogRecord(
        id=r["id"],
        created_at=normalize_optional_str(r.get("created_at")),
        point_in_time=normalize_optional_str(r.get("timestamp")),
        project_ref=r.get("project_id"),
        project_name_snapshot=normalize_optional_str(r.get("project_name")),
        project_color_snapshot=normalize_optional_str(r.get("project_color")),
        hours=hours,
        employee_ref=r.get("user_id"),
        legacy_descriptor=r.get("user_data"),
    )
