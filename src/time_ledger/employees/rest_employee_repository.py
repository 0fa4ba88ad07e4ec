from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.constants import EMPLOYEES_TABLE
from ..store.connection import StoreConnection
from ..store.rest_base import RestTable, normalize_bool, normalize_optional_float, normalize_optional_str
from .model import EmployeeIdentity
from .repository import EmployeeRepository


class RestEmployeeRepository(EmployeeRepository):
    def __init__(self, conn_factory: StoreConnection):
        self._table = RestTable(conn_factory, EMPLOYEES_TABLE)

    async def list_all(self, *, active_only: bool = False) -> Sequence[EmployeeIdentity]:
        filters = {"is_active": True} if active_only else None
        rows = await self._table.read(filters=filters, order_by=[("is_active", True), ("name", False)])
        return [_to_employee(r) for r in rows]


def _to_employee(r: Dict[str, Any]) -> EmployeeIdentity:
    return EmployeeIdentity(
        id=r["id"],
        display_name=str(r.get("name") or "").strip(),
        initials=str(r.get("initials") or "").strip().upper(),
        color_token=normalize_optional_str(r.get("color")),
        avatar_ref=normalize_optional_str(r.get("avatar_url")),
        active=normalize_bool(r.get("is_active"), default=True),
        hourly_rate=normalize_optional_float(r.get("hourly_rate")),
    )
