from __future__ import annotations

from typing import Any, Dict, Sequence

from ..core.constants import PROJECTS_TABLE
from ..store.connection import StoreConnection
from ..store.rest_base import RestTable, normalize_bool, normalize_number, normalize_optional_str
from .model import Project
from .repository import ProjectRepository


class RestProjectRepository(ProjectRepository):
    def __init__(self, conn_factory: StoreConnection):
        self._table = RestTable(conn_factory, PROJECTS_TABLE)

    async def list_all(self, *, include_hidden: bool = True) -> Sequence[Project]:
        filters = None if include_hidden else {"is_hidden": False}
        rows = await self._table.read(filters=filters, order_by=[("name", False)])
        return [_to_project(r) for r in rows]


def _to_project(r: Dict[str, Any]) -> Project:
    expected_costs = r.get("expected_costs")
    if expected_costs is None:
        expected_costs = r.get("expected_cost")

    return Project(
        id=r["id"],
        name=str(r.get("name") or ""),
        color_token=normalize_optional_str(r.get("color")),
        type_token=normalize_optional_str(r.get("type")),
        hidden=normalize_bool(r.get("is_hidden"), default=False),
        expected_turnover=normalize_number(r.get("expected_turnover")),
        expected_costs=normalize_number(expected_costs),
    )
