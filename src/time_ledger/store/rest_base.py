from __future__ import annotations

import logging
import math
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Any, AsyncIterator, Dict, List, Mapping, Optional, Sequence, Tuple

import httpx

from ..core.exceptions import StoreError
from .connection import StoreConnection

logger = logging.getLogger(__name__)

_RETURN_ROWS = {"Prefer": "return=representation"}


@asynccontextmanager
async def store_client(conn_factory: StoreConnection, *, operation: str) -> AsyncIterator[httpx.AsyncClient]:
    client = conn_factory.connect()
    try:
        yield client
    except httpx.HTTPError as exc:
        logger.warning("Store %s transport error: %s", operation, exc)
        raise StoreError(f"Store unavailable during {operation}: {exc}", operation=operation) from exc
    finally:
        await client.aclose()


def check_response(response: httpx.Response, *, operation: str) -> None:
    if response.is_success:
        return
    message = _error_message(response)
    logger.warning("Store %s failed (%s): %s", operation, response.status_code, message)
    raise StoreError(message, operation=operation, status_code=response.status_code)


def _error_message(response: httpx.Response) -> str:
    try:
        body = response.json()
    except ValueError:
        return response.text or f"HTTP {response.status_code}"
    if isinstance(body, dict):
        return str(body.get("message") or body.get("error") or body)
    return str(body)


def fetchall(response: httpx.Response) -> List[Dict[str, Any]]:
    if not response.content:
        return []
    rows = response.json()
    if isinstance(rows, dict):
        return [rows]
    return list(rows or [])


def fetchone(response: httpx.Response) -> Optional[Dict[str, Any]]:
    rows = fetchall(response)
    return rows[0] if rows else None


def eq(value: Any) -> str:
    if isinstance(value, bool):
        return f"eq.{str(value).lower()}"
    return f"eq.{value}"


class RestTable:
    """One PostgREST collection: read / insert / update_by_id / delete_by_id."""

    def __init__(self, conn_factory: StoreConnection, table: str):
        self._conn_factory = conn_factory
        self._table = table

    @property
    def table(self) -> str:
        return self._table

    async def read(
        self,
        *,
        filters: Optional[Mapping[str, Any]] = None,
        order_by: Optional[Sequence[Tuple[str, bool]]] = None,
        columns: str = "*",
        limit: Optional[int] = None,
    ) -> List[Dict[str, Any]]:
        """Select rows; order_by is a sequence of (column, descending)."""

        params: Dict[str, Any] = {"select": columns}
        for column, value in (filters or {}).items():
            params[column] = eq(value)
        if order_by:
            params["order"] = ",".join(f"{col}.{'desc' if desc else 'asc'}" for col, desc in order_by)
        if limit is not None:
            params["limit"] = int(limit)

        operation = f"read {self._table}"
        async with store_client(self._conn_factory, operation=operation) as client:
            response = await client.get(f"/{self._table}", params=params)
            check_response(response, operation=operation)
            return fetchall(response)

    async def insert(self, row: Mapping[str, Any]) -> Dict[str, Any]:
        operation = f"insert {self._table}"
        async with store_client(self._conn_factory, operation=operation) as client:
            response = await client.post(f"/{self._table}", json=dict(row), headers=_RETURN_ROWS)
            check_response(response, operation=operation)
            stored = fetchone(response)
            if stored is None:
                raise StoreError("Store returned no row for insert", operation=operation)
            return stored

    async def update_by_id(self, record_id: Any, fields: Mapping[str, Any]) -> Optional[Dict[str, Any]]:
        """Returns the updated row, or None when no row has that id."""

        operation = f"update {self._table}"
        async with store_client(self._conn_factory, operation=operation) as client:
            response = await client.patch(
                f"/{self._table}",
                params={"id": eq(record_id)},
                json=dict(fields),
                headers=_RETURN_ROWS,
            )
            check_response(response, operation=operation)
            return fetchone(response)

    async def delete_by_id(self, record_id: Any) -> bool:
        operation = f"delete {self._table}"
        async with store_client(self._conn_factory, operation=operation) as client:
            response = await client.delete(
                f"/{self._table}",
                params={"id": eq(record_id)},
                headers=_RETURN_ROWS,
            )
            check_response(response, operation=operation)
            return bool(fetchall(response))


def normalize_number(value: Any) -> float:
    """Normalize stored numbers across PostgREST numeric encodings.

    numeric columns can arrive as:
    - int / float
    - string (e.g. '7.50')
    - Decimal (when rows come from other drivers)
    Anything unusable counts as 0.
    """

    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float, Decimal)):
        hours = float(value)
    elif isinstance(value, str):
        try:
            hours = float(value.strip())
        except ValueError:
            return 0.0
    else:
        return 0.0
    if math.isnan(hours) or math.isinf(hours):
        return 0.0
    return hours


def normalize_optional_float(value: Any) -> Optional[float]:
    if value is None or value == "":
        return None
    return normalize_number(value)


def normalize_bool(value: Any, *, default: bool) -> bool:
    if value is None:
        return default
    if isinstance(value, str):
        return value.strip().lower() in {"true", "t", "1", "yes"}
    return bool(value)


def normalize_optional_str(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value)
    return text if text.strip() else None
