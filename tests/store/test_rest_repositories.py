from __future__ import annotations

import json

import httpx
import pytest

from time_ledger.core.exceptions import StoreError
from time_ledger.employees.rest_employee_repository import RestEmployeeRepository
from time_ledger.projects.rest_project_repository import RestProjectRepository
from time_ledger.store.connection import StoreConfig, StoreConnection
from time_ledger.timelogs.model import NewTimeLog, TimeLogChanges
from time_ledger.timelogs.rest_timelog_repository import RestTimeLogRepository


class RecordingStore:
    """MockTransport handler that answers with canned responses and keeps requests."""

    def __init__(self, *responses):
        self.responses = list(responses)
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        response = self.responses.pop(0)
        if isinstance(response, Exception):
            raise response
        return response


def _conn(store: RecordingStore) -> StoreConnection:
    return StoreConnection(StoreConfig(url="http://store.test/", api_key="secret"), transport=httpx.MockTransport(store))


LOG_ROW = {
    "id": 7,
    "created_at": "2025-01-03T12:00:01+00:00",
    "timestamp": "2025-01-03T12:00:00",
    "project_id": 10,
    "project_name": "Website",
    "project_color": "#10b981",
    "hours": "7.50",
    "user_id": 1,
    "user_data": None,
}


@pytest.mark.asyncio
async def test_list_time_logs_reads_newest_first_with_auth_headers():
    store = RecordingStore(httpx.Response(200, json=[LOG_ROW, {**LOG_ROW, "id": 8, "hours": -2, "user_data": '{"name": "Jane"}'}]))

    records = await RestTimeLogRepository(_conn(store)).list_all()

    request = store.requests[0]
    assert request.method == "GET"
    assert request.url.path == "/rest/v1/he_time_logs"
    assert request.url.params["order"] == "timestamp.desc"
    assert request.url.params["select"] == "*"
    assert request.headers["apikey"] == "secret"
    assert request.headers["authorization"] == "Bearer secret"

    assert records[0].hours == 7.5
    assert records[0].project_ref == 10
    assert records[1].hours == 0.0
    assert records[1].legacy_descriptor == '{"name": "Jane"}'


@pytest.mark.asyncio
async def test_insert_time_log_posts_row_and_returns_stored_record():
    store = RecordingStore(httpx.Response(201, json=[LOG_ROW]))
    entry = NewTimeLog(
        point_in_time="2025-01-03T12:00:00",
        project_ref=10,
        project_name_snapshot="Website",
        project_color_snapshot="#10b981",
        hours=7.5,
        employee_ref=1,
    )

    record = await RestTimeLogRepository(_conn(store)).insert(entry)

    request = store.requests[0]
    assert request.method == "POST"
    assert request.headers["prefer"] == "return=representation"
    assert json.loads(request.content) == {
        "timestamp": "2025-01-03T12:00:00",
        "project_id": 10,
        "project_name": "Website",
        "project_color": "#10b981",
        "hours": 7.5,
        "user_id": 1,
    }
    assert record.id == 7


@pytest.mark.asyncio
async def test_update_and_delete_report_missing_rows():
    store = RecordingStore(httpx.Response(200, json=[]), httpx.Response(200, json=[]))
    repo = RestTimeLogRepository(_conn(store))

    changes = TimeLogChanges(project_ref=10, project_name_snapshot="Website", project_color_snapshot=None, hours=1.0)
    assert await repo.update_by_id(99, changes) is None
    assert await repo.delete_by_id(99) is False

    assert store.requests[0].method == "PATCH"
    assert store.requests[0].url.params["id"] == "eq.99"
    assert store.requests[1].method == "DELETE"


@pytest.mark.asyncio
async def test_exists_for_employee_reads_a_single_id():
    store = RecordingStore(httpx.Response(200, json=[{"id": 7}]))

    assert await RestTimeLogRepository(_conn(store)).exists_for_employee(1) is True

    params = store.requests[0].url.params
    assert params["user_id"] == "eq.1"
    assert params["select"] == "id"
    assert params["limit"] == "1"


@pytest.mark.asyncio
async def test_store_rejection_becomes_store_error():
    store = RecordingStore(httpx.Response(400, json={"message": "invalid input syntax"}))

    with pytest.raises(StoreError) as excinfo:
        await RestTimeLogRepository(_conn(store)).list_all()

    assert excinfo.value.status_code == 400
    assert excinfo.value.message == "invalid input syntax"
    assert excinfo.value.operation == "read he_time_logs"


@pytest.mark.asyncio
async def test_transport_failure_becomes_store_error():
    store = RecordingStore(httpx.ConnectError("connection refused"))

    with pytest.raises(StoreError) as excinfo:
        await RestTimeLogRepository(_conn(store)).delete_by_id(1)

    assert excinfo.value.status_code is None
    assert isinstance(excinfo.value.__cause__, httpx.ConnectError)


@pytest.mark.asyncio
async def test_employees_are_mapped_and_filterable_by_active():
    rows = [
        {"id": 1, "name": " Ada Lovelace ", "initials": "al", "color": "#123456", "avatar_url": "", "is_active": True, "hourly_rate": "650"},
        {"id": 2, "name": "Old Timer", "initials": "OT", "color": None, "avatar_url": None, "is_active": False, "hourly_rate": None},
    ]
    store = RecordingStore(httpx.Response(200, json=rows), httpx.Response(200, json=rows[:1]))
    repo = RestEmployeeRepository(_conn(store))

    employees = await repo.list_all()
    await repo.list_all(active_only=True)

    assert employees[0].display_name == "Ada Lovelace"
    assert employees[0].initials == "AL"
    assert employees[0].avatar_ref is None
    assert employees[0].hourly_rate == 650.0
    assert employees[1].active is False
    assert "is_active" not in store.requests[0].url.params
    assert store.requests[1].url.params["is_active"] == "eq.true"


@pytest.mark.asyncio
async def test_projects_read_legacy_cost_column_and_filter_hidden():
    rows = [{"id": 10, "name": "Website", "color": "purple", "type": "Kunde", "is_hidden": None, "expected_turnover": 1000, "expected_cost": "250.5"}]
    store = RecordingStore(httpx.Response(200, json=rows), httpx.Response(200, json=[]))
    repo = RestProjectRepository(_conn(store))

    projects = await repo.list_all()
    await repo.list_all(include_hidden=False)

    assert projects[0].type_token == "Kunde"
    assert projects[0].hidden is False
    assert projects[0].expected_costs == 250.5
    assert store.requests[1].url.params["is_hidden"] == "eq.false"
