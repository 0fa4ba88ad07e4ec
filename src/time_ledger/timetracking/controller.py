from __future__ import annotations

from dataclasses import asdict
from functools import wraps

from flask import Flask, jsonify, request

from ..common.datetime_utils import now_local
from ..common.validators import coerce_id, require_month
from ..core.exceptions import NotFoundError, StoreError, ValidationError
from ..container import Container
from ..identity.model import KnownIdentity
from ..ledger.builder import ordered_ledgers
from ..ledger.calendar import build_month_grid, month_total_hours
from ..ledger.model import EmployeeLedger
from ..projects.labels import entry_project_label, index_projects
from ..projects.statistics import build_project_statistics


def _entry_json(record, projects_by_id) -> dict:
    project_name, project_color = entry_project_label(record, projects_by_id)
    return {
        "id": record.id,
        "timestamp": record.point_in_time,
        "hours": record.hours,
        "project_id": record.project_ref,
        "project_name": project_name,
        "project_color": project_color,
    }


def _employee_json(ledger: EmployeeLedger) -> dict:
    out = {
        "key": {"kind": ledger.key.kind.value, "value": ledger.key.value},
        "employee_id": None,
        "name": ledger.display_name,
        "initials": "",
        "color": None,
        "avatar_url": None,
        "active": False,
        "total_hours": ledger.total_hours,
    }
    if isinstance(ledger.identity, KnownIdentity):
        e = ledger.identity.employee
        out.update(employee_id=e.id, initials=e.initials, color=e.color_token, avatar_url=e.avatar_ref, active=e.active)
    return out


def _int_arg(name: str, default: int) -> int:
    raw = request.args.get(name)
    if raw is None or raw == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValidationError(f"{name} must be a whole number")


def _body() -> dict:
    data = request.get_json(silent=True)
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def register(app: Flask, container: Container) -> None:
    gateway = container.mutation_gateway

    def json_errors(view):
        @wraps(view)
        async def wrapper(*args, **kwargs):
            try:
                return await view(*args, **kwargs)
            except ValidationError as e:
                return jsonify({"success": False, "message": str(e)}), 400
            except NotFoundError as e:
                return jsonify({"success": False, "message": str(e)}), 404
            except StoreError as e:
                return jsonify({"success": False, "message": e.message, "phase": gateway.phase.value}), 502

        return wrapper

    @app.route("/api/time-tracking/ledger", methods=["GET"], endpoint="time_tracking_ledger")
    @json_errors
    async def ledger():
        today = now_local().date()
        year, month = require_month(_int_arg("year", today.year), _int_arg("month", today.month))

        snapshot = await gateway.current()
        projects_by_id = index_projects(snapshot.projects)

        employees = []
        for entry_ledger in ordered_ledgers(snapshot.ledger):
            item = _employee_json(entry_ledger)
            item["month_hours"] = month_total_hours(entry_ledger, year, month)
            item["cells"] = [
                {
                    "day": cell.day_number,
                    "date": cell.date.isoformat() if cell.date else None,
                    "hours": cell.total_hours,
                    "intensity": cell.intensity.value,
                }
                for cell in build_month_grid(snapshot.ledger, entry_ledger.key, year, month)
            ]
            item["entries"] = {
                day.isoformat(): [_entry_json(r, projects_by_id) for r in records]
                for day, records in sorted(entry_ledger.entries_by_date.items())
                if day.year == year and day.month == month
            }
            employees.append(item)

        return jsonify({"success": True, "year": year, "month": month, "phase": gateway.phase.value, "employees": employees})

    @app.route("/api/time-tracking/entries", methods=["POST"], endpoint="time_tracking_add_entry")
    @json_errors
    async def add_entry():
        data = _body()
        record = await gateway.add_entry(
            data.get("employee_id"),
            data.get("project_id"),
            data.get("date"),
            data.get("hours"),
        )
        projects_by_id = index_projects(gateway.snapshot.projects)
        return jsonify({"success": True, "message": "Hours registered", "entry": _entry_json(record, projects_by_id)}), 201

    @app.route("/api/time-tracking/entries/<entry_id>", methods=["PATCH"], endpoint="time_tracking_update_entry")
    @json_errors
    async def update_entry(entry_id: str):
        data = _body()
        record = await gateway.update_entry(coerce_id(entry_id), project_id=data.get("project_id"), hours=data.get("hours"))
        projects_by_id = index_projects(gateway.snapshot.projects)
        return jsonify({"success": True, "message": "Entry updated", "entry": _entry_json(record, projects_by_id)})

    @app.route("/api/time-tracking/entries/<entry_id>", methods=["DELETE"], endpoint="time_tracking_delete_entry")
    @json_errors
    async def delete_entry(entry_id: str):
        await gateway.delete_entry(coerce_id(entry_id))
        return jsonify({"success": True, "message": "Entry deleted"})

    @app.route("/api/time-tracking/entries/<entry_id>/adjust", methods=["POST"], endpoint="time_tracking_adjust_entry")
    @json_errors
    async def adjust_entry(entry_id: str):
        data = _body()
        entry = await gateway.find_entry(coerce_id(entry_id))
        record = await gateway.quick_adjust(entry, data.get("delta"))
        projects_by_id = index_projects(gateway.snapshot.projects)
        return jsonify({"success": True, "message": "Entry adjusted", "entry": _entry_json(record, projects_by_id)})

    @app.route("/api/time-tracking/projects/statistics", methods=["GET"], endpoint="time_tracking_project_statistics")
    @json_errors
    async def project_statistics():
        snapshot = await gateway.current()
        stats = build_project_statistics(snapshot.records, snapshot.employees, snapshot.projects)
        return jsonify({"success": True, "projects": [asdict(s) for s in stats]})

    @app.route("/api/time-tracking/employees/<employee_id>/has-entries", methods=["GET"], endpoint="time_tracking_employee_has_entries")
    @json_errors
    async def employee_has_entries(employee_id: str):
        has_entries = await gateway.employee_has_entries(coerce_id(employee_id))
        return jsonify({"success": True, "has_entries": has_entries})

    @app.route("/api/time-tracking/status", methods=["GET"], endpoint="time_tracking_status")
    async def status():
        snapshot = gateway.snapshot
        error = gateway.last_error
        return jsonify(
            {
                "success": True,
                "phase": gateway.phase.value,
                "loaded_at": snapshot.loaded_at.isoformat() if snapshot else None,
                "last_error": str(error) if error else None,
            }
        )
