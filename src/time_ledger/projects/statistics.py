from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence

from ..core.types import EntityId
from ..employees.model import EmployeeIdentity
from ..timelogs.model import TimeLogRecord
from .model import Project
from .normalizer import canonical_color, canonical_type, is_internal


@dataclass(frozen=True)
class ProjectStatistics:
    """Read-model for the project statistics table (customer projects only)."""

    project_id: EntityId
    project_name: str
    project_color: str
    project_type: str
    registered_hours: float
    expected_turnover: float
    expected_costs: float
    internal_cost: float
    expected_result: float


def project_hours(
    records: Iterable[TimeLogRecord],
    project_id: Optional[EntityId],
    project_name: Optional[str],
) -> float:
    """Hours logged on a project, matched by id or by snapshot name (any case)."""

    if project_id is None and not project_name:
        return 0.0

    wanted_name = project_name.lower() if project_name else None
    total = 0.0
    for r in records:
        matches_id = r.project_ref is not None and project_id is not None and str(r.project_ref) == str(project_id)
        matches_name = (
            wanted_name is not None
            and r.project_name_snapshot is not None
            and r.project_name_snapshot.lower() == wanted_name
        )
        if matches_id or matches_name:
            total += r.hours
    return total


def build_project_statistics(
    records: Sequence[TimeLogRecord],
    employees: Iterable[EmployeeIdentity],
    projects: Iterable[Project],
) -> list[ProjectStatistics]:
    rates = {str(e.id): e.hourly_rate for e in employees if e.hourly_rate is not None}

    internal_cost: dict[str, float] = {}
    for r in records:
        if r.project_ref is None or r.employee_ref is None or not r.hours:
            continue
        rate = rates.get(str(r.employee_ref), 0.0)
        key = str(r.project_ref)
        internal_cost[key] = internal_cost.get(key, 0.0) + r.hours * rate

    out: list[ProjectStatistics] = []
    for p in projects:
        if p.hidden or is_internal(p):
            continue
        project_type = canonical_type(p.type_token)
        cost = internal_cost.get(str(p.id), 0.0)
        out.append(
            ProjectStatistics(
                project_id=p.id,
                project_name=p.name,
                project_color=canonical_color(project_type),
                project_type=project_type.value,
                registered_hours=project_hours(records, p.id, p.name),
                expected_turnover=p.expected_turnover,
                expected_costs=p.expected_costs,
                internal_cost=cost,
                expected_result=p.expected_turnover - p.expected_costs - cost,
            )
        )

    out.sort(key=lambda s: s.project_name.lower())
    return out
