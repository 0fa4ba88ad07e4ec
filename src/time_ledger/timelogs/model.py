from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from ..core.types import EntityId


@dataclass(frozen=True)
class TimeLogRecord:
    """Domain entity: one logged unit of work (he_time_logs).

    project_name_snapshot / project_color_snapshot are written together with
    the entry so history survives project renames and deletions.
    legacy_descriptor is the pre-reference employee blob (JSON or free text).
    """

    id: EntityId
    point_in_time: Optional[str]
    hours: float
    created_at: Optional[str] = None
    project_ref: Optional[EntityId] = None
    project_name_snapshot: Optional[str] = None
    project_color_snapshot: Optional[str] = None
    employee_ref: Optional[EntityId] = None
    legacy_descriptor: Any = None


@dataclass(frozen=True)
class NewTimeLog:
    point_in_time: str
    project_ref: EntityId
    project_name_snapshot: str
    project_color_snapshot: Optional[str]
    hours: float
    employee_ref: EntityId


@dataclass(frozen=True)
class TimeLogChanges:
    project_ref: EntityId
    project_name_snapshot: str
    project_color_snapshot: Optional[str]
    hours: float
