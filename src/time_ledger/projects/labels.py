from __future__ import annotations

from typing import Mapping, Optional, Tuple

from ..core.constants import NO_PROJECT_NAME
from ..timelogs.model import TimeLogRecord
from .model import Project


def index_projects(projects) -> dict[str, Project]:
    return {str(p.id): p for p in projects}


def entry_project_label(
    record: TimeLogRecord,
    projects_by_id: Mapping[str, Project],
) -> Tuple[str, Optional[str]]:
    """Display name and color for a log entry.

    The snapshot written with the entry wins so renamed or deleted projects
    keep their history; the live project only fills gaps.
    """

    live = projects_by_id.get(str(record.project_ref)) if record.project_ref is not None else None

    name = record.project_name_snapshot or (live.name if live else None) or NO_PROJECT_NAME
    color = record.project_color_snapshot or (live.color_token if live else None)
    return name, color
