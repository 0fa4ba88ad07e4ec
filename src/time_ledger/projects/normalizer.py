from __future__ import annotations

from dataclasses import replace
from typing import Iterable, Optional, Union

from ..core.constants import PROJECT_TYPE_ALIASES, PROJECT_TYPE_COLORS
from ..core.enums import ProjectType
from .model import Project


def canonical_type(token: Union[ProjectType, str, None]) -> ProjectType:
    """Collapse historical type tokens ('internal'/'Internt', 'customer'/'Kunde')."""

    if isinstance(token, ProjectType):
        return token
    if not isinstance(token, str):
        return ProjectType.CUSTOMER
    return PROJECT_TYPE_ALIASES.get(token.strip().lower(), ProjectType.CUSTOMER)


def canonical_color(project_type: ProjectType) -> str:
    return PROJECT_TYPE_COLORS[project_type]


def normalize_project(project: Project) -> Project:
    """Canonical copy of a project. The stored color is never trusted."""

    project_type = canonical_type(project.type_token)
    return replace(project, type_token=project_type, color_token=canonical_color(project_type))


def normalize_projects(projects: Iterable[Project]) -> list[Project]:
    return [normalize_project(p) for p in projects]


def is_internal(project: Optional[Project]) -> bool:
    return project is not None and canonical_type(project.type_token) is ProjectType.INTERNAL
