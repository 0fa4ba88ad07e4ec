from __future__ import annotations

from typing import Protocol, Sequence

from .model import Project


class ProjectRepository(Protocol):
    """Read-only access to projects; administration writes elsewhere."""

    async def list_all(self, *, include_hidden: bool = True) -> Sequence[Project]:
        raise NotImplementedError
