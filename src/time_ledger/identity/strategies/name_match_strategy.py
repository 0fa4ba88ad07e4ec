from __future__ import annotations

from typing import Optional

from ..directory import EmployeeDirectory
from ..model import KnownIdentity, ResolvedIdentity
from .base import ResolutionContext, ResolutionStrategy


class NameMatchStrategy(ResolutionStrategy):
    """Descriptor name equal to a known display name, ignoring case."""

    def resolve(self, ctx: ResolutionContext, directory: EmployeeDirectory) -> Optional[ResolvedIdentity]:
        employee = directory.by_name(ctx.candidate_name)
        return KnownIdentity(employee) if employee else None
