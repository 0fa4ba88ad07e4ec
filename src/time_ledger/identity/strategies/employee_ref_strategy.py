from __future__ import annotations

from typing import Optional

from ..directory import EmployeeDirectory
from ..model import KnownIdentity, ResolvedIdentity
from .base import ResolutionContext, ResolutionStrategy


class EmployeeRefStrategy(ResolutionStrategy):
    """Stable reference (user_id) to a known employee, active or not."""

    def resolve(self, ctx: ResolutionContext, directory: EmployeeDirectory) -> Optional[ResolvedIdentity]:
        employee = directory.by_id(ctx.record.employee_ref)
        return KnownIdentity(employee) if employee else None
