from __future__ import annotations

from typing import Optional

from ...core.constants import UNKNOWN_EMPLOYEE_NAME
from ..directory import EmployeeDirectory
from ..model import AdHocIdentity, ResolvedIdentity
from .base import ResolutionContext, ResolutionStrategy


class AdHocStrategy(ResolutionStrategy):
    """Last link of the chain: always resolves."""

    def resolve(self, ctx: ResolutionContext, directory: EmployeeDirectory) -> Optional[ResolvedIdentity]:
        return AdHocIdentity(ctx.candidate_name or UNKNOWN_EMPLOYEE_NAME)
