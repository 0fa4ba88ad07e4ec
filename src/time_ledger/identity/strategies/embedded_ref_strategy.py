from __future__ import annotations

from typing import Optional

from ..descriptor import StructuredDescriptor, embedded_refs
from ..directory import EmployeeDirectory
from ..model import KnownIdentity, ResolvedIdentity
from .base import ResolutionContext, ResolutionStrategy


class EmbeddedRefStrategy(ResolutionStrategy):
    """Employee id carried inside a structured legacy descriptor."""

    def resolve(self, ctx: ResolutionContext, directory: EmployeeDirectory) -> Optional[ResolvedIdentity]:
        descriptor = ctx.descriptor
        if not isinstance(descriptor, StructuredDescriptor):
            return None

        for ref in embedded_refs(descriptor.data):
            employee = directory.by_id(ref)
            if employee:
                return KnownIdentity(employee)
        return None
