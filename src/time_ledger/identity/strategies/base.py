from __future__ import annotations

from abc import ABC, abstractmethod
from functools import cached_property
from typing import Optional

from ...timelogs.model import TimeLogRecord
from ..descriptor import Descriptor, candidate_name, parse_descriptor
from ..directory import EmployeeDirectory
from ..model import ResolvedIdentity


class ResolutionContext:
    """One record being resolved; the descriptor is parsed on first use."""

    def __init__(self, record: TimeLogRecord):
        self.record = record

    @cached_property
    def descriptor(self) -> Descriptor:
        return parse_descriptor(self.record.legacy_descriptor)

    @cached_property
    def candidate_name(self) -> Optional[str]:
        return candidate_name(self.descriptor)


class ResolutionStrategy(ABC):
    """Strategy Pattern: one way of pinning a log record to an identity.

    Returning None hands the record to the next strategy in the chain.
    """

    @abstractmethod
    def resolve(self, ctx: ResolutionContext, directory: EmployeeDirectory) -> Optional[ResolvedIdentity]:
        raise NotImplementedError
