from __future__ import annotations

import logging
from typing import Iterable, Optional, Sequence

from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..employees.model import EmployeeIdentity
from ..timelogs.model import TimeLogRecord
from .directory import EmployeeDirectory
from .model import AdHocIdentity, ResolvedIdentity
from .strategies.adhoc_strategy import AdHocStrategy
from .strategies.base import ResolutionContext, ResolutionStrategy
from .strategies.embedded_ref_strategy import EmbeddedRefStrategy
from .strategies.employee_ref_strategy import EmployeeRefStrategy
from .strategies.name_match_strategy import NameMatchStrategy

logger = logging.getLogger(__name__)


def default_strategies() -> list[ResolutionStrategy]:
    return [
        EmployeeRefStrategy(),
        EmbeddedRefStrategy(),
        NameMatchStrategy(),
        AdHocStrategy(),
    ]


class IdentityResolver:
    """Pins every time log record to exactly one identity.

    Strategies run in order and the first non-None answer wins; the chain
    ends with AdHocStrategy so resolve() always returns.
    """

    def __init__(
        self,
        employees: Iterable[EmployeeIdentity],
        *,
        strategies: Optional[Sequence[ResolutionStrategy]] = None,
    ):
        self._directory = EmployeeDirectory(employees)
        self._strategies = list(strategies) if strategies is not None else default_strategies()

    def resolve(self, record: TimeLogRecord) -> ResolvedIdentity:
        ctx = ResolutionContext(record)
        for strategy in self._strategies:
            identity = strategy.resolve(ctx, self._directory)
            if identity is not None:
                break
        else:
            identity = AdHocIdentity(UNKNOWN_EMPLOYEE_NAME)

        if isinstance(identity, AdHocIdentity) and identity.is_unknown and record.legacy_descriptor is not None:
            logger.debug("Could not extract employee for time log %s from %r", record.id, record.legacy_descriptor)
        return identity


def resolve_identity(record: TimeLogRecord, employees: Iterable[EmployeeIdentity]) -> ResolvedIdentity:
    return IdentityResolver(employees).resolve(record)
