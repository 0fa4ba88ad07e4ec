from __future__ import annotations

from enum import Enum


class ProjectType(str, Enum):
    """Canonical project type stored in he_time_projects.type."""

    INTERNAL = "internal"
    CUSTOMER = "customer"


class Intensity(str, Enum):
    """How full a calendar day is."""

    EMPTY = "empty"
    PARTIAL = "partial"
    FULL = "full"


class IdentityKind(str, Enum):
    KNOWN = "known"
    ADHOC = "adhoc"


class LedgerPhase(str, Enum):
    """Lifecycle of the ledger held by the mutation gateway."""

    EMPTY = "EMPTY"
    PENDING = "PENDING"
    RELOADING = "RELOADING"
    FRESH = "FRESH"
    STALE = "STALE"
