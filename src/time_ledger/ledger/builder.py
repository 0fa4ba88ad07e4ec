from __future__ import annotations

import logging
from typing import Iterable, Optional

from ..common.datetime_utils import date_key
from ..employees.model import EmployeeIdentity
from ..identity.model import AdHocIdentity, KnownIdentity
from ..identity.resolver import IdentityResolver
from ..projects.model import Project
from ..timelogs.model import TimeLogRecord
from .model import EmployeeLedger, LedgerMap

logger = logging.getLogger(__name__)


def build_ledger(
    records: Iterable[TimeLogRecord],
    employees: Iterable[EmployeeIdentity],
    projects: Optional[Iterable[Project]] = None,
) -> LedgerMap:
    """Aggregate log records into one ledger per identity.

    Every active employee gets a ledger even without records. Inactive
    employees and ad-hoc names only appear once a record resolves to them.
    Records with an unusable date still create the identity's ledger but are
    left out of the day buckets. Project labels are resolved at read time
    from the record snapshots, so projects do not affect aggregation.
    """

    employees = list(employees)
    ledgers: LedgerMap = {}
    for e in employees:
        if e.active:
            identity = KnownIdentity(e)
            ledgers.setdefault(identity.key, EmployeeLedger(key=identity.key, identity=identity))

    resolver = IdentityResolver(employees)
    skipped = 0
    for r in records:
        identity = resolver.resolve(r)
        ledger = ledgers.get(identity.key)
        if ledger is None:
            ledger = EmployeeLedger(key=identity.key, identity=identity)
            ledgers[identity.key] = ledger

        day = date_key(r.point_in_time)
        if day is None:
            skipped += 1
            continue
        ledger.add(day, r)

    if skipped:
        logger.debug("Left %d time log(s) with an unusable date out of the ledger", skipped)
    return ledgers


def ordered_ledgers(ledger_map: LedgerMap) -> list[EmployeeLedger]:
    """Ledgers by total hours, highest first; an empty 'Unknown' bucket is hidden."""

    out = [
        ledger
        for ledger in ledger_map.values()
        if not (isinstance(ledger.identity, AdHocIdentity) and ledger.identity.is_unknown and not ledger.total_hours)
    ]
    out.sort(key=lambda ledger: ledger.total_hours, reverse=True)
    return out
