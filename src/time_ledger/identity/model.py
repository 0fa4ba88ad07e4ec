from __future__ import annotations

from dataclasses import dataclass
from typing import Union

from ..core.constants import UNKNOWN_EMPLOYEE_NAME
from ..core.enums import IdentityKind
from ..core.types import EntityId
from ..employees.model import EmployeeIdentity


def normalize_name(name: str) -> str:
    """Case-folded name with whitespace collapsed; used for matching and keys."""

    return " ".join(name.split()).casefold()


@dataclass(frozen=True)
class LedgerKey:
    kind: IdentityKind
    value: str

    @classmethod
    def for_employee(cls, employee_id: EntityId) -> "LedgerKey":
        return cls(IdentityKind.KNOWN, str(employee_id))

    @classmethod
    def for_name(cls, name: str) -> "LedgerKey":
        return cls(IdentityKind.ADHOC, normalize_name(name))


@dataclass(frozen=True)
class KnownIdentity:
    """Record attributed to an employee from he_time_users."""

    employee: EmployeeIdentity

    @property
    def key(self) -> LedgerKey:
        return LedgerKey.for_employee(self.employee.id)

    @property
    def display_name(self) -> str:
        return self.employee.display_name


@dataclass(frozen=True)
class AdHocIdentity:
    """Synthesized identity for a name no known employee matches."""

    name: str

    @property
    def key(self) -> LedgerKey:
        return LedgerKey.for_name(self.name)

    @property
    def display_name(self) -> str:
        return self.name

    @property
    def is_unknown(self) -> bool:
        return self.name == UNKNOWN_EMPLOYEE_NAME


ResolvedIdentity = Union[KnownIdentity, AdHocIdentity]
