from __future__ import annotations

from typing import Protocol, Sequence

from .model import EmployeeIdentity


class EmployeeRepository(Protocol):
    """Read-only access to employees.

    Note: inactive employees are still needed to attribute their old logs.
    """

    async def list_all(self, *, active_only: bool = False) -> Sequence[EmployeeIdentity]:
        """Active employees first, then by name."""

        raise NotImplementedError
