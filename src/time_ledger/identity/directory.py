from __future__ import annotations

from typing import Iterable, Optional

from ..employees.model import EmployeeIdentity
from .model import normalize_name


class EmployeeDirectory:
    """Lookup of known employees by id and by display name.

    When two employees share a name the first one given wins.
    """

    def __init__(self, employees: Iterable[EmployeeIdentity]):
        self._by_id: dict[str, EmployeeIdentity] = {}
        self._by_name: dict[str, EmployeeIdentity] = {}
        for e in employees:
            self._by_id.setdefault(str(e.id), e)
            name = normalize_name(e.display_name)
            if name:
                self._by_name.setdefault(name, e)

    def by_id(self, ref) -> Optional[EmployeeIdentity]:
        if ref is None or isinstance(ref, bool):
            return None
        return self._by_id.get(str(ref).strip())

    def by_name(self, name: Optional[str]) -> Optional[EmployeeIdentity]:
        if not name:
            return None
        return self._by_name.get(normalize_name(name))
