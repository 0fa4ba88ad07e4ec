from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.types import EntityId


@dataclass(frozen=True)
class EmployeeIdentity:
    """Domain entity: a known employee (he_time_users).

    Owned by employee administration; this package only reads it.
    """

    id: EntityId
    display_name: str
    initials: str = ""
    color_token: Optional[str] = None
    avatar_ref: Optional[str] = None
    active: bool = True
    hourly_rate: Optional[float] = None
