from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Union

from ..core.enums import ProjectType
from ..core.types import EntityId


@dataclass(frozen=True)
class Project:
    """Domain entity: a project time can be logged against.

    type_token holds whatever the store returned until the project has been
    through normalize_project, after which it is a ProjectType.
    """

    id: EntityId
    name: str
    color_token: Optional[str] = None
    type_token: Union[ProjectType, str, None] = None
    hidden: bool = False
    expected_turnover: float = 0.0
    expected_costs: float = 0.0
