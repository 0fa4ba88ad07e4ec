from __future__ import annotations

from typing import Union

EntityId = Union[int, str]
