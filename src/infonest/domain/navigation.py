from __future__ import annotations

from dataclasses import dataclass
from types import MappingProxyType
from typing import Any, Mapping, Optional

from .page import PageId


@dataclass(frozen=True)
class NavigationState:
    page: PageId
    params: Optional[Mapping[str, Any]] = None

    def __post_init__(self):
        if self.params is not None:
            # snapshot so later caller mutations don't leak into the state
            object.__setattr__(self, "params", MappingProxyType(dict(self.params)))
