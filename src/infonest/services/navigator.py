from typing import Any, Mapping, Optional

from ..domain.navigation import NavigationState
from ..domain.page import PageId


class Navigator:
    """Holds the current page and its parameters.

    ``navigate`` does no gating of its own; the AppShell checks reachability
    before calling it.
    """

    def __init__(self, initial_page: PageId = PageId.HOME):
        self._state = NavigationState(initial_page)

    @property
    def state(self) -> NavigationState:
        return self._state

    @property
    def current_page(self) -> PageId:
        return self._state.page

    @property
    def params(self) -> Optional[Mapping[str, Any]]:
        return self._state.params

    def navigate(self, page: PageId, params: Optional[Mapping[str, Any]] = None) -> NavigationState:
        self._state = NavigationState(page, params or None)
        return self._state
