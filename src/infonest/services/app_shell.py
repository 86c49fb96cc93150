"""Application root tying the session to page navigation.

The shell owns one SessionController and one Navigator. Whenever the active
user changes it re-resolves the landing page: after a restored session, a
login or a signup the user lands on their default dashboard, and after a
logout the shell returns to the home page.
"""

from dataclasses import dataclass
from typing import Any, Mapping, Optional

from ..domain.auth import Credentials, SignupData
from ..domain.capability import Capability
from ..domain.dashboard import can_access_dashboard, get_default_dashboard, reachable_pages
from ..domain.navigation import NavigationState
from ..domain.page import PageId
from ..domain.permission import get_available_features
from ..domain.user import User
from ..logging_config import get_logger
from ..metrics import record_permission_check
from .navigator import Navigator
from .session_controller import SessionController

logger = get_logger(__name__)


@dataclass(frozen=True)
class RenderContext:
    """What the page renderer needs to draw the current screen."""

    page: PageId
    params: Optional[Mapping[str, Any]]
    user: Optional[User]


class AppShell:
    def __init__(self, session: SessionController, navigator: Optional[Navigator] = None):
        self.session = session
        self.navigator = navigator or Navigator()

    @property
    def user(self) -> Optional[User]:
        return self.session.current_user

    def _land(self, user: Optional[User]) -> NavigationState:
        return self.navigator.navigate(get_default_dashboard(user))

    async def start(self) -> NavigationState:
        epoch = self.session.epoch
        user = await self.session.bootstrap()
        if epoch != self.session.epoch:
            # a logout landed mid-restore and already reset the page
            return self.navigator.state
        return self._land(user)

    async def login(self, credentials: Credentials) -> User:
        user = await self.session.login(credentials)
        self._land(user)
        return user

    async def signup(self, data: SignupData) -> User:
        user = await self.session.signup(data)
        self._land(user)
        return user

    async def logout(self) -> NavigationState:
        await self.session.logout()
        return self.navigator.navigate(PageId.HOME)

    def request_navigation(
        self, page: PageId | str, params: Optional[Mapping[str, Any]] = None
    ) -> bool:
        """Move to ``page`` if it exists, has its params and is reachable.

        Returns False and leaves the current page untouched otherwise.
        """
        page_id = PageId.parse(page)
        if page_id is None:
            logger.info("navigation_unknown_page", extra={"page": str(page)})
            return False
        if not page_id.accepts(params):
            logger.info(
                "navigation_missing_params",
                extra={"page": page_id.value, "required": list(page_id.required_params)},
            )
            return False

        allowed = can_access_dashboard(self.user, page_id)
        record_permission_check(f"page:{page_id.value}", allowed)
        if not allowed:
            logger.info(
                "navigation_denied",
                extra={"page": page_id.value, "user_id": getattr(self.user, "id", None)},
            )
            return False

        self.navigator.navigate(page_id, params)
        return True

    def available_features(self) -> frozenset[Capability]:
        return get_available_features(self.user)

    def reachable_pages(self) -> list[PageId]:
        return reachable_pages(self.user)

    def render_context(self) -> RenderContext:
        state = self.navigator.state
        return RenderContext(page=state.page, params=state.params, user=self.user)
