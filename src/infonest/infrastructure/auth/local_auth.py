"""In-process authentication backend.

Plays the part of the mock API: accounts live in a repository in this
process, and the signed-in token is kept in a SessionStore so a later
``get_current_user`` can restore the session.
"""

from typing import Optional

from ...domain.auth import SignupData
from ...domain.role import Role
from ...domain.user import User
from ...logging_config import get_logger
from ...ports.session_store import SessionStore
from ...services.token_service import TokenService
from ...services.user_service import UserService

logger = get_logger(__name__)


class LocalAuthService:
    def __init__(
        self,
        user_service: UserService,
        token_service: TokenService,
        store: SessionStore,
        token_key: str = "auth_token",
    ):
        self.user_service = user_service
        self.token_service = token_service
        self.store = store
        self.token_key = token_key

    async def _start_session(self, user: User) -> User:
        token = self.token_service.issue_for(user)
        await self.store.set(
            self.token_key, token, ex=self.token_service.access_token_ttl_seconds
        )
        return user

    async def signup(self, data: SignupData) -> User:
        user = await self.user_service.create_user(data)
        return await self._start_session(user)

    async def login(self, email: str, password: str, role: Optional[Role] = None) -> User:
        user = await self.user_service.authenticate(email, password, role)
        return await self._start_session(user)

    async def logout(self) -> None:
        try:
            token = await self.store.get(self.token_key)
            await self.store.delete(self.token_key)
            if token:
                await self.token_service.revoke(token)
        except Exception as e:
            logger.warning("local_logout_failed", extra={"error": str(e)})

    async def get_current_user(self) -> Optional[User]:
        try:
            token = await self.store.get(self.token_key)
            if not token:
                return None
            claims = await self.token_service.verify_active_token(token)
            return await self.user_service.get_user(claims.subject)
        except Exception as e:
            logger.debug("current_user_lookup_failed", extra={"error": str(e)})
            return None
