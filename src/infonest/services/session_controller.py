"""Client session lifecycle: restore, sign in, sign up, sign out.

The controller owns the single active-user slot. Bootstrap, login and signup
are serialised through one lock. Logout never waits for that lock: it clears
the slot at once and bumps the session epoch, and any operation that started
under an older epoch throws its result away. A logout therefore always wins
over an in-flight sign-in.
"""

import asyncio
from typing import Awaitable, Callable, Optional

from ..domain.auth import Credentials, SignupData
from ..domain.user import User
from ..exceptions import AuthError, SessionRestoreFailure
from ..logging_config import get_logger
from ..metrics import ACTIVE_SESSIONS, AUTH_ATTEMPTS
from ..ports.auth import AuthService

logger = get_logger(__name__)

LOGIN_CANCELLED = "Sign-in was cancelled by a logout"


class SessionController:
    def __init__(self, auth: AuthService):
        self._auth = auth
        self._user: Optional[User] = None
        self._lock = asyncio.Lock()
        self._epoch = 0

    @property
    def auth(self) -> AuthService:
        return self._auth

    @property
    def epoch(self) -> int:
        """Bumped by every logout."""
        return self._epoch

    @property
    def current_user(self) -> Optional[User]:
        return self._user

    @property
    def is_authenticated(self) -> bool:
        return self._user is not None

    def _set_user(self, user: Optional[User]) -> None:
        self._user = user
        if ACTIVE_SESSIONS is not None:
            ACTIVE_SESSIONS.set(1 if user is not None else 0)

    async def _restore(self) -> Optional[User]:
        try:
            return await self._auth.get_current_user()
        except Exception as e:
            raise SessionRestoreFailure(str(e)) from e

    async def bootstrap(self) -> Optional[User]:
        """Restore a persisted session. Any failure means "no session"."""
        async with self._lock:
            epoch = self._epoch
            try:
                user = await self._restore()
            except SessionRestoreFailure as e:
                logger.warning("session_restore_failed", extra={"error": str(e)})
                user = None

            if epoch != self._epoch:
                logger.info("session_restore_discarded", extra={"reason": "logout"})
                return None

            self._set_user(user)
            if AUTH_ATTEMPTS is not None:
                result = "success" if user is not None else "failure"
                AUTH_ATTEMPTS.labels(result=result, method="restore").inc()
            logger.debug(
                "session_bootstrapped",
                extra={"user_id": getattr(user, "id", None), "restored": user is not None},
            )
            return user

    async def _authenticate(self, method: str, call: Callable[[], Awaitable[User]]) -> User:
        async with self._lock:
            epoch = self._epoch
            try:
                user = await call()
            except AuthError as e:
                if AUTH_ATTEMPTS is not None:
                    AUTH_ATTEMPTS.labels(result="failure", method=method).inc()
                logger.info(f"{method}_failed", extra={"code": e.code})
                raise

            if epoch != self._epoch:
                # the account is signed in remotely; undo that too
                await self._remote_logout()
                raise AuthError(LOGIN_CANCELLED, code="login_cancelled")

            self._set_user(user)
            if AUTH_ATTEMPTS is not None:
                AUTH_ATTEMPTS.labels(result="success", method=method).inc()
            logger.info(
                f"{method}_succeeded",
                extra={"user_id": user.id, "role": getattr(user.role, "value", None)},
            )
            return user

    async def login(self, credentials: Credentials) -> User:
        return await self._authenticate(
            "login",
            lambda: self._auth.login(credentials.email, credentials.password, credentials.role),
        )

    async def signup(self, data: SignupData) -> User:
        return await self._authenticate("signup", lambda: self._auth.signup(data))

    async def _remote_logout(self) -> None:
        try:
            await self._auth.logout()
        except Exception as e:
            logger.warning("logout_remote_failed", extra={"error": str(e)})

    async def logout(self) -> None:
        """Clear the local session, then sign out remotely on a best-effort basis."""
        self._epoch += 1
        user = self._user
        self._set_user(None)
        await self._remote_logout()
        logger.info("logout_completed", extra={"user_id": getattr(user, "id", None)})
