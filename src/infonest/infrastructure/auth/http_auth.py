"""Authentication backend speaking to the REST API over HTTP."""

from typing import Any, Dict, Optional

import httpx

from ...domain.auth import SignupData
from ...domain.role import Role
from ...domain.user import User
from ...exceptions import AuthError, DuplicateAccountError, InvalidCredentialsError
from ...logging_config import get_logger
from ...ports.session_store import SessionStore

logger = get_logger(__name__)

NETWORK_ERROR = "Network error. Please check your connection."


class HttpAuthService:
    """AuthService backed by ``{base_url}/auth/*`` endpoints.

    Every response uses the ``{success, message, data, error}`` envelope; a
    successful register/login carries the user payload plus a ``token`` that
    is persisted in the session store and sent as a bearer header afterwards.
    """

    def __init__(
        self,
        store: SessionStore,
        base_url: str = "http://localhost:8080/api/v1",
        timeout: float = 10.0,
        client: Optional[httpx.AsyncClient] = None,
        token_key: str = "auth_token",
    ):
        self.store = store
        self.token_key = token_key
        self.client = client or httpx.AsyncClient(
            base_url=base_url,
            timeout=timeout,
            headers={"Content-Type": "application/json"},
        )

    async def aclose(self) -> None:
        await self.client.aclose()

    async def _auth_headers(self) -> Dict[str, str]:
        token = await self.store.get(self.token_key)
        if token:
            return {"Authorization": f"Bearer {token}"}
        return {}

    @staticmethod
    def _raise_for_envelope(response: httpx.Response, body: Dict[str, Any], fallback: str):
        message = body.get("message") or fallback
        code = body.get("error")
        if response.status_code == 409:
            raise DuplicateAccountError(message)
        if response.status_code == 401:
            raise InvalidCredentialsError(message, code=code)
        raise AuthError(message, code=code)

    async def _authenticate(self, path: str, payload: Dict[str, Any], fallback: str) -> User:
        try:
            response = await self.client.post(path, json=payload)
        except httpx.HTTPError as e:
            logger.warning("auth_request_failed", extra={"path": path, "error": str(e)})
            raise AuthError(NETWORK_ERROR, code="network_error")

        try:
            body = response.json()
        except ValueError:
            body = {}
        if not isinstance(body, dict):
            body = {}

        data = body.get("data")
        if response.is_error or not body.get("success") or not isinstance(data, dict):
            self._raise_for_envelope(response, body, fallback)

        token = data.get("token")
        if token:
            await self.store.set(self.token_key, token)
        try:
            return User.from_payload(data)
        except ValueError as e:
            raise AuthError(f"{fallback}: malformed user payload ({e})")

    async def signup(self, data: SignupData) -> User:
        role = Role.parse(data.role)
        payload = {
            "email": data.email,
            "password": data.password,
            "name": data.full_name,
            "role": role.value if role is not None else str(data.role),
            "clubId": data.club_id,
            "department": data.department,
        }
        return await self._authenticate("/auth/register", payload, "Signup failed")

    async def login(self, email: str, password: str, role: Optional[Role] = None) -> User:
        payload: Dict[str, Any] = {"email": email, "password": password}
        if role is not None:
            payload["role"] = role.value
        return await self._authenticate("/auth/login", payload, "Login failed")

    async def logout(self) -> None:
        try:
            headers = await self._auth_headers()
            if headers:
                response = await self.client.post("/auth/logout", headers=headers)
                if response.is_error:
                    logger.warning(
                        "remote_logout_rejected", extra={"status": response.status_code}
                    )
        except Exception as e:
            logger.warning("remote_logout_failed", extra={"error": str(e)})
        finally:
            try:
                await self.store.delete(self.token_key)
            except Exception as e:
                logger.warning("session_token_clear_failed", extra={"error": str(e)})

    async def get_current_user(self) -> Optional[User]:
        try:
            headers = await self._auth_headers()
            if not headers:
                return None
            response = await self.client.get("/auth/me", headers=headers)
            if response.status_code == 401:
                # stale token; forget it so the next start is anonymous
                await self.store.delete(self.token_key)
                return None
            body = response.json()
            if response.is_error or not body.get("success") or not body.get("data"):
                return None
            return User.from_payload(body["data"])
        except Exception as e:
            logger.debug("current_user_lookup_failed", extra={"error": str(e)})
            return None
