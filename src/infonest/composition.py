"""Composition root for the client shell.

Picks the authentication backend from settings: the in-process mock API when
``use_mock_api`` is on, otherwise the REST API at ``api_base_url``.
"""

from typing import Any, Optional

import httpx

from .config import Settings
from .infrastructure.auth.http_auth import HttpAuthService
from .infrastructure.auth.local_auth import LocalAuthService
from .infrastructure.cache import InMemorySessionStore
from .infrastructure.repositories import InMemoryUserRepository
from .logging_config import get_logger
from .ports.session_store import SessionStore
from .services.app_shell import AppShell
from .services.navigator import Navigator
from .services.session_controller import SessionController
from .services.token_service import TokenService
from .services.user_service import UserService

logger = get_logger(__name__)


def build_auth_service(
    settings: Settings,
    store: SessionStore,
    http_client: Optional[httpx.AsyncClient] = None,
) -> Any:
    if settings.use_mock_api:
        user_service = UserService(
            InMemoryUserRepository(), min_password_length=settings.min_password_length
        )
        token_service = TokenService(
            settings.jwt_secret, settings.access_token_ttl_seconds, store=store
        )
        return LocalAuthService(
            user_service, token_service, store, token_key=settings.session_token_key
        )
    return HttpAuthService(
        store,
        base_url=settings.api_base_url,
        timeout=settings.api_timeout_seconds,
        client=http_client,
        token_key=settings.session_token_key,
    )


def build_app_shell(
    settings: Settings | None = None,
    store: SessionStore | None = None,
    http_client: Optional[httpx.AsyncClient] = None,
) -> AppShell:
    if settings is None:
        settings = Settings()
    if store is None:
        store = InMemorySessionStore()
    auth = build_auth_service(settings, store, http_client)
    logger.info(
        "app_shell_built",
        extra={"backend": type(auth).__name__, "api_base_url": settings.api_base_url},
    )
    return AppShell(SessionController(auth), Navigator())


__all__ = ["build_auth_service", "build_app_shell"]
