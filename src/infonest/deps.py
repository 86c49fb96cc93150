"""FastAPI dependency providers.

Services are built once by ``wiring.create_app`` and parked on ``app.state``;
these helpers hand them to route functions.
"""

from typing import Optional

from fastapi import Depends, Request
from jose import JWTError

from .domain.user import User
from .exceptions import InvalidCredentialsError
from .logging_config import get_logger
from .services.token_service import TokenService
from .services.user_service import UserService

logger = get_logger(__name__)


def get_user_service(request: Request) -> UserService:
    return request.app.state.user_service


def get_token_service(request: Request) -> TokenService:
    return request.app.state.token_service


def get_bearer_token(request: Request) -> Optional[str]:
    header = request.headers.get("Authorization") or ""
    scheme, _, token = header.partition(" ")
    if scheme.lower() != "bearer" or not token:
        return None
    return token.strip()


async def get_optional_user(
    token: Optional[str] = Depends(get_bearer_token),
    token_svc: TokenService = Depends(get_token_service),
    user_svc: UserService = Depends(get_user_service),
) -> Optional[User]:
    if not token:
        return None
    try:
        claims = await token_svc.verify_active_token(token)
    except JWTError as e:
        logger.debug("bearer_token_rejected", extra={"error": str(e)})
        return None
    return await user_svc.get_user(claims.subject)


async def get_current_user(user: Optional[User] = Depends(get_optional_user)) -> User:
    if user is None:
        raise InvalidCredentialsError("Not authenticated", code="UNAUTHORIZED")
    return user
