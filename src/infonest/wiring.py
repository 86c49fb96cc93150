from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse, Response

from .config import Settings
from .exceptions import AuthError, DuplicateAccountError, SignupValidationError
from .infrastructure.cache import InMemorySessionStore
from .infrastructure.repositories import InMemoryUserRepository
from .logging_config import get_logger
from .metrics import metrics_response
from .services.token_service import TokenService
from .services.user_service import UserService

logger = get_logger(__name__)


def _status_for(exc: AuthError) -> int:
    if isinstance(exc, DuplicateAccountError):
        return 409
    if isinstance(exc, SignupValidationError):
        return 400
    return 401


def create_app(
    settings: Settings | None = None,
    user_service: UserService | None = None,
    token_service: TokenService | None = None,
) -> FastAPI:
    """Create the REST API with in-memory accounts and token revocation.

    Tests pass their own services to share state with the code under test.
    """
    if settings is None:
        settings = Settings()

    app = FastAPI(title="InfoNest API")

    app.state.settings = settings
    app.state.user_service = user_service or UserService(
        InMemoryUserRepository(), min_password_length=settings.min_password_length
    )
    app.state.token_service = token_service or TokenService(
        settings.jwt_secret,
        settings.access_token_ttl_seconds,
        store=InMemorySessionStore(),
    )

    from .routers import auth, permissions

    app.include_router(auth.router)
    app.include_router(permissions.router)

    @app.get("/metrics")
    async def _metrics():
        data, content_type = metrics_response()
        return Response(content=data, media_type=content_type)

    @app.exception_handler(AuthError)
    async def _auth_error_handler(request: Request, exc: AuthError):
        status = _status_for(exc)
        logger.info(
            "auth_error_response",
            extra={"path": request.url.path, "status": status, "code": exc.code},
        )
        return JSONResponse(
            status_code=status,
            content={"success": False, "message": exc.message, "error": exc.code},
        )

    return app


__all__ = ["create_app"]
