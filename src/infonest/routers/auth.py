from typing import Optional

from fastapi import APIRouter, Depends

from ..deps import (
    get_bearer_token,
    get_current_user,
    get_token_service,
    get_user_service,
)
from ..domain.auth import SignupData
from ..domain.role import Role
from ..domain.user import User
from ..exceptions import AuthError, SignupValidationError
from ..logging_config import get_logger
from ..metrics import AUTH_ATTEMPTS
from ..schemas.auth import ApiEnvelope, LoginRequest, RegisterRequest, session_payload
from ..services.token_service import TokenService
from ..services.user_service import UserService

logger = get_logger(__name__)

router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post("/register", response_model=ApiEnvelope)
async def register(
    req: RegisterRequest,
    user_svc: UserService = Depends(get_user_service),
    token_svc: TokenService = Depends(get_token_service),
):
    data = SignupData(
        email=req.email,
        password=req.password,
        full_name=req.name,
        role=req.role,
        club_id=req.club_id,
        department=req.department,
    )
    try:
        user = await user_svc.create_user(data)
    except AuthError:
        if AUTH_ATTEMPTS is not None:
            AUTH_ATTEMPTS.labels(result="failure", method="signup").inc()
        raise
    if AUTH_ATTEMPTS is not None:
        AUTH_ATTEMPTS.labels(result="success", method="signup").inc()
    token = token_svc.issue_for(user)
    return ApiEnvelope(
        success=True,
        message="Registration successful",
        data=session_payload(user, token),
    )


@router.post("/login", response_model=ApiEnvelope)
async def login(
    req: LoginRequest,
    user_svc: UserService = Depends(get_user_service),
    token_svc: TokenService = Depends(get_token_service),
):
    logger.debug("login endpoint called", extra={"email": req.email})
    role: Optional[Role] = None
    if req.role:
        role = Role.parse(req.role)
        if role is None:
            raise SignupValidationError(f"Unknown role: {req.role}")
    try:
        user = await user_svc.authenticate(req.email, req.password, role)
    except AuthError:
        if AUTH_ATTEMPTS is not None:
            AUTH_ATTEMPTS.labels(result="failure", method="login").inc()
        raise
    if AUTH_ATTEMPTS is not None:
        AUTH_ATTEMPTS.labels(result="success", method="login").inc()
    token = token_svc.issue_for(user)
    return ApiEnvelope(success=True, message="Login successful", data=session_payload(user, token))


@router.post("/logout", response_model=ApiEnvelope)
async def logout(
    token: Optional[str] = Depends(get_bearer_token),
    token_svc: TokenService = Depends(get_token_service),
):
    if token:
        await token_svc.revoke(token)
    return ApiEnvelope(success=True, message="Logout successful")


@router.get("/me", response_model=ApiEnvelope)
async def me(user: User = Depends(get_current_user)):
    return ApiEnvelope(success=True, data=user.to_payload())
