from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, EmailStr, Field

from ..domain.user import User


class ApiEnvelope(BaseModel):
    success: bool
    message: Optional[str] = None
    data: Optional[Any] = None
    error: Optional[str] = None


class RegisterRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    email: EmailStr
    password: str
    name: str
    role: str = "student"
    club_id: Optional[str] = Field(default=None, alias="clubId")
    department: Optional[str] = None


class LoginRequest(BaseModel):
    email: EmailStr
    password: str
    role: Optional[str] = None


def session_payload(user: User, token: str) -> dict[str, Any]:
    """User payload plus the bearer token, as returned by register/login."""
    payload = user.to_payload()
    payload["token"] = token
    return payload
