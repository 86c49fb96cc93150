"""Authentication domain models and helpers."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any, Dict, Optional

from .role import Role


@dataclass(slots=True)
class Credentials:
    """What a sign-in form submits."""

    email: str
    password: str
    role: Optional[Role] = None


@dataclass(slots=True)
class SignupData:
    email: str
    password: str
    full_name: str
    role: Role | str = Role.STUDENT
    club_id: Optional[str] = None
    department: Optional[str] = None


@dataclass(slots=True)
class TokenClaims:
    """Structured representation of JWT claims."""

    subject: str
    role: Optional[Role] = None
    issued_at: Optional[datetime] = None
    expires_at: Optional[datetime] = None
    extra: Dict[str, Any] = field(default_factory=dict)

    @staticmethod
    def _coerce_datetime(value: Any) -> Optional[datetime]:
        if value is None:
            return None
        if isinstance(value, datetime):
            return value if value.tzinfo else value.replace(tzinfo=timezone.utc)
        try:
            return datetime.fromtimestamp(float(value), tz=timezone.utc)
        except (TypeError, ValueError, OverflowError):
            try:
                return datetime.fromisoformat(str(value))
            except ValueError:
                return None

    def to_payload(self) -> Dict[str, Any]:
        payload: Dict[str, Any] = {"sub": self.subject}
        if self.role is not None:
            payload["role"] = self.role.value
        payload.update(self.extra)
        return payload

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "TokenClaims":
        data = dict(payload)
        subject = str(data.pop("sub"))
        role = Role.parse(data.pop("role", None))
        issued_at = cls._coerce_datetime(data.pop("iat", None))
        expires_at = cls._coerce_datetime(data.pop("exp", None))
        return cls(
            subject=subject,
            role=role,
            issued_at=issued_at,
            expires_at=expires_at,
            extra=data,
        )


__all__ = ["Credentials", "SignupData", "TokenClaims"]
