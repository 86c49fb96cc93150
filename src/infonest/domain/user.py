from __future__ import annotations

import datetime
from dataclasses import dataclass, field
from typing import Any, Dict, Optional

from .role import Role


@dataclass(frozen=True)
class User:
    id: str
    role: Optional[Role]
    name: str
    email: str
    club_id: Optional[str] = None
    department: Optional[str] = None

    @property
    def assigned_club(self) -> Optional[str]:
        """The club this user administers; an empty id means none."""
        return self.club_id or None

    @classmethod
    def from_payload(cls, payload: Dict[str, Any]) -> "User":
        """Build a User from a REST/mock API payload.

        Accepts both the mock API shape (``id``, ``name``, ``clubId``) and the
        backend shape (``userId``, ``firstName``/``lastName``).
        """
        user_id = payload.get("id") or payload.get("userId")
        if user_id is None:
            raise ValueError("user payload has no id")
        name = payload.get("name") or payload.get("fullName")
        if not name:
            parts = [payload.get("firstName"), payload.get("lastName")]
            name = " ".join(p for p in parts if p)
        return cls(
            id=str(user_id),
            role=Role.parse(payload.get("role")),
            name=name or "",
            email=str(payload.get("email") or ""),
            club_id=payload.get("clubId") or payload.get("club_id") or None,
            department=payload.get("department"),
        )

    def to_payload(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "role": self.role.value if self.role is not None else None,
            "name": self.name,
            "email": self.email,
            "clubId": self.assigned_club,
            "department": self.department,
        }


@dataclass
class Account:
    """Stored account: a User plus its credential hash."""

    id: Optional[str]
    email: str
    hashed_password: str
    name: str
    role: Role
    club_id: Optional[str] = None
    department: Optional[str] = None
    created_at: Optional[datetime.datetime] = field(default=None)

    def __post_init__(self):
        if self.created_at is None:
            self.created_at = datetime.datetime.now(datetime.timezone.utc)

    def to_user(self) -> User:
        return User(
            id=str(self.id),
            role=self.role,
            name=self.name,
            email=self.email,
            club_id=self.club_id or None,
            department=self.department,
        )
