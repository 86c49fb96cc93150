"""Role hierarchy.

Rank is a coarse seniority gate only. Faculty and office share a rank but hold
disjoint capabilities, so role-specific rules live in ``permission``.
"""

from __future__ import annotations

from enum import Enum
from typing import Optional


class Role(str, Enum):
    STUDENT = "student"
    FACULTY = "faculty"
    ADMIN = "admin"
    OFFICE = "office"

    @classmethod
    def parse(cls, value: object) -> Optional["Role"]:
        """Return the Role named by ``value`` (case-insensitive) or None."""
        if isinstance(value, Role):
            return value
        if not isinstance(value, str):
            return None
        try:
            return cls(value.strip().lower())
        except ValueError:
            return None


ROLE_RANK: dict[Role, int] = {
    Role.ADMIN: 3,
    Role.FACULTY: 2,
    Role.OFFICE: 2,
    Role.STUDENT: 1,
}


def rank(role: Role | None) -> int:
    if role is None:
        return 0
    return ROLE_RANK[role]


__all__ = ["Role", "ROLE_RANK", "rank"]
