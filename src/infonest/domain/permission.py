"""Permission predicates for the campus roles.

Every predicate is pure: it inspects the user (or None for an anonymous
visitor) and an optional club id, and answers with a bool. A denial is just
``False``; callers hide the control or refuse the navigation.

Admin can do admin, faculty and student work. Faculty can do faculty and
student work for the one club assigned to them. Office sits at faculty rank
but manages venues and schedules instead of clubs. Feature lists are layered
by rank, so office lists the faculty tier too; the club predicates still refuse
it.
"""

from __future__ import annotations

from typing import Optional

from .capability import (
    ADMIN_FEATURES,
    FACULTY_FEATURES,
    OFFICE_FEATURES,
    STUDENT_FEATURES,
    Capability,
)
from .role import Role, rank
from .user import User


def has_minimum_role(user: Optional[User], required_role: Optional[Role]) -> bool:
    if user is None or user.role is None:
        return False
    return rank(user.role) >= rank(required_role)


def _administers_club(user: Optional[User], club_id: Optional[str]) -> bool:
    if user is None:
        return False
    if user.role is Role.ADMIN:
        return True
    if user.role is Role.FACULTY and club_id:
        return user.assigned_club == club_id
    return False


def can_manage_club(user: Optional[User], club_id: str) -> bool:
    return _administers_club(user, club_id)


def can_create_events(user: Optional[User], club_id: Optional[str] = None) -> bool:
    return _administers_club(user, club_id)


def can_manage_events(user: Optional[User], club_id: Optional[str] = None) -> bool:
    return can_create_events(user, club_id)


def can_view_applications(user: Optional[User], club_id: Optional[str] = None) -> bool:
    return _administers_club(user, club_id)


def can_manage_venues(user: Optional[User]) -> bool:
    if user is None:
        return False
    return user.role in (Role.ADMIN, Role.OFFICE)


def can_update_schedule(user: Optional[User]) -> bool:
    if user is None:
        return False
    return user.role in (Role.ADMIN, Role.FACULTY, Role.OFFICE)


# floor capabilities: any signed-in user
def can_view_clubs(user: Optional[User]) -> bool:
    return user is not None


def can_register_for_events(user: Optional[User]) -> bool:
    return user is not None


def can_view_schedule(user: Optional[User]) -> bool:
    return user is not None


def get_available_features(user: Optional[User]) -> frozenset[Capability]:
    if user is None:
        return frozenset()

    features: set[Capability] = set()
    if has_minimum_role(user, Role.STUDENT):
        features |= STUDENT_FEATURES
    # layered by rank, office included
    if has_minimum_role(user, Role.FACULTY):
        features |= FACULTY_FEATURES
    if user.role is Role.ADMIN:
        features |= ADMIN_FEATURES
    if user.role is Role.OFFICE:
        features |= OFFICE_FEATURES
    return frozenset(features)


_DESCRIPTIONS: dict[Role, str] = {
    Role.ADMIN: "Full system access - Can manage all clubs, events, users, and settings",
    Role.FACULTY: (
        "Club management access - Can manage assigned club events and review applications"
    ),
    Role.STUDENT: "Standard access - Can view and register for events",
    Role.OFFICE: "Administrative access - Can manage venues and schedules",
}

NO_PERMISSIONS = "No permissions"


def get_permission_description(role: Role | str | None) -> str:
    parsed = Role.parse(role)
    if parsed is None:
        return NO_PERMISSIONS
    return _DESCRIPTIONS[parsed]


__all__ = [
    "has_minimum_role",
    "can_manage_club",
    "can_create_events",
    "can_manage_events",
    "can_view_applications",
    "can_manage_venues",
    "can_update_schedule",
    "can_view_clubs",
    "can_register_for_events",
    "can_view_schedule",
    "get_available_features",
    "get_permission_description",
    "NO_PERMISSIONS",
]
