"""Landing page resolution and page reachability."""

from __future__ import annotations

from typing import Optional

from .page import PageId
from .role import Role
from .user import User


def get_default_dashboard(user: Optional[User]) -> PageId:
    if user is None:
        return PageId.CLUBS_LANDING
    match user.role:
        case Role.ADMIN:
            return PageId.ADMIN_DASHBOARD
        case Role.FACULTY:
            return PageId.FACULTY_DASHBOARD
        case Role.OFFICE:
            return PageId.VENUE_BOOKING
        case Role.STUDENT | None:
            return PageId.CLUBS_LANDING


def can_access_dashboard(user: Optional[User], page: PageId | str) -> bool:
    """Advisory check used to gate navigation and hide unreachable links.

    Unknown page names are reachable; only the known sensitive pages are
    restricted.
    """
    page_id = PageId.parse(page)
    if page_id is None:
        return True

    role = user.role if user is not None else None
    match page_id:
        case PageId.ADMIN_DASHBOARD:
            return role is Role.ADMIN
        case PageId.FACULTY_DASHBOARD:
            return role in (Role.ADMIN, Role.FACULTY)
        case PageId.VENUE_BOOKING:
            return role in (Role.ADMIN, Role.OFFICE, Role.FACULTY)
        case PageId.CLUBS_LANDING | PageId.STUDENT_DASHBOARD | PageId.SCHEDULE:
            return True
        case (
            PageId.HOME
            | PageId.CLUB_CATEGORY
            | PageId.CLUB_DETAIL
            | PageId.VENUE
            | PageId.CLUB_LOGIN
            | PageId.STUDENT_REGISTRATION
            | PageId.SCHEDULE_UPDATE
            | PageId.LOGIN
            | PageId.SIGNUP
        ):
            return True


def reachable_pages(user: Optional[User]) -> list[PageId]:
    return [page for page in PageId if can_access_dashboard(user, page)]


__all__ = ["get_default_dashboard", "can_access_dashboard", "reachable_pages"]
