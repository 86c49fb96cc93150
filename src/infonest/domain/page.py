from __future__ import annotations

from enum import Enum
from typing import Any, Mapping, Optional


class PageId(str, Enum):
    HOME = "home"
    CLUBS_LANDING = "clubs-landing"
    CLUB_CATEGORY = "club-category"
    CLUB_DETAIL = "club-detail"
    SCHEDULE = "schedule"
    VENUE = "venue"
    CLUB_LOGIN = "club-login"
    STUDENT_REGISTRATION = "student-registration"
    STUDENT_DASHBOARD = "student-dashboard"
    FACULTY_DASHBOARD = "faculty-dashboard"
    ADMIN_DASHBOARD = "admin-dashboard"
    SCHEDULE_UPDATE = "schedule-update"
    VENUE_BOOKING = "venue-booking"
    LOGIN = "login"
    SIGNUP = "signup"

    @classmethod
    def parse(cls, value: object) -> Optional["PageId"]:
        if isinstance(value, PageId):
            return value
        try:
            return cls(value)
        except ValueError:
            return None

    @property
    def required_params(self) -> tuple[str, ...]:
        return REQUIRED_PARAMS.get(self, ())

    def accepts(self, params: Mapping[str, Any] | None) -> bool:
        """True when every parameter this page needs is present and non-empty."""
        for name in self.required_params:
            if not params or params.get(name) in (None, ""):
                return False
        return True


REQUIRED_PARAMS: dict[PageId, tuple[str, ...]] = {
    PageId.CLUB_CATEGORY: ("category",),
    PageId.CLUB_DETAIL: ("clubId",),
}


__all__ = ["PageId", "REQUIRED_PARAMS"]
