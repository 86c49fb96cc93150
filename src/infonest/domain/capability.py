from enum import Enum


class Capability(str, Enum):
    VIEW_CLUBS = "view-clubs"
    REGISTER_EVENTS = "register-events"
    VIEW_SCHEDULE = "view-schedule"
    VIEW_VENUES = "view-venues"
    MANAGE_EVENTS = "manage-events"
    REVIEW_APPLICATIONS = "review-applications"
    UPDATE_SCHEDULE = "update-schedule"
    MANAGE_ALL_CLUBS = "manage-all-clubs"
    MANAGE_USERS = "manage-users"
    SYSTEM_SETTINGS = "system-settings"
    MANAGE_VENUES = "manage-venues"


STUDENT_FEATURES = frozenset(
    {
        Capability.VIEW_CLUBS,
        Capability.REGISTER_EVENTS,
        Capability.VIEW_SCHEDULE,
        Capability.VIEW_VENUES,
    }
)

FACULTY_FEATURES = frozenset(
    {
        Capability.MANAGE_EVENTS,
        Capability.REVIEW_APPLICATIONS,
        Capability.UPDATE_SCHEDULE,
    }
)

ADMIN_FEATURES = frozenset(
    {
        Capability.MANAGE_ALL_CLUBS,
        Capability.MANAGE_USERS,
        Capability.SYSTEM_SETTINGS,
        Capability.MANAGE_VENUES,
    }
)

OFFICE_FEATURES = frozenset(
    {
        Capability.MANAGE_VENUES,
        Capability.UPDATE_SCHEDULE,
    }
)

__all__ = [
    "Capability",
    "STUDENT_FEATURES",
    "FACULTY_FEATURES",
    "ADMIN_FEATURES",
    "OFFICE_FEATURES",
]
