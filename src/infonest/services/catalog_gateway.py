"""Permission-checked front for the catalog backend.

Views call the gateway instead of the CatalogService directly. Calls the
signed-in user may not make come back as a ``success=False`` envelope with
``error="FORBIDDEN"``; nothing is raised and the backend is not contacted.
"""

from typing import Any, Callable, Dict, Optional

from ..domain.dashboard import can_access_dashboard
from ..domain.page import PageId
from ..domain.permission import (
    can_create_events,
    can_manage_club,
    can_manage_events,
    can_register_for_events,
    can_update_schedule,
    can_view_applications,
)
from ..domain.user import User
from ..logging_config import get_logger
from ..metrics import record_permission_check
from ..ports.catalog import ApiResponse, CatalogService

logger = get_logger(__name__)

FORBIDDEN = "FORBIDDEN"


class CatalogGateway:
    def __init__(self, catalog: CatalogService, current_user: Callable[[], Optional[User]]):
        self.catalog = catalog
        self._current_user = current_user

    def _check(self, permission: str, allowed: bool) -> Optional[ApiResponse]:
        record_permission_check(permission, allowed)
        if allowed:
            return None
        user = self._current_user()
        logger.info(
            "catalog_call_denied",
            extra={"permission": permission, "user_id": getattr(user, "id", None)},
        )
        return ApiResponse(
            success=False,
            message=f"You do not have permission to {permission.replace('-', ' ')}",
            error=FORBIDDEN,
        )

    # open reads
    async def get_all_clubs(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.catalog.get_all_clubs(params)

    async def get_club_by_id(self, club_id: str) -> ApiResponse:
        return await self.catalog.get_club_by_id(club_id)

    async def get_all_events(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.catalog.get_all_events(params)

    async def get_schedule(self, schedule_type: str, query: str) -> ApiResponse:
        return await self.catalog.get_schedule(schedule_type, query)

    async def get_venues(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse:
        return await self.catalog.get_venues(params)

    # club-scoped writes
    async def update_club(self, club_id: str, data: Dict[str, Any]) -> ApiResponse:
        denied = self._check("manage-club", can_manage_club(self._current_user(), club_id))
        return denied or await self.catalog.update_club(club_id, data)

    async def create_event(self, club_id: str, data: Dict[str, Any]) -> ApiResponse:
        denied = self._check("create-events", can_create_events(self._current_user(), club_id))
        return denied or await self.catalog.create_event({**data, "clubId": club_id})

    async def update_event(self, club_id: str, event_id: str, data: Dict[str, Any]) -> ApiResponse:
        denied = self._check("manage-events", can_manage_events(self._current_user(), club_id))
        return denied or await self.catalog.update_event(event_id, data)

    async def delete_event(self, club_id: str, event_id: str) -> ApiResponse:
        denied = self._check("manage-events", can_manage_events(self._current_user(), club_id))
        return denied or await self.catalog.delete_event(event_id)

    async def get_event_registrations(
        self, club_id: str, event_id: str, params: Optional[Dict[str, Any]] = None
    ) -> ApiResponse:
        denied = self._check(
            "view-applications", can_view_applications(self._current_user(), club_id)
        )
        return denied or await self.catalog.get_event_registrations(event_id, params)

    async def update_registration_status(
        self, club_id: str, event_id: str, registration_id: str, status: str
    ) -> ApiResponse:
        denied = self._check(
            "view-applications", can_view_applications(self._current_user(), club_id)
        )
        return denied or await self.catalog.update_registration_status(
            event_id, registration_id, status
        )

    # signed-in actions
    async def register_for_event(self, event_id: str) -> ApiResponse:
        denied = self._check(
            "register-events", can_register_for_events(self._current_user())
        )
        return denied or await self.catalog.register_for_event(event_id)

    async def update_schedule(self, data: Dict[str, Any]) -> ApiResponse:
        denied = self._check("update-schedule", can_update_schedule(self._current_user()))
        return denied or await self.catalog.update_schedule(data)

    async def book_venue(self, data: Dict[str, Any]) -> ApiResponse:
        allowed = can_access_dashboard(self._current_user(), PageId.VENUE_BOOKING)
        denied = self._check("book-venue", allowed)
        return denied or await self.catalog.book_venue(data)
