from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


@dataclass(frozen=True)
class ApiResponse:
    """The ``{success, data?, message?}`` envelope every catalog call returns."""

    success: bool
    data: Any = None
    message: Optional[str] = None
    error: Optional[str] = None


class CatalogService(Protocol):
    """Protocol for the clubs/events/venues/schedule backend."""

    async def get_all_clubs(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse: ...

    async def get_club_by_id(self, club_id: str) -> ApiResponse: ...

    async def update_club(self, club_id: str, data: Dict[str, Any]) -> ApiResponse: ...

    async def get_all_events(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse: ...

    async def create_event(self, data: Dict[str, Any]) -> ApiResponse: ...

    async def update_event(self, event_id: str, data: Dict[str, Any]) -> ApiResponse: ...

    async def delete_event(self, event_id: str) -> ApiResponse: ...

    async def register_for_event(self, event_id: str) -> ApiResponse: ...

    async def get_event_registrations(
        self, event_id: str, params: Optional[Dict[str, Any]] = None
    ) -> ApiResponse: ...

    async def update_registration_status(
        self, event_id: str, registration_id: str, status: str
    ) -> ApiResponse: ...

    async def get_schedule(self, schedule_type: str, query: str) -> ApiResponse: ...

    async def update_schedule(self, data: Dict[str, Any]) -> ApiResponse: ...

    async def get_venues(self, params: Optional[Dict[str, Any]] = None) -> ApiResponse: ...

    async def book_venue(self, data: Dict[str, Any]) -> ApiResponse: ...
