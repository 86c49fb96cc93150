from unittest.mock import AsyncMock

import pytest

from infonest.ports.catalog import ApiResponse
from infonest.services.catalog_gateway import FORBIDDEN, CatalogGateway

OK = ApiResponse(success=True, data={"id": "evt-1"})


def make_gateway(user):
    catalog = AsyncMock()
    for name in (
        "get_all_clubs",
        "create_event",
        "update_event",
        "delete_event",
        "update_club",
        "get_event_registrations",
        "update_registration_status",
        "register_for_event",
        "update_schedule",
        "book_venue",
    ):
        setattr(catalog, name, AsyncMock(return_value=OK))
    return CatalogGateway(catalog, lambda: user), catalog


@pytest.mark.asyncio
async def test_faculty_creates_event_for_own_club(faculty):
    gateway, catalog = make_gateway(faculty)
    result = await gateway.create_event("acm", {"title": "Hack Night"})
    assert result is OK
    catalog.create_event.assert_awaited_once_with({"title": "Hack Night", "clubId": "acm"})


@pytest.mark.asyncio
async def test_faculty_blocked_for_other_club(faculty):
    gateway, catalog = make_gateway(faculty)
    result = await gateway.create_event("ieee", {"title": "Circuits"})
    assert result.success is False
    assert result.error == FORBIDDEN
    catalog.create_event.assert_not_awaited()


@pytest.mark.asyncio
async def test_office_cannot_manage_events_but_updates_schedule(office):
    gateway, catalog = make_gateway(office)
    denied = await gateway.update_event("acm", "evt-1", {"title": "x"})
    assert denied.error == FORBIDDEN
    allowed = await gateway.update_schedule({"room": "B-101"})
    assert allowed is OK
    booked = await gateway.book_venue({"venueId": "hall-1"})
    assert booked is OK


@pytest.mark.asyncio
async def test_anonymous_reads_but_cannot_register():
    gateway, catalog = make_gateway(None)
    assert (await gateway.get_all_clubs()) is OK
    denied = await gateway.register_for_event("evt-1")
    assert denied.success is False
    catalog.register_for_event.assert_not_awaited()


@pytest.mark.asyncio
async def test_student_limits(student):
    gateway, catalog = make_gateway(student)
    assert (await gateway.register_for_event("evt-1")) is OK
    assert (await gateway.update_schedule({})).error == FORBIDDEN
    assert (await gateway.book_venue({})).error == FORBIDDEN
    assert (await gateway.get_event_registrations("acm", "evt-1")).error == FORBIDDEN


@pytest.mark.asyncio
async def test_admin_reviews_any_club(admin):
    gateway, catalog = make_gateway(admin)
    result = await gateway.update_registration_status("ieee", "evt-9", "reg-3", "approved")
    assert result is OK
    catalog.update_registration_status.assert_awaited_once_with("evt-9", "reg-3", "approved")
    assert (await gateway.update_club("ieee", {"name": "IEEE"})) is OK
    assert (await gateway.delete_event("ieee", "evt-9")) is OK
