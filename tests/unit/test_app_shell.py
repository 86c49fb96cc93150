import asyncio
from unittest.mock import AsyncMock

import pytest

from infonest.domain.auth import Credentials, SignupData
from infonest.domain.capability import Capability
from infonest.domain.page import PageId
from infonest.exceptions import InvalidCredentialsError
from infonest.services.app_shell import AppShell
from infonest.services.session_controller import SessionController


def make_shell(**auth_methods):
    auth = AsyncMock()
    auth.get_current_user = AsyncMock(return_value=None)
    auth.logout = AsyncMock(return_value=None)
    for name, value in auth_methods.items():
        setattr(auth, name, value)
    return AppShell(SessionController(auth)), auth


@pytest.mark.asyncio
async def test_start_anonymous_lands_on_clubs_landing():
    shell, _ = make_shell()
    state = await shell.start()
    assert state.page is PageId.CLUBS_LANDING
    assert shell.user is None


@pytest.mark.asyncio
async def test_start_failure_lands_on_clubs_landing():
    shell, _ = make_shell(get_current_user=AsyncMock(side_effect=OSError("disk")))
    state = await shell.start()
    assert state.page is PageId.CLUBS_LANDING


@pytest.mark.asyncio
async def test_restored_and_fresh_login_redirect_identically(office):
    restored, _ = make_shell(get_current_user=AsyncMock(return_value=office))
    await restored.start()

    fresh, _ = make_shell(login=AsyncMock(return_value=office))
    await fresh.start()
    await fresh.login(Credentials("otto@campus.edu", "pw"))

    assert restored.navigator.current_page is PageId.VENUE_BOOKING
    assert fresh.navigator.current_page is PageId.VENUE_BOOKING


@pytest.mark.asyncio
async def test_login_redirects_to_role_dashboard(admin):
    shell, _ = make_shell(login=AsyncMock(return_value=admin))
    await shell.start()
    await shell.login(Credentials("ada@campus.edu", "pw"))
    assert shell.navigator.current_page is PageId.ADMIN_DASHBOARD


@pytest.mark.asyncio
async def test_failed_login_stays_on_current_page():
    shell, _ = make_shell(login=AsyncMock(side_effect=InvalidCredentialsError("nope")))
    await shell.start()
    assert shell.request_navigation(PageId.LOGIN)

    with pytest.raises(InvalidCredentialsError):
        await shell.login(Credentials("x@campus.edu", "bad"))

    assert shell.navigator.current_page is PageId.LOGIN


@pytest.mark.asyncio
async def test_signup_redirects(faculty):
    shell, _ = make_shell(signup=AsyncMock(return_value=faculty))
    await shell.signup(
        SignupData(
            email="fay@campus.edu",
            password="campus2024",
            full_name="Fay",
            role="faculty",
            club_id="acm",
        )
    )
    assert shell.navigator.current_page is PageId.FACULTY_DASHBOARD


@pytest.mark.asyncio
async def test_logout_returns_home_and_clears_params(student):
    shell, _ = make_shell(login=AsyncMock(return_value=student))
    await shell.login(Credentials("sam@campus.edu", "pw"))
    shell.request_navigation("club-detail", {"clubId": "acm"})

    state = await shell.logout()

    assert state.page is PageId.HOME
    assert state.params is None
    assert shell.user is None


@pytest.mark.asyncio
async def test_denied_navigation_leaves_page_unchanged(student):
    shell, _ = make_shell(login=AsyncMock(return_value=student))
    await shell.login(Credentials("sam@campus.edu", "pw"))

    assert shell.request_navigation(PageId.ADMIN_DASHBOARD) is False
    assert shell.request_navigation("venue-booking") is False
    assert shell.navigator.current_page is PageId.CLUBS_LANDING


@pytest.mark.asyncio
async def test_missing_params_is_a_no_op():
    shell, _ = make_shell()
    await shell.start()

    assert shell.request_navigation(PageId.CLUB_DETAIL) is False
    assert shell.request_navigation(PageId.CLUB_DETAIL, {"category": "tech"}) is False
    assert shell.navigator.current_page is PageId.CLUBS_LANDING

    assert shell.request_navigation(PageId.CLUB_DETAIL, {"clubId": "acm"}) is True
    assert shell.render_context().params == {"clubId": "acm"}


@pytest.mark.asyncio
async def test_unknown_page_is_rejected():
    shell, _ = make_shell()
    await shell.start()
    assert shell.request_navigation("lost-and-found") is False
    assert shell.navigator.current_page is PageId.CLUBS_LANDING


@pytest.mark.asyncio
async def test_admin_can_visit_faculty_dashboard(admin):
    shell, _ = make_shell(login=AsyncMock(return_value=admin))
    await shell.login(Credentials("ada@campus.edu", "pw"))
    assert shell.request_navigation(PageId.FACULTY_DASHBOARD) is True
    assert shell.navigator.current_page is PageId.FACULTY_DASHBOARD


@pytest.mark.asyncio
async def test_features_and_pages_follow_the_session(faculty):
    shell, _ = make_shell(login=AsyncMock(return_value=faculty))
    await shell.start()
    assert shell.available_features() == frozenset()
    assert PageId.FACULTY_DASHBOARD not in shell.reachable_pages()

    await shell.login(Credentials("fay@campus.edu", "pw"))

    assert Capability.MANAGE_EVENTS in shell.available_features()
    assert PageId.FACULTY_DASHBOARD in shell.reachable_pages()
    context = shell.render_context()
    assert context.user == faculty
    assert context.page is PageId.FACULTY_DASHBOARD


@pytest.mark.asyncio
async def test_logout_during_start_stays_home(admin):
    release = asyncio.Event()

    async def slow_restore():
        await release.wait()
        return admin

    shell, _ = make_shell(get_current_user=AsyncMock(side_effect=slow_restore))
    pending = asyncio.create_task(shell.start())
    await asyncio.sleep(0)
    await shell.logout()
    release.set()

    state = await pending
    assert state.page is PageId.HOME
    assert shell.navigator.current_page is PageId.HOME
    assert shell.user is None
