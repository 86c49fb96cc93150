import sys
from pathlib import Path

# Ensure the project's src directory is on sys.path for tests
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

import pytest  # noqa: E402

from infonest.config import Settings  # noqa: E402
from infonest.domain.role import Role  # noqa: E402
from infonest.domain.user import User  # noqa: E402
from infonest.infrastructure.cache import InMemorySessionStore  # noqa: E402
from infonest.infrastructure.repositories import InMemoryUserRepository  # noqa: E402
from infonest.services.token_service import TokenService  # noqa: E402
from infonest.services.user_service import UserService  # noqa: E402

TEST_PASSWORD = "campus2024"
TEST_SECRET = "test_secret_key_123"


@pytest.fixture
def student():
    return User(id="u-student", role=Role.STUDENT, name="Sam Student", email="sam@campus.edu")


@pytest.fixture
def faculty():
    return User(
        id="u-faculty",
        role=Role.FACULTY,
        name="Fay Faculty",
        email="fay@campus.edu",
        club_id="acm",
    )


@pytest.fixture
def admin():
    return User(id="u-admin", role=Role.ADMIN, name="Ada Admin", email="ada@campus.edu")


@pytest.fixture
def office():
    return User(
        id="u-office",
        role=Role.OFFICE,
        name="Otto Office",
        email="otto@campus.edu",
        department="Facilities",
    )


@pytest.fixture
def settings():
    return Settings(jwt_secret=TEST_SECRET, access_token_ttl_seconds=900, use_mock_api=True)


@pytest.fixture
def store():
    return InMemorySessionStore()


@pytest.fixture
def user_service():
    return UserService(InMemoryUserRepository())


@pytest.fixture
def token_service(store):
    return TokenService(TEST_SECRET, access_token_ttl_seconds=900, store=store)
