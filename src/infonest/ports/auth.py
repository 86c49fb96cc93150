from typing import Optional, Protocol

from ..domain.auth import SignupData
from ..domain.role import Role
from ..domain.user import User


class AuthService(Protocol):
    """Protocol for the authentication backend the session layer talks to.

    ``signup`` and ``login`` raise ``AuthError``. ``logout`` and
    ``get_current_user`` never raise.
    """

    async def signup(self, data: SignupData) -> User: ...

    async def login(self, email: str, password: str, role: Optional[Role] = None) -> User: ...

    async def logout(self) -> None: ...

    async def get_current_user(self) -> Optional[User]: ...
