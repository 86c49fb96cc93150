from typing import Optional, Protocol

from ..domain.user import Account


class UserRepository(Protocol):
    """Protocol for account storage operations."""

    async def create(self, account: Account) -> Account: ...

    async def get_by_id(self, account_id: str) -> Optional[Account]: ...

    async def get_by_email(self, email: str) -> Optional[Account]: ...
