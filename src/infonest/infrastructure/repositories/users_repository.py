import asyncio
import itertools
from typing import Dict, Optional

from ...domain.user import Account
from ...exceptions import DuplicateError
from ...logging_config import get_logger

logger = get_logger(__name__)


class InMemoryUserRepository:
    """Account store keyed by id with a case-insensitive email index."""

    def __init__(self):
        self._by_id: Dict[str, Account] = {}
        self._by_email: Dict[str, str] = {}
        self._ids = itertools.count(1)
        self._lock = asyncio.Lock()

    @staticmethod
    def _email_key(email: str) -> str:
        return email.strip().lower()

    async def create(self, account: Account) -> Account:
        key = self._email_key(account.email)
        async with self._lock:
            if key in self._by_email:
                raise DuplicateError(f"email already registered: {account.email}")
            if account.id is None:
                account.id = f"user-{next(self._ids)}"
            self._by_id[account.id] = account
            self._by_email[key] = account.id
        logger.debug("account_created", extra={"id": account.id, "role": account.role.value})
        return account

    async def get_by_id(self, account_id: str) -> Optional[Account]:
        return self._by_id.get(str(account_id))

    async def get_by_email(self, email: str) -> Optional[Account]:
        account_id = self._by_email.get(self._email_key(email))
        if account_id is None:
            return None
        return self._by_id.get(account_id)
