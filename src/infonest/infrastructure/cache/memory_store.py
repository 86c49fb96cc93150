import asyncio
import time
from typing import Any, Optional

from ...logging_config import get_logger

logger = get_logger(__name__)


class InMemorySessionStore:
    """Process-local key-value store with optional per-key expiry."""

    def __init__(self):
        # store: key -> (value: Any, expire_at: Optional[float])
        self.store: dict[str, tuple[Any, Optional[float]]] = {}
        self.lock = asyncio.Lock()

    async def get(self, key: str) -> Optional[Any]:
        async with self.lock:
            entry = self.store.get(key)
            if not entry:
                return None
            value, expire_at = entry
            if expire_at is not None and time.time() >= expire_at:
                # expired; remove and return None
                del self.store[key]
                logger.debug("session_store_key_expired", extra={"key": key})
                return None
            return value

    async def set(self, key: str, value: Any, ex: Optional[int] = None) -> None:
        expire_at = None
        if ex is not None:
            expire_at = time.time() + int(ex)
        async with self.lock:
            self.store[key] = (value, expire_at)

    async def delete(self, key: str) -> None:
        async with self.lock:
            self.store.pop(key, None)
