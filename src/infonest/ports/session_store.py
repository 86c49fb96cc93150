from typing import Any, Optional, Protocol


class SessionStore(Protocol):
    """Protocol for the key-value store holding client session material."""

    async def get(self, key: str) -> Optional[Any]: ...

    async def set(self, key: str, value: Any, ex: Optional[int] = None) -> None: ...

    async def delete(self, key: str) -> None: ...
