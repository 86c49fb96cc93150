from .memory_store import InMemorySessionStore

__all__ = ["InMemorySessionStore"]
