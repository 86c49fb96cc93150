from .users_repository import InMemoryUserRepository

__all__ = ["InMemoryUserRepository"]
