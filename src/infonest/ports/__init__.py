"""Ports package - defines interfaces for external dependencies.

Exports repository protocols and service interfaces for dependency inversion.
"""

from .auth import AuthService
from .catalog import ApiResponse, CatalogService
from .repositories import UserRepository
from .session_store import SessionStore

__all__ = [
    "AuthService",
    "ApiResponse",
    "CatalogService",
    "SessionStore",
    "UserRepository",
]
