# =============================================================================
# core/repositories/__init__.py - Repository Exports
# =============================================================================

from .user_repository import InMemoryUserRepository, UserRepository

__all__ = [
    "InMemoryUserRepository",
    "UserRepository",
]
