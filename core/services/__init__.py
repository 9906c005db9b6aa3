# =============================================================================
# core/services/__init__.py - Service Layer Exports
# =============================================================================

from .user_presenter import ADULT_AGE, present_user, present_users

__all__ = [
    "ADULT_AGE",
    "present_user",
    "present_users",
]
