# =============================================================================
# core/models/ - Pydantic Data Models
# =============================================================================
# This package contains Pydantic schemas:
# - user.py: User entity, create payload and response view
# - envelope.py: The {success, data} response wrapper
#
# These models define the "contract" between API and clients.
# =============================================================================

from .envelope import Envelope
from .user import User, UserCreate, UserResponse

__all__ = [
    "Envelope",
    "User",
    "UserCreate",
    "UserResponse",
]
