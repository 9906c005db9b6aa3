# =============================================================================
# core/ - Business Logic Package
# =============================================================================
# This package contains framework-agnostic business logic:
# - models/: Pydantic schemas for users and the response envelope
# - repositories/: User storage (abstract interface + in-memory store)
# - services/: Stateless transforms such as the user presenter
#
# Code in this package should NOT import from FastAPI.
# This keeps the logic testable and reusable.
# =============================================================================
