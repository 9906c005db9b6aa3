# =============================================================================
# tests/ - Test Suite
# =============================================================================
# This package contains all tests for the User Registry API:
# - test_models.py: Pydantic model and envelope tests
# - test_user_presenter.py: isOfAge derivation
# - test_user_repository.py: In-memory repository behavior
# - test_users_api.py: Endpoint status codes and envelopes
# - test_health.py: Health, readiness and root endpoints
#
# Run tests with: pytest
# =============================================================================
