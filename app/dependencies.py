# =============================================================================
# app/dependencies.py - Shared Dependencies
# =============================================================================
# FastAPI dependency injection for shared resources.
# These are injected into route handlers using Depends().
# =============================================================================

from typing import Annotated

from fastapi import Depends, Request

from core.repositories.user_repository import UserRepository


def get_user_repository(request: Request) -> UserRepository:
    """
    Get the user repository.

    Returns the instance created by create_app() and kept on app.state.
    Tests replace it with app.dependency_overrides.
    """
    return request.app.state.user_repository


# Type alias for dependency injection
UserRepositoryDep = Annotated[UserRepository, Depends(get_user_repository)]
