# =============================================================================
# core/services/user_presenter.py - User Presenter
# =============================================================================
# Maps stored users to their response view. Pure functions, no state.
# =============================================================================

from typing import Iterable

from core.models.user import User, UserResponse

# Minimum age for isOfAge to be true
ADULT_AGE = 18


def present_user(user: User) -> UserResponse:
    """
    Build the response view of a user.

    Example:
        present_user(User(id=2, name="Sasuke", age=18)).is_of_age  # True
    """
    return UserResponse(
        id=user.id,
        name=user.name,
        age=user.age,
        is_of_age=user.age >= ADULT_AGE,
    )


def present_users(users: Iterable[User]) -> list[UserResponse]:
    """Present each user, keeping the input order."""
    return [present_user(user) for user in users]
