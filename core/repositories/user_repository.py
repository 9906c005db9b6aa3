# =============================================================================
# core/repositories/user_repository.py - User Storage
# =============================================================================
# Defines the storage capability the API depends on and its in-memory
# implementation.
#
# Expected outcomes are never raised as exceptions:
# - find_one() returns None when the id is unknown
# - save() / delete() return False when the operation is refused
#
# Usage:
#   repository = InMemoryUserRepository()
#   repository.save(UserCreate(id=1, name="Naruto", age=10))  # True
#   repository.find_one(1)                                    # User(...)
#   repository.delete(1)                                      # True
# =============================================================================

from __future__ import annotations

import logging
import threading
from abc import ABC, abstractmethod
from typing import Iterable

from core.models.user import User, UserCreate

logger = logging.getLogger(__name__)


class UserRepository(ABC):
    """
    Abstract base class for user storage.

    Any implementation (in-memory, persistent, test double) can be
    handed to the API without changing the endpoints.
    """

    @abstractmethod
    def list(self) -> list[User]:
        """Return every stored user. Empty list if there are none."""
        pass

    @abstractmethod
    def find_one(self, user_id: int) -> User | None:
        """Return the user with this id, or None if there is no match."""
        pass

    @abstractmethod
    def save(self, user: UserCreate) -> bool:
        """
        Store a new user.

        Returns:
            True if the user was accepted, False if it was refused.
        """
        pass

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """
        Remove a user by id.

        Returns:
            True if a user was removed, False if none matched.
        """
        pass


class InMemoryUserRepository(UserRepository):
    """
    Process-wide user store backed by a dict.

    Users are kept in insertion order. FastAPI runs sync endpoints on a
    thread pool, so every access goes through a lock.

    A payload is refused by save() when:
    - id, name or age is missing
    - name is blank
    - age is negative
    - a user with the same id is already stored
    """

    def __init__(self, users: Iterable[User] | None = None):
        # user id -> User, in insertion order
        self._users: dict[int, User] = {}
        self._lock = threading.Lock()

        for user in users or []:
            self._users[user.id] = user

    def list(self) -> list[User]:
        with self._lock:
            return list(self._users.values())

    def find_one(self, user_id: int) -> User | None:
        with self._lock:
            return self._users.get(user_id)

    def save(self, user: UserCreate) -> bool:
        reason = self._rejection_reason(user)
        if reason:
            logger.warning(f"Rejected user {user.id}: {reason}")
            return False

        with self._lock:
            if user.id in self._users:
                logger.warning(f"Rejected user {user.id}: id already exists")
                return False

            self._users[user.id] = User(id=user.id, name=user.name, age=user.age)

        logger.info(f"Created user: {user.id}")
        return True

    def delete(self, user_id: int) -> bool:
        with self._lock:
            removed = self._users.pop(user_id, None)

        if removed is None:
            logger.info(f"Delete requested for unknown user: {user_id}")
            return False

        logger.info(f"Deleted user: {user_id}")
        return True

    @staticmethod
    def _rejection_reason(user: UserCreate) -> str | None:
        """Return why a payload can't be stored, or None if it can."""
        missing = [
            field for field in ("id", "name", "age")
            if getattr(user, field) is None
        ]
        if missing:
            return f"missing fields: {', '.join(missing)}"

        if not user.name.strip():
            return "name is blank"

        if user.age < 0:
            return f"age must not be negative (got {user.age})"

        return None
