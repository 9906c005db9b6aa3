# =============================================================================
# app/routers/users.py - User CRUD Endpoints
# =============================================================================
# One endpoint per verb+path. Each calls the repository, picks the status
# code and wraps the outcome in an envelope:
#
#   GET    /users       -> 200 list of users
#   GET    /users/{id}  -> 200 user | 404 "Usuário não encontrado"
#   POST   /users       -> 201 "Usuário criado com sucesso" | 500 "Falha ao criar o usuário"
#   DELETE /users/{id}  -> 200 "Usuário excluído com sucesso" | 500 "Falha ao remover o usuário"
#
# Refused creates and deletes are reported as 500, not 4xx.
# Unexpected repository errors are logged and turned into failure envelopes
# here, so they never reach the transport layer.
# =============================================================================

import logging
from typing import Annotated

from fastapi import APIRouter, Path, status
from fastapi.responses import JSONResponse

from app.dependencies import UserRepositoryDep
from app.exceptions import (
    UserApiException,
    UserCreationError,
    UserDeletionError,
    UserNotFoundError,
)
from app.responses import envelope_response
from core.models.envelope import Envelope
from core.models.user import UserCreate, UserResponse
from core.services.user_presenter import present_user, present_users

logger = logging.getLogger(__name__)

router = APIRouter()

USER_CREATED_MESSAGE = "Usuário criado com sucesso"
USER_DELETED_MESSAGE = "Usuário excluído com sucesso"

UserIdPath = Annotated[int, Path(description="User id")]


# =============================================================================
# Endpoints
# =============================================================================

@router.get("", response_model=Envelope[list[UserResponse]])
def list_users(repository: UserRepositoryDep) -> JSONResponse:
    """
    List all users.

    Each user carries the derived `isOfAge` flag.
    """
    try:
        users = present_users(repository.list())
    except Exception as e:
        logger.exception(f"Failed to list users: {e}")
        raise UserApiException() from e

    return envelope_response(status.HTTP_200_OK, Envelope.ok(users))


@router.get("/{user_id}", response_model=Envelope[UserResponse])
def get_user(user_id: UserIdPath, repository: UserRepositoryDep) -> JSONResponse:
    """
    Get one user by id.

    Returns 404 with a failure envelope if the id is unknown.
    """
    try:
        user = repository.find_one(user_id)
        presented = present_user(user) if user is not None else None
    except Exception as e:
        logger.exception(f"Failed to fetch user {user_id}: {e}")
        raise UserApiException() from e

    if presented is None:
        raise UserNotFoundError(user_id)

    return envelope_response(status.HTTP_200_OK, Envelope.ok(presented))


@router.post(
    "",
    response_model=Envelope[str],
    status_code=status.HTTP_201_CREATED,
)
def create_user(payload: UserCreate, repository: UserRepositoryDep) -> JSONResponse:
    """
    Create a user.

    The id is chosen by the caller. The repository decides whether the
    payload is acceptable; a refusal is answered with 500.
    """
    try:
        created = repository.save(payload)
    except Exception as e:
        logger.exception(f"Failed to save user {payload.id}: {e}")
        raise UserCreationError() from e

    if not created:
        raise UserCreationError()

    return envelope_response(status.HTTP_201_CREATED, Envelope.ok(USER_CREATED_MESSAGE))


@router.delete("/{user_id}", response_model=Envelope[str])
def delete_user(user_id: UserIdPath, repository: UserRepositoryDep) -> JSONResponse:
    """
    Delete a user by id.

    Answers 500 if no user was removed.
    """
    try:
        deleted = repository.delete(user_id)
    except Exception as e:
        logger.exception(f"Failed to delete user {user_id}: {e}")
        raise UserDeletionError(user_id) from e

    if not deleted:
        raise UserDeletionError(user_id)

    return envelope_response(status.HTTP_200_OK, Envelope.ok(USER_DELETED_MESSAGE))
