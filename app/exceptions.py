# =============================================================================
# app/exceptions.py - Custom Exceptions and Handlers
# =============================================================================
# Centralized exception handling for the API.
# Every error leaves the service as a failure envelope:
#
#   {"success": false, "data": "<message>"}
# =============================================================================

import logging

from fastapi import Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.responses import envelope_response
from core.models.envelope import Envelope

logger = logging.getLogger(__name__)

INTERNAL_ERROR_MESSAGE = "Erro interno do servidor"


class UserApiException(Exception):
    """
    Base exception for the user API.

    Carries the message sent to the client and the HTTP status to use.
    """

    def __init__(
        self,
        message: str = INTERNAL_ERROR_MESSAGE,
        status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR,
    ):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


# =============================================================================
# User Exceptions
# =============================================================================

class UserNotFoundError(UserApiException):
    """Raised when no user has the requested id."""

    def __init__(self, user_id: int | str):
        super().__init__(
            message="Usuário não encontrado",
            status_code=status.HTTP_404_NOT_FOUND,
        )
        self.user_id = user_id


class UserCreationError(UserApiException):
    """Raised when the repository refuses (or fails) to store a user."""

    def __init__(self):
        super().__init__(message="Falha ao criar o usuário")


class UserDeletionError(UserApiException):
    """Raised when the repository doesn't remove the requested user."""

    def __init__(self, user_id: int | str):
        super().__init__(message="Falha ao remover o usuário")
        self.user_id = user_id


# =============================================================================
# Exception Handlers
# =============================================================================

async def user_api_exception_handler(
    request: Request,
    exc: UserApiException
) -> JSONResponse:
    """Convert UserApiException to a failure envelope."""
    return envelope_response(exc.status_code, Envelope.fail(exc.message))


async def validation_exception_handler(
    request: Request,
    exc: RequestValidationError
) -> JSONResponse:
    """
    Handle request validation errors.

    A malformed request gets the failure its operation already uses:
    - POST with a bad body: 500 "Falha ao criar o usuário"
    - GET with a non-integer id: 404 "Usuário não encontrado"
    - DELETE with a non-integer id: 500 "Falha ao remover o usuário"
    """
    logger.info(f"Invalid request to {request.method} {request.url.path}: {exc.errors()}")

    user_id = request.path_params.get("user_id")
    if request.method == "POST":
        failure: UserApiException = UserCreationError()
    elif request.method == "GET" and user_id is not None:
        failure = UserNotFoundError(user_id)
    elif request.method == "DELETE" and user_id is not None:
        failure = UserDeletionError(user_id)
    else:
        failure = UserApiException()

    return await user_api_exception_handler(request, failure)


async def unexpected_exception_handler(
    request: Request,
    exc: Exception
) -> JSONResponse:
    """Handle exceptions nothing else caught."""
    logger.exception(f"Unexpected error: {exc}")
    return envelope_response(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        Envelope.fail(INTERNAL_ERROR_MESSAGE),
    )
