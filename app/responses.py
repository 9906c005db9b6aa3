# =============================================================================
# app/responses.py - Envelope Responses
# =============================================================================
# Turns an Envelope into a JSONResponse with a chosen status code.
# Used by the user endpoints and by the exception handlers.
# =============================================================================

from fastapi.responses import JSONResponse

from core.models.envelope import Envelope


def envelope_response(status_code: int, envelope: Envelope) -> JSONResponse:
    """Serialize an envelope (camelCase aliases included) as the response body."""
    return JSONResponse(
        status_code=status_code,
        content=envelope.model_dump(mode="json", by_alias=True),
    )
