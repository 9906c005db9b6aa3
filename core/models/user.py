# =============================================================================
# core/models/user.py - User Schemas
# =============================================================================
# These models define the API contract for user operations:
# - User: The stored entity (what the repository keeps)
# - UserCreate: Inbound payload for POST /users
# - UserResponse: Outbound view of a user, with the derived isOfAge flag
#
# UserResponse is computed on every read and never stored.
# =============================================================================

from pydantic import BaseModel, Field


class User(BaseModel):
    """
    A stored user record.

    Identity is `id`, which is assigned by the caller on create.
    Records are immutable; the only mutations are save and delete.

    Example:
        {"id": 1, "name": "Naruto", "age": 10}
    """

    id: int = Field(..., description="Caller-assigned unique identifier")
    name: str = Field(..., description="Display name")
    age: int = Field(..., description="Age in years")

    model_config = {"frozen": True}


class UserCreate(BaseModel):
    """
    Payload for creating a user.

    Every field may be absent here. Whether the payload is acceptable
    (fields present, name not blank, age not negative) is decided by
    the repository, which answers with a plain boolean.
    """

    id: int | None = Field(default=None, description="Identifier for the new user")
    name: str | None = Field(default=None, description="Display name")
    age: int | None = Field(default=None, description="Age in years")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {"id": 4, "name": "Sakura", "age": 16},
            ]
        }
    }


class UserResponse(BaseModel):
    """
    Presentation view of a user.

    Serialized with the camelCase key `isOfAge`, e.g.:
        {"id": 2, "name": "Sasuke", "age": 18, "isOfAge": true}
    """

    id: int
    name: str
    age: int
    # age >= 18, evaluated when the response is built
    is_of_age: bool = Field(..., serialization_alias="isOfAge")
