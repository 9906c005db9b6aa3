# =============================================================================
# tests/test_models.py - Pydantic Model Tests
# =============================================================================
# Unit tests for the user models and the response envelope.
#
# Run with: pytest tests/test_models.py -v
# =============================================================================

import pytest
from pydantic import ValidationError

from core.models import Envelope, User, UserCreate, UserResponse


# =============================================================================
# User Model Tests
# =============================================================================

class TestUser:
    """Tests for the stored User model."""

    def test_valid_user(self):
        """Test creating a valid User."""
        user = User(id=1, name="Naruto", age=10)

        assert user.id == 1
        assert user.name == "Naruto"
        assert user.age == 10

    def test_user_requires_all_fields(self):
        """Test that id, name and age are required."""
        with pytest.raises(ValidationError):
            User(name="Naruto", age=10)

    def test_user_is_frozen(self):
        """Test that stored users can't be changed in place."""
        user = User(id=1, name="Naruto", age=10)

        with pytest.raises(ValidationError):
            user.age = 11


class TestUserCreate:
    """Tests for the create payload."""

    def test_all_fields_optional(self):
        """Test that a partial payload is accepted by the model."""
        payload = UserCreate(name="", age=-5)

        assert payload.id is None
        assert payload.name == ""
        assert payload.age == -5

    def test_numeric_strings_are_coerced(self):
        """Test lax int parsing of JSON strings."""
        payload = UserCreate.model_validate({"id": "4", "name": "Sakura", "age": "16"})

        assert payload.id == 4
        assert payload.age == 16

    def test_wrong_type_rejected(self):
        """Test that a non-numeric age fails validation."""
        with pytest.raises(ValidationError):
            UserCreate.model_validate({"id": 4, "name": "Sakura", "age": "sixteen"})


class TestUserResponse:
    """Tests for the response view."""

    def test_serializes_is_of_age_in_camel_case(self):
        """Test that is_of_age is dumped as isOfAge."""
        response = UserResponse(id=2, name="Sasuke", age=18, is_of_age=True)

        dumped = response.model_dump(by_alias=True)

        assert dumped == {"id": 2, "name": "Sasuke", "age": 18, "isOfAge": True}


# =============================================================================
# Envelope Tests
# =============================================================================

class TestEnvelope:
    """Tests for the {success, data} envelope."""

    def test_ok_wraps_data(self):
        envelope = Envelope.ok("Usuário criado com sucesso")

        assert envelope.success is True
        assert envelope.data == "Usuário criado com sucesso"

    def test_fail_wraps_message(self):
        envelope = Envelope.fail("Usuário não encontrado")

        assert envelope.success is False
        assert envelope.data == "Usuário não encontrado"

    def test_nested_models_keep_aliases(self):
        """Test that users inside the envelope are dumped with isOfAge."""
        envelope = Envelope.ok([UserResponse(id=1, name="Naruto", age=10, is_of_age=False)])

        dumped = envelope.model_dump(mode="json", by_alias=True)

        assert dumped == {
            "success": True,
            "data": [{"id": 1, "name": "Naruto", "age": 10, "isOfAge": False}],
        }
