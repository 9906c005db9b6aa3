# =============================================================================
# tests/conftest.py - Pytest Configuration
# =============================================================================
# This module provides pytest fixtures and configuration for all tests.
#
# Key features:
# - Sets up environment variables before any imports
# - Provides sample users, a fresh repository and an API client
# =============================================================================

import os

# =============================================================================
# Set up test environment BEFORE any imports
# =============================================================================
# This must happen before importing app.config which loads settings immediately

os.environ.setdefault("ENVIRONMENT", "development")
os.environ.setdefault("DEBUG", "true")
os.environ.setdefault("SEED_DEMO_USERS", "false")

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from core.models.user import User
from core.repositories.user_repository import InMemoryUserRepository


# =============================================================================
# Fixtures
# =============================================================================

@pytest.fixture
def sample_users():
    """The three users used throughout the API tests."""
    return [
        User(id=1, name="Naruto", age=10),
        User(id=2, name="Sasuke", age=18),
        User(id=3, name="Kakashi", age=50),
    ]


@pytest.fixture
def repository(sample_users):
    """In-memory repository pre-loaded with sample_users."""
    return InMemoryUserRepository(sample_users)


@pytest.fixture
def app(repository):
    """Application serving the sample repository."""
    application = create_app(repository=repository)
    yield application
    application.dependency_overrides.clear()


@pytest.fixture
def client(app):
    """TestClient for the application. Server errors become 500 responses."""
    return TestClient(app, raise_server_exceptions=False)
