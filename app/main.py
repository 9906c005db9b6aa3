# =============================================================================
# app/main.py - FastAPI Application Entry Point
# =============================================================================
# This is the main entry point for the User Registry API.
# It configures the FastAPI application with middleware, routers, and handlers.
#
# Usage:
#   uvicorn app.main:app --reload
#   python -m app.main
# =============================================================================

import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware

from app.config import settings
from app.exceptions import (
    UserApiException,
    unexpected_exception_handler,
    user_api_exception_handler,
    validation_exception_handler,
)
from app.routers import health, users
from app.routers.health import API_VERSION
from core.models.user import User
from core.repositories.user_repository import InMemoryUserRepository, UserRepository

# Configure logging
logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s"
)
logger = logging.getLogger(__name__)


# Loaded when SEED_DEMO_USERS is enabled
DEMO_USERS = [
    User(id=1, name="Naruto", age=10),
    User(id=2, name="Sasuke", age=18),
    User(id=3, name="Kakashi", age=50),
]


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan handler.

    The repository lives in memory, so there is nothing to open or
    close; startup and shutdown are only logged.
    """
    logger.info(f"Starting User Registry API in {settings.ENVIRONMENT} mode")
    logger.info(f"CORS origins: {settings.cors_origins_list}")

    yield

    logger.info("Shutting down User Registry API")


def create_app(repository: UserRepository | None = None) -> FastAPI:
    """
    Build the FastAPI application.

    Args:
        repository: User store to serve. Defaults to a new in-memory
            repository (seeded with DEMO_USERS if SEED_DEMO_USERS is set).

    Returns:
        The configured application
    """
    if repository is None:
        repository = InMemoryUserRepository(DEMO_USERS if settings.SEED_DEMO_USERS else None)

    application = FastAPI(
        title="User Registry API",
        description="Minimal CRUD service for users, backed by an in-memory store.",
        version=API_VERSION,
        docs_url="/docs",
        redoc_url="/redoc",
        lifespan=lifespan,
        openapi_tags=[
            {
                "name": "Users",
                "description": "List, fetch, create and delete users",
            },
            {
                "name": "Health",
                "description": "API health and readiness checks",
            },
        ],
    )

    application.state.user_repository = repository

    # -------------------------------------------------------------------------
    # Middleware
    # -------------------------------------------------------------------------

    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins_list if settings.is_production else ["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # -------------------------------------------------------------------------
    # Exception Handlers
    # -------------------------------------------------------------------------

    application.add_exception_handler(UserApiException, user_api_exception_handler)
    application.add_exception_handler(RequestValidationError, validation_exception_handler)
    application.add_exception_handler(Exception, unexpected_exception_handler)

    # -------------------------------------------------------------------------
    # Routers
    # -------------------------------------------------------------------------

    application.include_router(
        users.router,
        prefix="/users",
        tags=["Users"]
    )

    application.include_router(
        health.router,
        tags=["Health"]
    )

    @application.get("/", tags=["Root"])
    def root():
        """
        Root endpoint - returns API info.
        """
        return {
            "name": "User Registry API",
            "version": API_VERSION,
            "docs": "/docs",
            "health": "/health",
        }

    return application


app = create_app()


if __name__ == "__main__":
    uvicorn.run(app, host=settings.API_HOST, port=settings.API_PORT)
