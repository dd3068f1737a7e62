"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

Run with::

    uvicorn storerating.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from storerating.presentation.api.dependencies import create_tables, get_engine
from storerating.presentation.api.exception_handlers import (
    setup_exception_handlers,
)
from storerating.presentation.api.routers import (
    admin_router,
    auth_router,
    ratings_router,
    store_owner_router,
    stores_router,
)
from storerating.presentation.api.schemas import HealthResponse
from storerating_config.settings import Settings, get_settings


@lru_cache(maxsize=1)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    Sets up logging for the storerating packages with:
    - Console output with timestamps and module names
    - Configurable log level for storerating modules (from settings)
    - WARNING level for noisy third-party libraries
    """
    log_level = getattr(logging, log_level_str.upper(), logging.INFO)

    logging.basicConfig(
        level=log_level,
        format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stdout,
        force=True,  # Override any existing config
    )

    logging.getLogger("storerating").setLevel(log_level)
    logging.getLogger("storerating_identity").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = "1.0.0"
API_PREFIX = "/api"

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Signup, login and the caller's own account.

**Roles:**
- Signup always creates a `Normal User`
- `Store Owner` and `System Administrator` accounts are created by admins

**Security:**
- Passwords are hashed with bcrypt
- Bearer JWT tokens carrying the user id and role
""",
    },
    {
        "name": "Admin",
        "description": """Platform statistics and user management.

System Administrators only. Store Owners in listings carry the average
rating across all of their stores.
""",
    },
    {
        "name": "Stores",
        "description": """Store directory and store management.

**Listing:**
- Public, with case-insensitive substring search
- Sort by `id`, `name`, `address` or `averageRating`
- Callers with a valid token also see their own `userRating`

**Management:** create, update and delete are admin only.
""",
    },
    {
        "name": "Ratings",
        "description": "Normal Users rate stores 1-5, one rating per store.",
    },
    {
        "name": "Store Owner",
        "description": "A Store Owner's own store and its ratings dashboard.",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
    {
        "name": "Info",
        "description": "API information and discovery.",
    },
]


@asynccontextmanager
async def lifespan(_: FastAPI) -> AsyncGenerator[None, None]:
    """Application lifespan manager."""
    logger.info("Starting Store Rating API v%s...", API_VERSION)
    try:
        await create_tables()
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None
    yield

    # Shutdown - dispose the shared engine and its connection pool
    logger.info("Shutting down Store Rating API...")
    await get_engine().dispose()
    logger.info("Database connections closed")


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on first app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description=(
            "Users rate stores from 1 to 5; store owners follow their ratings "
            "and administrators manage users and stores."
        ),
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Register domain exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(auth_router, prefix=f"{API_PREFIX}/auth", tags=["Authentication"])
    app.include_router(admin_router, prefix=f"{API_PREFIX}/admin", tags=["Admin"])
    app.include_router(stores_router, prefix=f"{API_PREFIX}/stores", tags=["Stores"])
    app.include_router(
        ratings_router,
        prefix=f"{API_PREFIX}/ratings",
        tags=["Ratings"],
    )
    app.include_router(
        store_owner_router,
        prefix=f"{API_PREFIX}/store-owner",
        tags=["Store Owner"],
    )

    @app.get("/health", tags=["Health"])
    async def health_check() -> HealthResponse:
        """Liveness probe for load balancers and monitoring."""
        return HealthResponse(status="healthy", version=API_VERSION)

    @app.get("/", tags=["Info"])
    async def root() -> dict:
        """API root endpoint with version information."""
        return {
            "name": f"{settings.app_name} API",
            "version": API_VERSION,
            "docs": "/docs" if settings.api_debug else None,
            "api_base": API_PREFIX,
            "endpoints": {
                "health": "/health",
                "auth": f"{API_PREFIX}/auth",
                "admin": f"{API_PREFIX}/admin",
                "stores": f"{API_PREFIX}/stores",
                "ratings": f"{API_PREFIX}/ratings",
                "store_owner": f"{API_PREFIX}/store-owner",
            },
        }

    return app
