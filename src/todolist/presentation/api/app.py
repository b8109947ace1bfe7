"""FastAPI application factory.

Creates and configures the FastAPI application with all routers,
middleware, and exception handlers.

All resource endpoints live under ``API_PREFIX`` (``/api`` by default).
The health check endpoint stays at /health.

Run with uvicorn's factory mode::

    uvicorn todolist.presentation.api.app:create_app --factory
"""

import logging
import sys
from contextlib import asynccontextmanager
from functools import lru_cache
from typing import AsyncGenerator

from fastapi import APIRouter, FastAPI
from fastapi.middleware.cors import CORSMiddleware

from todolist import __version__
from todolist.presentation.api.dependencies import (
    build_engine,
    build_session_maker,
    create_tables,
)
from todolist.presentation.api.exception_handlers import setup_exception_handlers
from todolist.presentation.api.routers import (
    auth_router,
    lists_router,
    todos_router,
)
from todolist.presentation.api.schemas import ApiResponse, HealthResponse
from todolist_auth import JWTService, PasswordHashingService
from todolist_config import Settings, get_settings


@lru_cache(maxsize=4)
def _configure_logging(log_level_str: str) -> None:
    """Configure application logging.

    - Console output with timestamps and module names
    - Configurable log level for todolist modules (from settings)
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

    logging.getLogger("todolist").setLevel(log_level)
    logging.getLogger("todolist_auth").setLevel(log_level)

    # Quiet down noisy third-party loggers
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)
    logging.getLogger("aiosqlite").setLevel(logging.WARNING)
    logging.getLogger("asyncpg").setLevel(logging.WARNING)


logger = logging.getLogger(__name__)

API_VERSION = __version__

# OpenAPI tags metadata for documentation
OPENAPI_TAGS = [
    {
        "name": "Authentication",
        "description": """Registration and login.

- Passwords are stored as salted bcrypt digests
- Both endpoints return a signed bearer token with its expiry
- Tokens are stateless and valid until they expire
""",
    },
    {
        "name": "Lists",
        "description": """Todo lists owned by the authenticated user.

Lists belonging to other users are reported as not found.
Deleting a list deletes its todos.
""",
    },
    {
        "name": "Todos",
        "description": """Todos inside the user's lists.

Fetch the todos of a list with `GET /todos?listId=<id>`.
""",
    },
    {
        "name": "Health",
        "description": "Service health monitoring endpoints.",
    },
]


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Own the database engine for the lifetime of the application."""
    settings: Settings = app.state.settings
    logger.info("Starting %s API v%s...", settings.app_name, API_VERSION)

    engine = build_engine(settings.database_url)
    app.state.engine = engine
    app.state.session_maker = build_session_maker(engine)

    try:
        await create_tables(engine)
    except ConnectionRefusedError:
        logger.critical("Could not connect to the database.")
        raise SystemExit(1) from None

    if not settings.enforce_todo_ownership:
        logger.warning(
            "ENFORCE_TODO_OWNERSHIP is off: any authenticated user can read "
            "and modify any todo by id",
        )

    yield

    # Shutdown - dispose the engine and its connection pool
    logger.info("Shutting down %s API...", settings.app_name)
    await engine.dispose()
    logger.info("Database connections closed")


def create_api_router() -> APIRouter:
    """Create the router holding every resource endpoint."""
    api_router = APIRouter()
    api_router.include_router(auth_router, prefix="/auth", tags=["Authentication"])
    api_router.include_router(lists_router, prefix="/lists", tags=["Lists"])
    api_router.include_router(todos_router, prefix="/todos", tags=["Todos"])
    return api_router


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    Parameters
    ----------
    settings
        Optional settings override for testing. Defaults to the cached
        settings read from the environment.

    Returns
    -------
    Configured FastAPI application instance.
    """
    if settings is None:
        settings = get_settings()

    # Configure logging on app creation (not on module import)
    _configure_logging(settings.log_level)

    app = FastAPI(
        title=f"{settings.app_name} API",
        description="Multi-user **todo lists** with bearer-token authentication.",
        version=API_VERSION,
        docs_url="/docs" if settings.api_debug else None,
        redoc_url="/redoc" if settings.api_debug else None,
        openapi_url="/openapi.json" if settings.api_debug else None,
        lifespan=lifespan,
        openapi_tags=OPENAPI_TAGS,
    )

    app.state.settings = settings
    app.state.jwt_service = JWTService(
        secret_key=settings.jwt_secret_key.get_secret_value(),
        ttl_seconds=settings.jwt_ttl_seconds,
    )
    app.state.password_service = PasswordHashingService(
        rounds=settings.bcrypt_rounds,
    )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=settings.cors_methods,
        allow_headers=["*"],
    )

    # Register exception handlers for consistent error responses
    setup_exception_handlers(app)

    app.include_router(create_api_router(), prefix=settings.api_prefix)

    @app.get("/health", tags=["Health"])
    async def health_check() -> ApiResponse[HealthResponse]:
        """Health check endpoint for load balancers and monitoring."""
        return ApiResponse(
            data=HealthResponse(status="healthy", version=API_VERSION),
            message="Service is healthy",
        )

    return app
