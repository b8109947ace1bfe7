"""FastAPI dependency injection for the todo list API.

Provides dependencies for:
- Database sessions
- Authentication (current user from the bearer token)
- User context for repository scoping
- Service instances

Long-lived objects (settings, engine, session maker, auth services) live
on ``app.state`` and are installed by ``create_app`` and its lifespan.
"""

import logging
from pathlib import Path
from typing import Annotated, AsyncGenerator

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)

from todolist.application.context import UserContext
from todolist.application.services import AuthenticationService
from todolist.domain.shared import ErrorCode, UnauthorizedError
from todolist.infrastructure.persistence.sqlalchemy.models import Base
from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)
from todolist_auth import InvalidTokenError, JWTService, PasswordHashingService
from todolist_config import Settings

logger = logging.getLogger(__name__)

# Security scheme for JWT Bearer tokens
security = HTTPBearer(auto_error=False)


# -----------------------------------------------------------------------------
# Database Engine & Schema
# -----------------------------------------------------------------------------


def build_engine(database_url: str) -> AsyncEngine:
    """
    Create the async engine that owns the connection pool.

    Parameters
    ----------
    database_url
        SQLAlchemy URL, e.g. ``postgresql+asyncpg://...`` or
        ``sqlite+aiosqlite:///./data/todolist.db``

    Returns
    -------
    AsyncEngine instance
    """
    # Ensure data directory exists for SQLite
    if database_url.startswith("sqlite") and ":memory:" not in database_url:
        db_path = database_url.split("///")[-1]
        if db_path:
            Path(db_path).parent.mkdir(parents=True, exist_ok=True)

    return create_async_engine(
        database_url,
        echo=False,
        pool_pre_ping=True,
    )


def build_session_maker(engine: AsyncEngine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


async def create_tables(engine: AsyncEngine) -> None:
    """
    Create all database tables (idempotent).

    Uses SQLAlchemy's create_all() which only creates missing tables.
    Existing tables and their data are never modified or deleted.
    """
    logger.info("Ensuring all database tables exist...")

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    logger.info("Database schema is up to date")


# -----------------------------------------------------------------------------
# Application State
# -----------------------------------------------------------------------------


def get_api_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_jwt_service(request: Request) -> JWTService:
    return request.app.state.jwt_service


def get_password_service(request: Request) -> PasswordHashingService:
    return request.app.state.password_service


async def get_db_session(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """
    Database session dependency.

    Yields
    ------
    AsyncSession bound to the application's engine, closed after the request
    """
    session_maker: async_sessionmaker[AsyncSession] = request.app.state.session_maker
    async with session_maker() as session:
        yield session


# Type aliases for injected objects
ApiSettings = Annotated[Settings, Depends(get_api_settings)]
DBSession = Annotated[AsyncSession, Depends(get_db_session)]


# -----------------------------------------------------------------------------
# Authentication Services
# -----------------------------------------------------------------------------


async def get_authentication_service(
    session: DBSession,
    jwt_service: JWTService = Depends(get_jwt_service),
    password_service: PasswordHashingService = Depends(get_password_service),
) -> AuthenticationService:
    """Get authentication service bound to the request's session."""
    return AuthenticationService(
        user_repository=UserRepositorySQLAlchemy(session),
        password_service=password_service,
        jwt_service=jwt_service,
    )


AuthService = Annotated[AuthenticationService, Depends(get_authentication_service)]


# -----------------------------------------------------------------------------
# Current User (authorization gate)
# -----------------------------------------------------------------------------


async def get_current_user(
    settings: ApiSettings,
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
    jwt_service: JWTService = Depends(get_jwt_service),
) -> UserContext:
    """
    Resolve the caller's identity from the ``Authorization: Bearer`` header.

    The token is trusted on its own: no user lookup is made, so a token
    stays usable until it expires.

    Returns
    -------
    UserContext for the authenticated user

    Raises
    ------
    UnauthorizedError
        If the header is missing or the token is invalid or expired
    """
    if credentials is None:
        raise UnauthorizedError("Unauthorized")

    try:
        payload = jwt_service.verify_token(credentials.credentials)
    except InvalidTokenError as e:
        logger.warning("Invalid token: %s", e)
        details = (
            {"reason": e.message, "ttl_seconds": jwt_service.ttl_seconds}
            if settings.api_debug
            else None
        )
        raise UnauthorizedError(
            "Invalid or expired token",
            code=ErrorCode.INVALID_TOKEN,
            details=details,
        ) from e

    return UserContext.from_token(payload)


CurrentUser = Annotated[UserContext, Depends(get_current_user)]


def get_repository_factory(
    session: DBSession,
    user: CurrentUser,
    settings: ApiSettings,
) -> SQLAlchemyRepositoryFactory:
    """Repositories scoped to the authenticated user."""
    return SQLAlchemyRepositoryFactory(
        session,
        user,
        enforce_todo_ownership=settings.enforce_todo_ownership,
    )


RepoFactory = Annotated[SQLAlchemyRepositoryFactory, Depends(get_repository_factory)]
