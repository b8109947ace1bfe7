"""Root pytest configuration.

Test Structure:
    tests/
    ├── unit/              # Fast, isolated tests (mocks, no database)
    ├── integration/       # Repositories and API against SQLite
    │   ├── persistence/
    │   ├── security/
    │   └── api/
    └── e2e/               # Full user journeys through the HTTP API

Shared fixtures provide an in-memory SQLite engine with the schema
created, and a session bound to it.
"""

from pathlib import Path

import pytest
from dotenv import load_dotenv
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from todolist.infrastructure.persistence.sqlalchemy.models import Base
from todolist_config import clear_settings_cache

PROJECT_ROOT = Path(__file__).resolve().parents[1]

# Load .env.dev for tests (same as local development)
CONFIG_DIR = PROJECT_ROOT / "config"
if (CONFIG_DIR / ".env.dev").exists():
    load_dotenv(CONFIG_DIR / ".env.dev")
elif (CONFIG_DIR / ".env").exists():
    load_dotenv(CONFIG_DIR / ".env")


@pytest.fixture(autouse=True)
def _fresh_settings():
    """Settings are cached process-wide; never leak them between tests."""
    clear_settings_cache()
    yield
    clear_settings_cache()


@pytest.fixture
async def db_engine():
    """In-memory SQLite database with all tables created."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture
def session_maker(db_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_maker):
    async with session_maker() as session:
        yield session
