"""Fixtures for cross-user isolation tests."""

import pytest

from todolist.application.context import UserContext
from todolist.domain.user import User
from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    SQLAlchemyRepositoryFactory,
    UserRepositorySQLAlchemy,
)


async def _register(session, name: str, email: str) -> UserContext:
    user = await UserRepositorySQLAlchemy(session).save(
        User.create(name=name, email=email, password_hash="digest"),
    )
    await session.commit()
    return UserContext.create(user)


@pytest.fixture
async def alice(db_session) -> UserContext:
    return await _register(db_session, "Alice", "alice@test.it")


@pytest.fixture
async def bob(db_session) -> UserContext:
    return await _register(db_session, "Bob", "bob@test.it")


@pytest.fixture
def repos_for(db_session):
    """Build a repository factory for a user, optionally without todo checks."""

    def _factory(user: UserContext, enforce: bool = True):
        return SQLAlchemyRepositoryFactory(
            db_session,
            user,
            enforce_todo_ownership=enforce,
        )

    return _factory
