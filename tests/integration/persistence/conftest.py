"""Fixtures for repository integration tests."""

import pytest

from todolist.application.context import UserContext
from todolist.domain.user import User
from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    UserRepositorySQLAlchemy,
)


async def create_user(session, name: str, email: str) -> UserContext:
    user = await UserRepositorySQLAlchemy(session).save(
        User.create(name=name, email=email, password_hash="digest"),
    )
    await session.commit()
    return UserContext.create(user)


@pytest.fixture
async def user_a(db_session) -> UserContext:
    return await create_user(db_session, "Alice", "alice@test.it")


@pytest.fixture
async def user_b(db_session) -> UserContext:
    return await create_user(db_session, "Bob", "bob@test.it")
