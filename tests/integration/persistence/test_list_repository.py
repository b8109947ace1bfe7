"""Integration tests for ListRepositorySQLAlchemy."""

import pytest

from todolist.infrastructure.persistence.sqlalchemy.repositories import (
    ListRepositorySQLAlchemy,
    TodoRepositorySQLAlchemy,
)

pytestmark = pytest.mark.integration


class TestListRepository:
    async def test_create_assigns_id_and_owner(self, db_session, user_a):
        repo = ListRepositorySQLAlchemy(db_session, user_a)

        created = await repo.create("Groceries")
        await db_session.commit()

        assert created.id is not None
        assert created.name == "Groceries"
        assert created.user_id == user_a.user_id
        assert created.created_at is not None

    async def test_find_all_returns_own_lists_in_creation_order(
        self,
        db_session,
        user_a,
    ):
        repo = ListRepositorySQLAlchemy(db_session, user_a)
        for name in ("One", "Two", "Three"):
            await repo.create(name)
        await db_session.commit()

        lists = await repo.find_all()

        assert [item.name for item in lists] == ["One", "Two", "Three"]

    async def test_update_renames_and_reports_one_row(self, db_session, user_a):
        repo = ListRepositorySQLAlchemy(db_session, user_a)
        created = await repo.create("Old")
        await db_session.commit()

        affected = await repo.update(created.id, "New")
        await db_session.commit()

        assert affected == 1
        found = await repo.find_by_id(created.id)
        assert found is not None
        assert found.name == "New"
        assert found.updated_at is not None
        assert found.created_at.tzinfo is not None
        assert found.updated_at.tzinfo is not None

    async def test_update_unknown_list_reports_zero(self, db_session, user_a):
        repo = ListRepositorySQLAlchemy(db_session, user_a)

        assert await repo.update(12345, "Nope") == 0

    async def test_remove_deletes_list_and_its_todos(self, db_session, user_a):
        lists = ListRepositorySQLAlchemy(db_session, user_a)
        todos = TodoRepositorySQLAlchemy(db_session, user_a)
        created = await lists.create("Doomed")
        todo = await todos.create("Item", created.id)
        await db_session.commit()

        affected = await lists.remove(created.id)
        await db_session.commit()

        assert affected == 1
        assert await lists.find_by_id(created.id) is None
        assert await todos.find_by_id(todo.id) is None

    async def test_remove_unknown_list_reports_zero(self, db_session, user_a):
        repo = ListRepositorySQLAlchemy(db_session, user_a)

        assert await repo.remove(12345) == 0
