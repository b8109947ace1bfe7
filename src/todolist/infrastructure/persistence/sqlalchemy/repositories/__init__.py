"""SQLAlchemy repository implementations."""

from todolist.infrastructure.persistence.sqlalchemy.repositories.factory import (
    SQLAlchemyRepositoryFactory,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories.lists import (
    ListRepositorySQLAlchemy,
    TodoRepositorySQLAlchemy,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories.user import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "ListRepositorySQLAlchemy",
    "SQLAlchemyRepositoryFactory",
    "TodoRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
