"""SQLAlchemy models for persistence layer."""

from todolist.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from todolist.infrastructure.persistence.sqlalchemy.models.list_model import ListModel
from todolist.infrastructure.persistence.sqlalchemy.models.todo_model import TodoModel
from todolist.infrastructure.persistence.sqlalchemy.models.user_model import UserModel

__all__ = [
    "Base",
    "ListModel",
    "TimestampMixin",
    "TodoModel",
    "UserModel",
]
