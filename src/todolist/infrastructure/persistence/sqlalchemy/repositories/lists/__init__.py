from todolist.infrastructure.persistence.sqlalchemy.repositories.lists.list_repository import (  # NOQA: E501
    ListRepositorySQLAlchemy,
)
from todolist.infrastructure.persistence.sqlalchemy.repositories.lists.todo_repository import (  # NOQA: E501
    TodoRepositorySQLAlchemy,
)

__all__ = ["ListRepositorySQLAlchemy", "TodoRepositorySQLAlchemy"]
