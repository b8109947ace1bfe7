"""Lists domain - user-owned todo lists and their items."""

from todolist.domain.lists.entities import Todo, TodoList
from todolist.domain.lists.exceptions import ListNotFoundError, TodoNotFoundError
from todolist.domain.lists.repositories import ListRepository, TodoRepository

__all__ = [
    "ListNotFoundError",
    "ListRepository",
    "Todo",
    "TodoList",
    "TodoNotFoundError",
    "TodoRepository",
]
