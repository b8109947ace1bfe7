from todolist.domain.lists.repositories.list_repository import ListRepository
from todolist.domain.lists.repositories.todo_repository import TodoRepository

__all__ = ["ListRepository", "TodoRepository"]
