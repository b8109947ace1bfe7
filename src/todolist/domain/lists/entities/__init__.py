from todolist.domain.lists.entities.todo import Todo
from todolist.domain.lists.entities.todo_list import TodoList

__all__ = ["Todo", "TodoList"]
