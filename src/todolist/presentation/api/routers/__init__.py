"""API routers."""

from todolist.presentation.api.routers.auth import router as auth_router
from todolist.presentation.api.routers.lists import router as lists_router
from todolist.presentation.api.routers.todos import router as todos_router

__all__ = ["auth_router", "lists_router", "todos_router"]
