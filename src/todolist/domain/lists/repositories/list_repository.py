"""List repository interface.

Implementations are user-scoped: every statement is filtered by the
current user's id, so a list owned by someone else behaves exactly like
a list that does not exist.
"""

from abc import ABC, abstractmethod
from typing import List, Optional

from todolist.domain.lists.entities import TodoList


class ListRepository(ABC):
    """Repository interface for the current user's lists."""

    @abstractmethod
    async def create(self, name: str) -> TodoList:
        """Create a list owned by the current user."""

    @abstractmethod
    async def update(self, list_id: int, name: str) -> int:
        """Rename a list. Returns the number of affected rows (0 or 1)."""

    @abstractmethod
    async def remove(self, list_id: int) -> int:
        """Delete a list. Returns the number of affected rows (0 or 1)."""

    @abstractmethod
    async def find_by_id(self, list_id: int) -> Optional[TodoList]:
        """Find one of the current user's lists by id."""

    @abstractmethod
    async def find_all(self) -> List[TodoList]:
        """All lists owned by the current user."""
