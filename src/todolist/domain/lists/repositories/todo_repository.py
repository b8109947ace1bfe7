"""Todo repository interface."""

from abc import ABC, abstractmethod
from typing import List, Optional

from todolist.domain.lists.entities import Todo


class TodoRepository(ABC):
    """Repository interface for todos.

    Whether lookups resolve the owning list's user depends on the
    implementation's ownership mode.
    """

    @abstractmethod
    async def create(self, name: str, list_id: int, completed: bool = False) -> Todo:
        """Create a todo inside a list.

        Raises
        ------
        ListNotFoundError
            If ownership is enforced and the list is not the caller's
        """

    @abstractmethod
    async def update(
        self,
        todo_id: int,
        *,
        name: str | None = None,
        completed: bool | None = None,
        list_id: int | None = None,
    ) -> int:
        """Apply the given changes. Returns the number of affected rows."""

    @abstractmethod
    async def remove(self, todo_id: int) -> int:
        """Delete a todo. Returns the number of affected rows."""

    @abstractmethod
    async def find_by_id(self, todo_id: int) -> Optional[Todo]:
        """Find a todo by id."""

    @abstractmethod
    async def find_all_by_list_id(self, list_id: int) -> List[Todo]:
        """All todos in a list."""
