"""TodoList entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TodoList:
    """A named container of todos, owned by exactly one user."""

    id: int
    name: str
    user_id: int
    created_at: datetime
    updated_at: datetime | None = None
