"""Todo entity."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class Todo:
    """A single item inside a todo list."""

    id: int
    name: str
    list_id: int
    completed: bool
    created_at: datetime
    updated_at: datetime | None = None
