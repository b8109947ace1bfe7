"""List and todo domain exceptions.

"Not found" and "owned by someone else" are reported the same way so
that callers cannot discover other users' data.
"""

from todolist.domain.shared.exceptions import EntityNotFoundError, ErrorCode


class ListNotFoundError(EntityNotFoundError):
    """List does not exist or is not owned by the caller."""

    def __init__(self, list_id: int | None = None, message: str = "List not found"):
        self.list_id = list_id
        super().__init__(
            message,
            code=ErrorCode.LIST_NOT_FOUND,
            details={"list_id": list_id},
        )


class TodoNotFoundError(EntityNotFoundError):
    """Todo does not exist or is not reachable by the caller."""

    def __init__(self, todo_id: int | None = None, message: str = "Todo not found"):
        self.todo_id = todo_id
        super().__init__(
            message,
            code=ErrorCode.TODO_NOT_FOUND,
            details={"todo_id": todo_id},
        )
