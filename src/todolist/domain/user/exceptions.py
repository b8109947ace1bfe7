"""User domain exceptions."""

from todolist.domain.shared.exceptions import ConflictError, ErrorCode


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email is already registered",
            code=ErrorCode.EMAIL_ALREADY_REGISTERED,
            details={"email": email},
        )
