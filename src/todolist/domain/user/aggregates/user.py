"""User aggregate for identity concerns only."""

from datetime import datetime

from todolist.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    Holds the identity record and the password digest. The id is assigned
    by the store on first save and never changes afterwards. The digest is
    kept out of ``repr`` and is never part of any API response.
    """

    def __init__(
        self,
        name: str,
        email: str,
        password_hash: str,
        id: int | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id
        self._name = name
        self._email = email.strip()
        self._password_hash = password_hash
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> int | None:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def is_persisted(self) -> bool:
        return self._id is not None

    def assign_id(self, user_id: int) -> None:
        if self._id is not None and self._id != user_id:
            msg = f"User already has id {self._id}"
            raise ValueError(msg)
        self._id = user_id

    @classmethod
    def create(cls, name: str, email: str, password_hash: str) -> "User":
        return cls(name=name, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: int,
        name: str,
        email: str,
        password_hash: str,
        created_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id) if self._id is not None else id(self)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
