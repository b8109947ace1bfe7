"""SQLAlchemy model for Todo entity."""

from sqlalchemy import Boolean, ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from todolist.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class TodoModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting todos."""

    __tablename__ = "todos"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    list_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("lists.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    completed: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<TodoModel(id={self.id}, name={self.name}, list_id={self.list_id}, "
            f"completed={self.completed})>"
        )
