"""SQLAlchemy model for TodoList entity."""

from sqlalchemy import ForeignKey, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from todolist.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


class ListModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting todo lists."""

    __tablename__ = "lists"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)

    # User ownership
    user_id: Mapped[int] = mapped_column(
        Integer,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )

    def __repr__(self) -> str:
        return f"<ListModel(id={self.id}, name={self.name}, user_id={self.user_id})>"
