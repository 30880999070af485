"""Task log model: the audit record written by task completion."""
import uuid
from datetime import datetime
from typing import Optional

from fastapi_users_db_sqlalchemy.generics import GUID
from sqlalchemy import String, Text, Float, Integer, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.database import Base


class TaskLog(Base):
    """
    One row per completion of a task. Rows are never updated.

    ``pet_id`` duplicates ``tasks.pet_id`` so history can be filtered by pet
    without a join.
    """
    __tablename__ = "task_logs"

    id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )
    task_id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        ForeignKey("tasks.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    pet_id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    user_id: Mapped[Optional[uuid.UUID]] = mapped_column(
        GUID,
        ForeignKey("users.id", ondelete="SET NULL"),
        nullable=True
    )

    completed_at: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    duration: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True
    )
    quantity: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True
    )
    mood: Mapped[Optional[str]] = mapped_column(
        String(10),
        nullable=True
    )

    # Relationships
    task: Mapped["Task"] = relationship(
        "Task",
        lazy="selectin"
    )
    pet: Mapped["Pet"] = relationship(
        "Pet",
        lazy="selectin"
    )

    @property
    def task_title(self) -> Optional[str]:
        return self.task.title if self.task else None

    @property
    def task_type(self) -> Optional[str]:
        return self.task.type if self.task else None

    @property
    def pet_name(self) -> Optional[str]:
        return self.pet.name if self.pet else None

    @property
    def pet_type(self) -> Optional[str]:
        return self.pet.type if self.pet else None

    def __repr__(self) -> str:
        return f"<TaskLog(id={self.id}, task_id={self.task_id})>"
