"""Task model for scheduled care activities."""
import uuid
from datetime import datetime
from typing import Optional

from fastapi_users_db_sqlalchemy.generics import GUID
from sqlalchemy import String, Text, Boolean, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.database import Base, utcnow
from petcare.models.enums import TaskPriority, TaskStatus


class Task(Base):
    """
    A care task scheduled for a pet.

    ``completed_at`` is the only persisted status: it is set once by task
    completion and never cleared. Overdue is computed on read.
    """
    __tablename__ = "tasks"

    id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )
    pet_id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        ForeignKey("pets.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    title: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    description: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False,
        index=True
    )
    priority: Mapped[str] = mapped_column(
        String(10),
        default=TaskPriority.MEDIUM.value,
        nullable=False
    )
    scheduled_time: Mapped[datetime] = mapped_column(
        DateTime,
        nullable=False,
        index=True
    )
    completed_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        nullable=True
    )

    # Recurrence is descriptive only; no occurrences are generated
    is_recurring: Mapped[bool] = mapped_column(
        Boolean,
        default=False,
        nullable=False
    )
    recurrence_pattern: Mapped[Optional[str]] = mapped_column(
        String(10),
        nullable=True
    )
    notes: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        onupdate=utcnow,
        nullable=True
    )

    # Relationships
    pet: Mapped["Pet"] = relationship(
        "Pet",
        lazy="selectin"
    )

    @property
    def pet_name(self) -> Optional[str]:
        return self.pet.name if self.pet else None

    @property
    def pet_type(self) -> Optional[str]:
        return self.pet.type if self.pet else None

    @property
    def status(self) -> str:
        if self.completed_at is not None:
            return TaskStatus.COMPLETED.value
        if self.scheduled_time < utcnow():
            return TaskStatus.OVERDUE.value
        return TaskStatus.PENDING.value

    def __repr__(self) -> str:
        return f"<Task(id={self.id}, title={self.title}, pet_id={self.pet_id})>"
