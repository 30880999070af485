"""Pet model for managing pet records."""
import uuid
from datetime import datetime, date
from typing import Optional

from fastapi_users_db_sqlalchemy.generics import GUID
from sqlalchemy import String, Text, Float, Date, DateTime, ForeignKey, Integer
from sqlalchemy.orm import Mapped, mapped_column

from petcare.database import Base, utcnow


class Pet(Base):
    """
    Pet owned by exactly one user.

    Other users reach a pet only through a SharedAccess grant. Deleting a
    pet removes its tasks, task logs, grants and every pet record.
    """
    __tablename__ = "pets"

    # Primary key
    id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        primary_key=True,
        default=uuid.uuid4,
        nullable=False
    )

    # Foreign keys
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )

    # Basic information
    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    type: Mapped[str] = mapped_column(
        String(20),
        nullable=False
    )
    breed: Mapped[Optional[str]] = mapped_column(
        String(255),
        nullable=True
    )
    age: Mapped[Optional[int]] = mapped_column(
        Integer,
        nullable=True
    )
    weight: Mapped[Optional[float]] = mapped_column(
        Float,
        nullable=True
    )
    avatar: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True
    )

    # Extended profile
    favorite_toys: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    allergies: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    special_needs: Mapped[Optional[str]] = mapped_column(
        Text,
        nullable=True
    )
    adoption_date: Mapped[Optional[date]] = mapped_column(
        Date,
        nullable=True
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False,
        index=True
    )
    updated_at: Mapped[Optional[datetime]] = mapped_column(
        DateTime,
        onupdate=utcnow,
        nullable=True
    )

    def __repr__(self) -> str:
        return f"<Pet(id={self.id}, name={self.name}, user_id={self.user_id})>"
