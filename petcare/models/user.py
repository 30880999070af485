"""User model for authentication and user management."""
from datetime import datetime
from typing import Optional

from fastapi_users.db import SQLAlchemyBaseUserTableUUID
from sqlalchemy import String, DateTime, JSON
from sqlalchemy.orm import Mapped, mapped_column

from petcare.database import Base, utcnow


class User(SQLAlchemyBaseUserTableUUID, Base):
    """
    User model extending fastapi-users base user table.

    fastapi-users contributes id, email, hashed_password and the
    is_active / is_superuser / is_verified flags. The password hash is
    never part of any response schema.
    """
    __tablename__ = "users"

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False
    )
    avatar: Mapped[Optional[str]] = mapped_column(
        String(500),
        nullable=True
    )
    # Stored as the JSON dump of schemas.user.UserPreferences
    preferences: Mapped[Optional[dict]] = mapped_column(
        JSON,
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

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email={self.email})>"
