"""Shared access grants on pets."""
import uuid
from datetime import datetime
from typing import Optional

from fastapi_users_db_sqlalchemy.generics import GUID
from sqlalchemy import String, DateTime, ForeignKey, UniqueConstraint
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petcare.database import Base, utcnow


class SharedAccess(Base):
    """Grants a user other than the owner a role on a pet."""
    __tablename__ = "shared_access"
    __table_args__ = (
        UniqueConstraint("pet_id", "user_id", name="uq_shared_access_pet_user"),
    )

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
    user_id: Mapped[uuid.UUID] = mapped_column(
        GUID,
        ForeignKey("users.id", ondelete="CASCADE"),
        nullable=False,
        index=True
    )
    role: Mapped[str] = mapped_column(
        String(20),
        nullable=False
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False
    )

    user: Mapped["User"] = relationship(
        "User",
        lazy="selectin"
    )

    @property
    def user_name(self) -> Optional[str]:
        return self.user.name if self.user else None

    @property
    def user_email(self) -> Optional[str]:
        return self.user.email if self.user else None

    def __repr__(self) -> str:
        return f"<SharedAccess(pet_id={self.pet_id}, user_id={self.user_id}, role={self.role})>"
