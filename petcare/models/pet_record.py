"""Per-pet history records: photos, milestones, weight, mood and achievements."""
import uuid
from datetime import datetime, date
from typing import Optional

from fastapi_users_db_sqlalchemy.generics import GUID
from sqlalchemy import String, Text, Float, Date, DateTime, ForeignKey
from sqlalchemy.orm import Mapped, mapped_column

from petcare.database import Base, utcnow


class PetRecordMixin:
    """Columns every pet record carries. ``recorded_at`` orders listings."""

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
    recorded_at: Mapped[datetime] = mapped_column(
        DateTime,
        default=utcnow,
        nullable=False
    )


class PetPhoto(PetRecordMixin, Base):
    __tablename__ = "pet_photos"

    photo_url: Mapped[str] = mapped_column(String(500), nullable=False)
    caption: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class PetMilestone(PetRecordMixin, Base):
    __tablename__ = "pet_milestones"

    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    milestone_date: Mapped[date] = mapped_column(Date, nullable=False)
    type: Mapped[str] = mapped_column(String(50), nullable=False)


class PetWeightLog(PetRecordMixin, Base):
    __tablename__ = "pet_weight_logs"

    weight: Mapped[float] = mapped_column(Float, nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class PetMoodLog(PetRecordMixin, Base):
    __tablename__ = "pet_mood_logs"

    mood: Mapped[str] = mapped_column(String(10), nullable=False)
    notes: Mapped[Optional[str]] = mapped_column(Text, nullable=True)


class PetAchievement(PetRecordMixin, Base):
    __tablename__ = "pet_achievements"

    type: Mapped[str] = mapped_column(String(50), nullable=False)
    title: Mapped[str] = mapped_column(String(255), nullable=False)
    description: Mapped[Optional[str]] = mapped_column(Text, nullable=True)
    icon: Mapped[Optional[str]] = mapped_column(String(100), nullable=True)


PET_RECORD_MODELS = (PetPhoto, PetMilestone, PetWeightLog, PetMoodLog, PetAchievement)
