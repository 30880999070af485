"""Schemas for per-pet records, shared access and task extras."""
import uuid
from datetime import datetime, date
from typing import Optional

from pydantic import EmailStr, Field, field_validator

from petcare.models.enums import AccessRole, Mood
from petcare.schemas.common import CamelModel, not_blank


class PetRecordRead(CamelModel):
    id: uuid.UUID
    pet_id: uuid.UUID
    recorded_at: datetime


# Photos

class PetPhotoCreate(CamelModel):
    photo_url: str = Field(..., min_length=1, max_length=500)
    caption: Optional[str] = None


class PetPhotoRead(PetRecordRead):
    photo_url: str
    caption: Optional[str] = None


# Milestones

class PetMilestoneCreate(CamelModel):
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    milestone_date: date
    type: str = Field(..., min_length=1, max_length=50)

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return not_blank(v)


class PetMilestoneRead(PetRecordRead):
    title: str
    description: Optional[str] = None
    milestone_date: date
    type: str


# Weight

class PetWeightLogCreate(CamelModel):
    weight: float = Field(..., gt=0)
    notes: Optional[str] = None


class PetWeightLogRead(PetRecordRead):
    weight: float
    notes: Optional[str] = None


# Mood

class PetMoodLogCreate(CamelModel):
    mood: Mood
    notes: Optional[str] = None


class PetMoodLogRead(PetRecordRead):
    mood: Mood
    notes: Optional[str] = None


# Achievements

class PetAchievementCreate(CamelModel):
    type: str = Field(..., min_length=1, max_length=50)
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    icon: Optional[str] = Field(None, max_length=100)


class PetAchievementRead(PetRecordRead):
    type: str
    title: str
    description: Optional[str] = None
    icon: Optional[str] = None


# Shared access

class SharedAccessCreate(CamelModel):
    email: EmailStr
    role: AccessRole = Field(AccessRole.VIEWER, validate_default=True)


class SharedAccessRead(CamelModel):
    id: uuid.UUID
    pet_id: uuid.UUID
    user_id: uuid.UUID
    user_name: Optional[str] = None
    user_email: Optional[str] = None
    role: AccessRole
    created_at: datetime


# Task attachments and comments

class TaskAttachmentCreate(CamelModel):
    file_url: str = Field(..., min_length=1, max_length=500)
    file_name: str = Field(..., min_length=1, max_length=255)
    file_type: Optional[str] = Field(None, max_length=100)


class TaskAttachmentRead(CamelModel):
    id: uuid.UUID
    task_id: uuid.UUID
    file_url: str
    file_name: str
    file_type: Optional[str] = None
    created_at: datetime


class TaskCommentCreate(CamelModel):
    comment: str = Field(..., min_length=1)

    @field_validator("comment")
    @classmethod
    def validate_comment(cls, v: str) -> str:
        return not_blank(v)


class TaskCommentRead(CamelModel):
    id: uuid.UUID
    task_id: uuid.UUID
    user_id: uuid.UUID
    user_name: Optional[str] = None
    comment: str
    created_at: datetime
