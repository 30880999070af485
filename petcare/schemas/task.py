"""Task, task log and analytics schemas."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field, field_validator

from petcare.models.enums import (
    Mood,
    RecurrencePattern,
    TaskPriority,
    TaskStatus,
    TaskType,
)
from petcare.schemas.common import CamelModel, not_blank, to_naive_utc


class TaskCreate(CamelModel):
    """Schema for creating a task. ``completed_at`` is never accepted."""
    pet_id: uuid.UUID
    title: str = Field(..., min_length=1, max_length=255)
    description: Optional[str] = None
    type: TaskType
    priority: TaskPriority = Field(TaskPriority.MEDIUM, validate_default=True)
    scheduled_time: datetime
    is_recurring: bool = False
    recurrence_pattern: Optional[RecurrencePattern] = None
    notes: Optional[str] = None

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("scheduled_time")
    @classmethod
    def normalize_scheduled_time(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class TaskUpdate(CamelModel):
    """
    Schema for updating a task. Only provided fields are changed.

    Completion state is managed by the complete endpoint, so
    ``completedAt`` is ignored here.
    """
    title: Optional[str] = Field(None, min_length=1, max_length=255)
    description: Optional[str] = None
    type: Optional[TaskType] = None
    priority: Optional[TaskPriority] = None
    scheduled_time: Optional[datetime] = None
    is_recurring: Optional[bool] = None
    recurrence_pattern: Optional[RecurrencePattern] = None
    notes: Optional[str] = None

    @field_validator("title", "type", "priority", "scheduled_time", "is_recurring")
    @classmethod
    def validate_not_null(cls, v):
        if v is None:
            raise ValueError("cannot be null")
        return v

    @field_validator("title")
    @classmethod
    def validate_title(cls, v: str) -> str:
        return not_blank(v)

    @field_validator("scheduled_time")
    @classmethod
    def normalize_scheduled_time(cls, v: datetime) -> datetime:
        return to_naive_utc(v)


class TaskRead(CamelModel):
    id: uuid.UUID
    pet_id: uuid.UUID
    pet_name: Optional[str] = None
    pet_type: Optional[str] = None
    title: str
    description: Optional[str] = None
    type: TaskType
    priority: TaskPriority
    scheduled_time: datetime
    completed_at: Optional[datetime] = None
    is_recurring: bool
    recurrence_pattern: Optional[RecurrencePattern] = None
    notes: Optional[str] = None
    status: TaskStatus
    created_at: datetime
    updated_at: Optional[datetime] = None


class TaskCompletion(CamelModel):
    """Outcome recorded in the task log when a task is completed."""
    notes: Optional[str] = None
    duration: Optional[int] = Field(None, ge=0, description="Minutes spent")
    quantity: Optional[float] = Field(None, ge=0)
    mood: Optional[Mood] = None


class TaskLogRead(CamelModel):
    id: uuid.UUID
    task_id: uuid.UUID
    pet_id: uuid.UUID
    user_id: Optional[uuid.UUID] = None
    task_title: Optional[str] = None
    task_type: Optional[str] = None
    pet_name: Optional[str] = None
    pet_type: Optional[str] = None
    completed_at: datetime
    notes: Optional[str] = None
    duration: Optional[int] = None
    quantity: Optional[float] = None
    mood: Optional[Mood] = None
