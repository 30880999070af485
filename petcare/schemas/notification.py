"""Notification and pet care tip schemas."""
import uuid
from datetime import datetime
from typing import Optional

from pydantic import Field

from petcare.models.enums import NotificationType
from petcare.schemas.common import CamelModel


class NotificationCreate(CamelModel):
    type: NotificationType
    title: str = Field(..., min_length=1, max_length=255)
    message: str = Field(..., min_length=1)
    related_id: Optional[str] = Field(None, max_length=64)


class NotificationRead(CamelModel):
    id: uuid.UUID
    type: NotificationType
    title: str
    message: str
    related_id: Optional[str] = None
    is_read: bool
    created_at: datetime


class MarkAllReadResponse(CamelModel):
    updated: int


class PetCareTipRead(CamelModel):
    id: int
    pet_type: str
    category: str
    title: str
    content: str
