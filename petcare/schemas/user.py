"""User, auth and preference schemas for API request/response validation."""
import uuid
from datetime import datetime
from typing import List, Literal, Optional

from fastapi_users import schemas
from pydantic import EmailStr, Field, field_validator

from petcare.schemas.common import CamelModel, StrictCamelModel, not_blank


MIN_PASSWORD_LENGTH = 6


class UserRead(CamelModel):
    """Public view of a user. The password hash is never included."""
    id: uuid.UUID
    name: str
    email: str
    avatar: Optional[str] = None
    created_at: Optional[datetime] = None


class UserCreate(schemas.BaseUserCreate):
    """Schema handed to the fastapi-users manager when creating a user."""
    name: str


class RegisterRequest(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return not_blank(v)


class LoginRequest(CamelModel):
    email: EmailStr
    password: str = Field(..., min_length=1)


class AuthResponse(CamelModel):
    token: str
    user: UserRead


class TokenIdentity(CamelModel):
    """Identity carried by a verified access token."""
    user_id: uuid.UUID
    email: str


class ProfileUpdate(CamelModel):
    name: str = Field(..., min_length=1, max_length=255)
    email: EmailStr
    avatar: Optional[str] = Field(None, max_length=500)

    @field_validator("name")
    @classmethod
    def validate_name(cls, v: str) -> str:
        return not_blank(v)


class PasswordChange(CamelModel):
    current_password: str = Field(..., min_length=1)
    new_password: str = Field(..., min_length=MIN_PASSWORD_LENGTH, max_length=128)


# Preferences

PREFERENCES_VERSION = 1

DashboardWidget = Literal["tasks", "pets", "analytics", "notifications", "tips"]


class NotificationPreferences(StrictCamelModel):
    email: bool = True
    push: bool = True
    reminders: bool = True


class DashboardPreferences(StrictCamelModel):
    widgets: List[DashboardWidget] = Field(
        default_factory=lambda: ["tasks", "pets", "analytics"]
    )
    layout: Literal["default", "compact"] = "default"

    @field_validator("widgets")
    @classmethod
    def dedupe_widgets(cls, v: List[str]) -> List[str]:
        return list(dict.fromkeys(v))


class UserPreferences(StrictCamelModel):
    """
    Versioned user preferences document.

    Stored as JSON on the user row; anything missing takes its default and
    unknown keys are rejected.
    """
    version: Literal[1] = PREFERENCES_VERSION
    theme: Literal["light", "dark"] = "light"
    notifications: NotificationPreferences = Field(default_factory=NotificationPreferences)
    dashboard: DashboardPreferences = Field(default_factory=DashboardPreferences)


class PreferencesUpdate(StrictCamelModel):
    preferences: UserPreferences
