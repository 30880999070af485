"""Pydantic schemas for request/response validation."""
from petcare.schemas.common import CamelModel, MessageResponse
from petcare.schemas.user import (
    UserRead,
    UserCreate,
    RegisterRequest,
    LoginRequest,
    AuthResponse,
    TokenIdentity,
    ProfileUpdate,
    PasswordChange,
    UserPreferences,
    PreferencesUpdate,
)
from petcare.schemas.pet import PetBase, PetCreate, PetUpdate, PetRead
from petcare.schemas.task import (
    TaskCreate,
    TaskUpdate,
    TaskRead,
    TaskCompletion,
    TaskLogRead,
)
from petcare.schemas.analytics import TaskTypeAnalytics, PetAnalytics
from petcare.schemas.notification import (
    NotificationCreate,
    NotificationRead,
    MarkAllReadResponse,
    PetCareTipRead,
)

__all__ = [
    "CamelModel",
    "MessageResponse",
    # User schemas
    "UserRead",
    "UserCreate",
    "RegisterRequest",
    "LoginRequest",
    "AuthResponse",
    "TokenIdentity",
    "ProfileUpdate",
    "PasswordChange",
    "UserPreferences",
    "PreferencesUpdate",
    # Pet schemas
    "PetBase",
    "PetCreate",
    "PetUpdate",
    "PetRead",
    # Task schemas
    "TaskCreate",
    "TaskUpdate",
    "TaskRead",
    "TaskCompletion",
    "TaskLogRead",
    # Analytics schemas
    "TaskTypeAnalytics",
    "PetAnalytics",
    # Notification schemas
    "NotificationCreate",
    "NotificationRead",
    "MarkAllReadResponse",
    "PetCareTipRead",
]
