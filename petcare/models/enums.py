"""Enumerations shared by models, schemas and services."""
from enum import Enum


class PetType(str, Enum):
    DOG = "dog"
    CAT = "cat"
    BIRD = "bird"
    FISH = "fish"
    OTHER = "other"


class TaskType(str, Enum):
    FEEDING = "feeding"
    WALK = "walk"
    PLAY = "play"
    TREAT = "treat"
    MEDICATION = "medication"
    GROOMING = "grooming"
    VET = "vet"
    OTHER = "other"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


class RecurrencePattern(str, Enum):
    DAILY = "daily"
    WEEKLY = "weekly"
    MONTHLY = "monthly"


class TaskStatus(str, Enum):
    """Derived status; only ``completed_at`` is persisted."""
    PENDING = "pending"
    COMPLETED = "completed"
    OVERDUE = "overdue"


class Mood(str, Enum):
    GREAT = "great"
    GOOD = "good"
    OKAY = "okay"
    BAD = "bad"


class AccessRole(str, Enum):
    OWNER = "owner"
    CAREGIVER = "caregiver"
    VIEWER = "viewer"


class NotificationType(str, Enum):
    SUCCESS = "success"
    ERROR = "error"
    WARNING = "warning"
    INFO = "info"
    REMINDER = "reminder"
    ACHIEVEMENT = "achievement"
    BIRTHDAY = "birthday"
