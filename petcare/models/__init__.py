"""SQLAlchemy models for the application."""
from petcare.models.user import User
from petcare.models.pet import Pet
from petcare.models.task import Task
from petcare.models.task_log import TaskLog
from petcare.models.shared_access import SharedAccess
from petcare.models.pet_record import (
    PetPhoto,
    PetMilestone,
    PetWeightLog,
    PetMoodLog,
    PetAchievement,
    PET_RECORD_MODELS,
)
from petcare.models.task_extras import TaskAttachment, TaskComment
from petcare.models.notification import Notification, PetCareTip

__all__ = [
    "User",
    "Pet",
    "Task",
    "TaskLog",
    "SharedAccess",
    "PetPhoto",
    "PetMilestone",
    "PetWeightLog",
    "PetMoodLog",
    "PetAchievement",
    "PET_RECORD_MODELS",
    "TaskAttachment",
    "TaskComment",
    "Notification",
    "PetCareTip",
]
