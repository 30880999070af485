"""Analytics response schemas."""
import uuid

from petcare.schemas.common import CamelModel


class TaskTypeAnalytics(CamelModel):
    type: str
    total: int
    completed: int
    completion_rate: int


class PetAnalytics(CamelModel):
    pet_id: uuid.UUID
    pet_name: str
    pet_type: str
    total_tasks: int
    completed_tasks: int
    overdue_tasks: int
    completion_rate: int
