"""Completion statistics per task type and per pet."""
import math
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import and_, case, func, select
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import utcnow
from petcare.models.pet import Pet
from petcare.models.task import Task
from petcare.schemas.analytics import PetAnalytics, TaskTypeAnalytics
from petcare.services.access import pet_access_clause


def completion_rate(total: int, completed: int) -> int:
    """Percentage of completed tasks rounded half up; 0 when there are no tasks."""
    if total <= 0:
        return 0
    return int(math.floor(completed * 100 / total + 0.5))


class AnalyticsService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def task_analytics(
        self,
        user_id: uuid.UUID,
        start_date: Optional[date] = None,
        end_date: Optional[date] = None,
        pet_id: Optional[uuid.UUID] = None,
    ) -> List[TaskTypeAnalytics]:
        """
        Totals grouped by task type over accessible pets.

        Date bounds are inclusive and apply to the scheduled day. Types
        without any task in range are left out.
        """
        stmt = (
            select(Task.type, func.count(Task.id), func.count(Task.completed_at))
            .join(Pet, Task.pet_id == Pet.id)
            .where(pet_access_clause(user_id))
        )
        if start_date is not None:
            stmt = stmt.where(func.date(Task.scheduled_time) >= start_date.isoformat())
        if end_date is not None:
            stmt = stmt.where(func.date(Task.scheduled_time) <= end_date.isoformat())
        if pet_id is not None:
            stmt = stmt.where(Task.pet_id == pet_id)
        stmt = stmt.group_by(Task.type).order_by(Task.type)

        result = await self.session.execute(stmt)
        return [
            TaskTypeAnalytics(
                type=task_type,
                total=total,
                completed=completed,
                completion_rate=completion_rate(total, completed),
            )
            for task_type, total, completed in result.all()
        ]

    async def pet_analytics(
        self,
        user_id: uuid.UUID,
        pet_id: Optional[uuid.UUID] = None,
    ) -> List[PetAnalytics]:
        """Per-pet totals; pets without tasks are included with zeros."""
        overdue = func.sum(
            case(
                (and_(Task.completed_at.is_(None), Task.scheduled_time < utcnow()), 1),
                else_=0,
            )
        )
        stmt = (
            select(
                Pet.id,
                Pet.name,
                Pet.type,
                func.count(Task.id),
                func.count(Task.completed_at),
                overdue,
            )
            .outerjoin(Task, Task.pet_id == Pet.id)
            .where(pet_access_clause(user_id))
        )
        if pet_id is not None:
            stmt = stmt.where(Pet.id == pet_id)
        stmt = stmt.group_by(Pet.id, Pet.name, Pet.type).order_by(Pet.name)

        result = await self.session.execute(stmt)
        return [
            PetAnalytics(
                pet_id=row_pet_id,
                pet_name=name,
                pet_type=pet_type,
                total_tasks=total,
                completed_tasks=completed,
                overdue_tasks=overdue_count or 0,
                completion_rate=completion_rate(total, completed),
            )
            for row_pet_id, name, pet_type, total, completed, overdue_count in result.all()
        ]
