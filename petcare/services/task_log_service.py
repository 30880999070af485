"""Read access to the completion history."""
import uuid
from typing import List, Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.models.pet import Pet
from petcare.models.task_log import TaskLog
from petcare.services.access import pet_access_clause


class TaskLogService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_task_logs(
        self,
        user_id: uuid.UUID,
        pet_id: Optional[uuid.UUID] = None,
        task_id: Optional[uuid.UUID] = None,
    ) -> List[TaskLog]:
        """Logs on accessible pets, most recent completion first."""
        stmt = (
            select(TaskLog)
            .join(Pet, TaskLog.pet_id == Pet.id)
            .where(pet_access_clause(user_id))
        )
        if pet_id is not None:
            stmt = stmt.where(TaskLog.pet_id == pet_id)
        if task_id is not None:
            stmt = stmt.where(TaskLog.task_id == task_id)
        stmt = stmt.order_by(TaskLog.completed_at.desc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())
