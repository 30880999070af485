"""Task log routes."""
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user
from petcare.models.task_log import TaskLog
from petcare.models.user import User
from petcare.schemas.task import TaskLogRead
from petcare.services.task_log_service import TaskLogService


router = APIRouter(prefix="/api/task-logs", tags=["task-logs"])


@router.get("", response_model=List[TaskLogRead])
async def list_task_logs(
    pet_id: Optional[uuid.UUID] = Query(None, alias="petId"),
    task_id: Optional[uuid.UUID] = Query(None, alias="taskId"),
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[TaskLog]:
    """Completion history, most recent first, optionally for one pet or task."""
    return await TaskLogService(session).list_task_logs(
        user.id, pet_id=pet_id, task_id=task_id
    )
