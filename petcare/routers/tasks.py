"""
Tasks router.

Tasks belong to a pet; every endpoint is filtered by the caller's access
to that pet. Completing a task also writes its task log entry.
"""
import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user
from petcare.models.enums import TaskPriority, TaskType
from petcare.models.task import Task
from petcare.models.task_extras import TaskAttachment, TaskComment
from petcare.models.user import User
from petcare.schemas.pet_record import (
    TaskAttachmentCreate,
    TaskAttachmentRead,
    TaskCommentCreate,
    TaskCommentRead,
)
from petcare.schemas.task import TaskCompletion, TaskCreate, TaskRead, TaskUpdate
from petcare.services.task_extras_service import TaskExtrasService
from petcare.services.task_service import TaskService


router = APIRouter(
    prefix="/api/tasks",
    tags=["tasks"],
    responses={
        401: {"description": "Not authenticated"},
        404: {"description": "Task not found"},
    }
)


@router.get("", response_model=List[TaskRead])
async def list_tasks(
    pet_id: Optional[uuid.UUID] = Query(None, alias="petId"),
    day: Optional[date] = Query(None, alias="date"),
    priority: Optional[TaskPriority] = None,
    task_type: Optional[TaskType] = Query(None, alias="type"),
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[Task]:
    """
    List tasks ordered by scheduled time.

    **Filters:**
    - petId: only tasks of this pet
    - date: only tasks scheduled on this calendar day (YYYY-MM-DD)
    - priority: low, medium or high
    - type: feeding, walk, play, treat, medication, grooming, vet or other
    """
    return await TaskService(session).list_tasks(
        user.id,
        pet_id=pet_id,
        day=day,
        priority=priority.value if priority else None,
        task_type=task_type.value if task_type else None,
    )


@router.post("", response_model=TaskRead, status_code=status.HTTP_201_CREATED)
async def create_task(
    task_data: TaskCreate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Task:
    """
    Schedule a task for a pet.

    **Example:**
    ```json
    {
        "petId": "2f1c...",
        "title": "Morning walk",
        "type": "walk",
        "scheduledTime": "2024-05-01T08:00:00Z",
        "isRecurring": true,
        "recurrencePattern": "daily"
    }
    ```
    """
    return await TaskService(session).create_task(user.id, task_data)


@router.get("/{task_id}", response_model=TaskRead)
async def get_task(
    task_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Task:
    return await TaskService(session).get_task(user.id, task_id)


@router.put("/{task_id}", response_model=TaskRead)
async def update_task(
    task_id: uuid.UUID,
    task_data: TaskUpdate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Task:
    """Update the fields present in the body. Completion is not editable here."""
    return await TaskService(session).update_task(user.id, task_id, task_data)


@router.delete("/{task_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_task(
    task_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Response:
    await TaskService(session).delete_task(user.id, task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.post("/{task_id}/complete", response_model=TaskRead)
async def complete_task(
    task_id: uuid.UUID,
    completion: Optional[TaskCompletion] = None,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Task:
    """
    Mark a task completed and record a task log entry.

    The body is optional; it may carry notes, duration (minutes), quantity
    and mood. Returns 409 when the task is already completed.
    """
    return await TaskService(session).complete_task(
        user.id, task_id, completion or TaskCompletion()
    )


@router.get("/{task_id}/attachments", response_model=List[TaskAttachmentRead])
async def list_attachments(
    task_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[TaskAttachment]:
    return await TaskExtrasService(session).list_attachments(user.id, task_id)


@router.post(
    "/{task_id}/attachments",
    response_model=TaskAttachmentRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_attachment(
    task_id: uuid.UUID,
    data: TaskAttachmentCreate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> TaskAttachment:
    return await TaskExtrasService(session).add_attachment(user.id, task_id, data)


@router.get("/{task_id}/comments", response_model=List[TaskCommentRead])
async def list_comments(
    task_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[TaskComment]:
    return await TaskExtrasService(session).list_comments(user.id, task_id)


@router.post(
    "/{task_id}/comments",
    response_model=TaskCommentRead,
    status_code=status.HTTP_201_CREATED,
)
async def add_comment(
    task_id: uuid.UUID,
    data: TaskCommentCreate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> TaskComment:
    return await TaskExtrasService(session).add_comment(user.id, task_id, data)
