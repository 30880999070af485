"""Attachments and comments on tasks."""
import uuid
from typing import List

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.models.task_extras import TaskAttachment, TaskComment
from petcare.schemas.pet_record import TaskAttachmentCreate, TaskCommentCreate
from petcare.services.access import READ_ROLES, WRITE_ROLES
from petcare.services.task_service import TaskService


class TaskExtrasService:
    """
    Listing requires read access to the task's pet; adding requires write
    access. Both raise NotFoundError otherwise.
    """

    def __init__(self, session: AsyncSession):
        self.session = session
        self.tasks = TaskService(session)

    async def list_attachments(self, user_id: uuid.UUID, task_id: uuid.UUID) -> List[TaskAttachment]:
        await self.tasks.get_task(user_id, task_id, READ_ROLES)
        result = await self.session.execute(
            select(TaskAttachment)
            .where(TaskAttachment.task_id == task_id)
            .order_by(TaskAttachment.created_at)
        )
        return list(result.scalars().all())

    async def add_attachment(
        self,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        data: TaskAttachmentCreate,
    ) -> TaskAttachment:
        await self.tasks.get_task(user_id, task_id, WRITE_ROLES)
        attachment = TaskAttachment(task_id=task_id, **data.model_dump())
        self.session.add(attachment)
        await self.session.commit()
        return attachment

    async def list_comments(self, user_id: uuid.UUID, task_id: uuid.UUID) -> List[TaskComment]:
        await self.tasks.get_task(user_id, task_id, READ_ROLES)
        result = await self.session.execute(
            select(TaskComment)
            .where(TaskComment.task_id == task_id)
            .order_by(TaskComment.created_at)
        )
        return list(result.scalars().all())

    async def add_comment(
        self,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        data: TaskCommentCreate,
    ) -> TaskComment:
        await self.tasks.get_task(user_id, task_id, WRITE_ROLES)
        comment = TaskComment(task_id=task_id, user_id=user_id, comment=data.comment)
        self.session.add(comment)
        await self.session.commit()
        await self.session.refresh(comment, ["user"])
        return comment
