"""Task scheduling and completion."""
import logging
import uuid
from datetime import date
from typing import List, Optional

from sqlalchemy import delete, func, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import utcnow
from petcare.errors import ConflictError, NotFoundError, ValidationError
from petcare.models.pet import Pet
from petcare.models.task import Task
from petcare.models.task_extras import TaskAttachment, TaskComment
from petcare.models.task_log import TaskLog
from petcare.schemas.task import TaskCompletion, TaskCreate, TaskUpdate
from petcare.services.access import (
    READ_ROLES,
    WRITE_ROLES,
    accessible_pet_ids,
    get_accessible_pet,
    pet_access_clause,
)


logger = logging.getLogger(__name__)


def check_recurrence(is_recurring: bool, recurrence_pattern: Optional[str]) -> Optional[str]:
    """
    Return the pattern to store for a task.

    A recurring task needs a pattern; a one-off task never keeps one.

    Raises:
        ValidationError: If the task recurs without a pattern
    """
    if not is_recurring:
        return None
    if recurrence_pattern is None:
        raise ValidationError(
            "Recurring tasks require a recurrence pattern",
            field="recurrencePattern",
        )
    return recurrence_pattern


class TaskService:
    """Tasks are reachable through the pet they belong to."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_tasks(
        self,
        user_id: uuid.UUID,
        pet_id: Optional[uuid.UUID] = None,
        day: Optional[date] = None,
        priority: Optional[str] = None,
        task_type: Optional[str] = None,
    ) -> List[Task]:
        """Tasks on accessible pets matching every given filter, earliest first."""
        stmt = (
            select(Task)
            .join(Pet, Task.pet_id == Pet.id)
            .where(pet_access_clause(user_id))
        )
        if pet_id is not None:
            stmt = stmt.where(Task.pet_id == pet_id)
        if day is not None:
            stmt = stmt.where(func.date(Task.scheduled_time) == day.isoformat())
        if priority is not None:
            stmt = stmt.where(Task.priority == priority)
        if task_type is not None:
            stmt = stmt.where(Task.type == task_type)
        stmt = stmt.order_by(Task.scheduled_time.asc())

        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def get_task(
        self,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        roles=READ_ROLES,
    ) -> Task:
        """
        Raises:
            NotFoundError: If the task is missing or its pet is not accessible
        """
        stmt = (
            select(Task)
            .join(Pet, Task.pet_id == Pet.id)
            .where(Task.id == task_id, pet_access_clause(user_id, roles))
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        task = result.scalar_one_or_none()
        if task is None:
            raise NotFoundError("Task not found")
        return task

    async def create_task(self, user_id: uuid.UUID, data: TaskCreate) -> Task:
        """
        Raises:
            NotFoundError: If the pet is missing or not writable by the user
            ValidationError: If the recurrence settings are inconsistent
        """
        await get_accessible_pet(self.session, user_id, data.pet_id, WRITE_ROLES)

        values = data.model_dump()
        values["recurrence_pattern"] = check_recurrence(
            values["is_recurring"], values["recurrence_pattern"]
        )
        task = Task(**values)
        self.session.add(task)
        try:
            await self.session.commit()
        except IntegrityError:
            # Pet removed between the access check and the insert
            await self.session.rollback()
            raise NotFoundError("Pet not found")

        logger.info(f"Task {task.id} created on pet {task.pet_id}")
        return await self.get_task(user_id, task.id)

    async def update_task(
        self,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        data: TaskUpdate,
    ) -> Task:
        """
        Apply the supplied fields only.

        Raises:
            NotFoundError: If the task is missing or not writable by the user
            ValidationError: If the resulting recurrence settings are inconsistent
        """
        values = data.model_dump(exclude_unset=True)
        if "is_recurring" in values or "recurrence_pattern" in values:
            current = await self.get_task(user_id, task_id, WRITE_ROLES)
            if (
                values.get("recurrence_pattern") is not None
                and "is_recurring" not in values
                and not current.is_recurring
            ):
                raise ValidationError(
                    "Set isRecurring to give the task a recurrence pattern",
                    field="recurrencePattern",
                )
            values["recurrence_pattern"] = check_recurrence(
                values.get("is_recurring", current.is_recurring),
                values.get("recurrence_pattern", current.recurrence_pattern),
            )
        values["updated_at"] = utcnow()

        stmt = (
            update(Task)
            .where(
                Task.id == task_id,
                Task.pet_id.in_(accessible_pet_ids(user_id, WRITE_ROLES)),
            )
            .values(**values)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            raise NotFoundError("Task not found")
        await self.session.commit()
        return await self.get_task(user_id, task_id)

    async def complete_task(
        self,
        user_id: uuid.UUID,
        task_id: uuid.UUID,
        outcome: TaskCompletion,
    ) -> Task:
        """
        Mark a task completed and record a log entry for it.

        The completion stamp and the log share one timestamp and one
        transaction. Only a task that is still open can be completed, so of
        two concurrent completions exactly one succeeds.

        Raises:
            NotFoundError: If the task is missing or not writable by the user
            ConflictError: If the task was already completed
        """
        now = utcnow()
        try:
            result = await self.session.execute(
                update(Task)
                .where(
                    Task.id == task_id,
                    Task.pet_id.in_(accessible_pet_ids(user_id, WRITE_ROLES)),
                    Task.completed_at.is_(None),
                )
                .values(completed_at=now, updated_at=now)
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                # Either it does not exist for this user or it is already done
                await self.get_task(user_id, task_id, WRITE_ROLES)
                raise ConflictError("Task is already completed")

            pet_id = await self.session.scalar(
                select(Task.pet_id).where(Task.id == task_id)
            )
            self.session.add(
                TaskLog(
                    task_id=task_id,
                    pet_id=pet_id,
                    user_id=user_id,
                    completed_at=now,
                    **outcome.model_dump(),
                )
            )
            await self.session.flush()
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Task {task_id} completed by user {user_id}")
        return await self.get_task(user_id, task_id)

    async def delete_task(self, user_id: uuid.UUID, task_id: uuid.UUID) -> None:
        """
        Delete a task with its logs, attachments and comments.

        Raises:
            NotFoundError: If the task is missing or not writable by the user
        """
        writable = accessible_pet_ids(user_id, WRITE_ROLES)
        target = select(Task.id).where(Task.id == task_id, Task.pet_id.in_(writable))
        try:
            for model in (TaskLog, TaskAttachment, TaskComment):
                await self.session.execute(
                    delete(model)
                    .where(model.task_id.in_(target))
                    .execution_options(synchronize_session=False)
                )
            result = await self.session.execute(
                delete(Task)
                .where(Task.id == task_id, Task.pet_id.in_(writable))
                .execution_options(synchronize_session=False)
            )
            if result.rowcount == 0:
                raise NotFoundError("Task not found")
            await self.session.commit()
        except Exception:
            await self.session.rollback()
            raise

        logger.info(f"Task {task_id} deleted by user {user_id}")
