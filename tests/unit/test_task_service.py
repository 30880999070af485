"""Unit tests for task scheduling and completion."""

import uuid
from datetime import date, datetime, timedelta

import pytest
from sqlalchemy import func, select
from sqlalchemy.exc import OperationalError
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import utcnow
from petcare.errors import ConflictError, NotFoundError, ValidationError
from petcare.models.enums import AccessRole, TaskStatus
from petcare.models.shared_access import SharedAccess
from petcare.models.task import Task
from petcare.models.task_log import TaskLog
from petcare.models.user import User
from petcare.schemas.pet import PetCreate
from petcare.schemas.task import TaskCompletion, TaskCreate, TaskUpdate
from petcare.services.pet_service import PetService
from petcare.services.task_service import TaskService, check_recurrence


@pytest.fixture
async def pet(async_session: AsyncSession, test_user: User):
    return await PetService(async_session).create_pet(
        test_user.id, PetCreate(name="Rex", type="dog")
    )


def _task_data(pet_id, **overrides) -> TaskCreate:
    data = {
        "pet_id": pet_id,
        "title": "Feed",
        "type": "feeding",
        "scheduled_time": datetime(2030, 1, 1, 8, 0),
    }
    data.update(overrides)
    return TaskCreate(**data)


class TestRecurrence:

    def test_pattern_kept_for_recurring_task(self):
        assert check_recurrence(True, "daily") == "daily"

    def test_pattern_cleared_for_one_off_task(self):
        assert check_recurrence(False, "weekly") is None

    def test_recurring_task_without_pattern_is_invalid(self):
        with pytest.raises(ValidationError) as exc_info:
            check_recurrence(True, None)
        assert exc_info.value.errors[0]["field"] == "recurrencePattern"


class TestCreateAndList:

    @pytest.mark.asyncio
    async def test_create_task_defaults(self, async_session, test_user, pet):
        task = await TaskService(async_session).create_task(
            test_user.id, _task_data(pet.id)
        )

        assert task.priority == "medium"
        assert task.completed_at is None
        assert task.status == TaskStatus.PENDING
        assert task.pet_name == "Rex"

    @pytest.mark.asyncio
    async def test_create_task_on_foreign_pet_is_not_found(self, async_session, other_user, pet):
        with pytest.raises(NotFoundError):
            await TaskService(async_session).create_task(other_user.id, _task_data(pet.id))

    @pytest.mark.asyncio
    async def test_create_task_on_missing_pet_is_not_found(self, async_session, test_user):
        with pytest.raises(NotFoundError):
            await TaskService(async_session).create_task(
                test_user.id, _task_data(uuid.uuid4())
            )

    @pytest.mark.asyncio
    async def test_list_filters_by_calendar_day(self, async_session, test_user, pet):
        service = TaskService(async_session)
        await service.create_task(
            test_user.id, _task_data(pet.id, title="Late", scheduled_time=datetime(2030, 1, 1, 23, 30))
        )
        await service.create_task(
            test_user.id, _task_data(pet.id, title="Early", scheduled_time=datetime(2030, 1, 1, 0, 15))
        )
        await service.create_task(
            test_user.id, _task_data(pet.id, title="Next day", scheduled_time=datetime(2030, 1, 2, 0, 0))
        )

        tasks = await service.list_tasks(test_user.id, day=date(2030, 1, 1))

        assert [task.title for task in tasks] == ["Early", "Late"]

    @pytest.mark.asyncio
    async def test_list_filters_by_priority_and_type(self, async_session, test_user, pet):
        service = TaskService(async_session)
        await service.create_task(test_user.id, _task_data(pet.id, priority="high"))
        await service.create_task(test_user.id, _task_data(pet.id, type="walk", title="Walk"))

        high = await service.list_tasks(test_user.id, priority="high")
        walks = await service.list_tasks(test_user.id, task_type="walk")

        assert [task.priority for task in high] == ["high"]
        assert [task.title for task in walks] == ["Walk"]

    @pytest.mark.asyncio
    async def test_list_excludes_other_users_tasks(self, async_session, test_user, other_user, pet):
        await TaskService(async_session).create_task(test_user.id, _task_data(pet.id))

        assert await TaskService(async_session).list_tasks(other_user.id) == []


class TestUpdate:

    @pytest.mark.asyncio
    async def test_partial_update_keeps_other_fields(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id, notes="bowl"))

        updated = await service.update_task(
            test_user.id, task.id, TaskUpdate(title="Dinner")
        )

        assert updated.title == "Dinner"
        assert updated.notes == "bowl"
        assert updated.updated_at is not None

    @pytest.mark.asyncio
    async def test_turning_off_recurrence_clears_pattern(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(
            test_user.id, _task_data(pet.id, is_recurring=True, recurrence_pattern="daily")
        )

        updated = await service.update_task(
            test_user.id, task.id, TaskUpdate(is_recurring=False)
        )

        assert updated.is_recurring is False
        assert updated.recurrence_pattern is None

    @pytest.mark.asyncio
    async def test_pattern_alone_on_one_off_task_is_rejected(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))
        task_id = task.id

        with pytest.raises(ValidationError) as exc_info:
            await service.update_task(
                test_user.id, task_id, TaskUpdate(recurrence_pattern="daily")
            )

        assert exc_info.value.errors[0]["field"] == "recurrencePattern"
        unchanged = await service.get_task(test_user.id, task_id)
        assert unchanged.recurrence_pattern is None

    @pytest.mark.asyncio
    async def test_pattern_alone_on_recurring_task_is_applied(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(
            test_user.id, _task_data(pet.id, is_recurring=True, recurrence_pattern="daily")
        )

        updated = await service.update_task(
            test_user.id, task.id, TaskUpdate(recurrence_pattern="weekly")
        )

        assert updated.recurrence_pattern == "weekly"

    @pytest.mark.asyncio
    async def test_update_by_other_user_is_not_found(self, async_session, test_user, other_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))

        with pytest.raises(NotFoundError):
            await service.update_task(other_user.id, task.id, TaskUpdate(title="Hijacked"))


class TestCompletion:

    @pytest.mark.asyncio
    async def test_complete_sets_timestamp_and_writes_log(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))

        completed = await service.complete_task(
            test_user.id, task.id, TaskCompletion(notes="ate all", duration=5, mood="great")
        )

        logs = (await async_session.execute(select(TaskLog))).scalars().all()
        assert completed.status == TaskStatus.COMPLETED
        assert len(logs) == 1
        assert logs[0].completed_at == completed.completed_at
        assert logs[0].user_id == test_user.id
        assert logs[0].notes == "ate all"
        assert logs[0].mood == "great"

    @pytest.mark.asyncio
    async def test_second_completion_conflicts(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))
        await service.complete_task(test_user.id, task.id, TaskCompletion())

        with pytest.raises(ConflictError):
            await service.complete_task(test_user.id, task.id, TaskCompletion())

        count = await async_session.scalar(select(func.count()).select_from(TaskLog))
        assert count == 1

    @pytest.mark.asyncio
    async def test_complete_missing_task_is_not_found(self, async_session, test_user):
        with pytest.raises(NotFoundError):
            await TaskService(async_session).complete_task(
                test_user.id, uuid.uuid4(), TaskCompletion()
            )

    @pytest.mark.asyncio
    async def test_viewer_cannot_complete(self, async_session, test_user, other_user, pet):
        owner_id, viewer_id = test_user.id, other_user.id
        service = TaskService(async_session)
        task = await service.create_task(owner_id, _task_data(pet.id))
        task_id = task.id
        async_session.add(
            SharedAccess(pet_id=pet.id, user_id=viewer_id, role=AccessRole.VIEWER.value)
        )
        await async_session.commit()

        with pytest.raises(NotFoundError):
            await service.complete_task(viewer_id, task_id, TaskCompletion())
        # Viewers still see the task
        assert (await service.get_task(viewer_id, task_id)).id == task_id

    @pytest.mark.asyncio
    async def test_caregiver_can_complete(self, async_session, test_user, other_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))
        async_session.add(
            SharedAccess(pet_id=pet.id, user_id=other_user.id, role=AccessRole.CAREGIVER.value)
        )
        await async_session.commit()

        completed = await service.complete_task(other_user.id, task.id, TaskCompletion())

        assert completed.completed_at is not None

    @pytest.mark.asyncio
    async def test_failed_log_write_leaves_task_pending(
        self, async_session, session_maker, test_user, pet, monkeypatch
    ):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))
        task_id, user_id = task.id, test_user.id

        async def failing_flush(*args, **kwargs):
            raise OperationalError("INSERT INTO task_logs", {}, Exception("disk I/O error"))

        monkeypatch.setattr(async_session, "flush", failing_flush)

        with pytest.raises(OperationalError):
            await service.complete_task(user_id, task_id, TaskCompletion())

        async with session_maker() as check:
            stored = await check.get(Task, task_id)
            log_count = await check.scalar(select(func.count()).select_from(TaskLog))
        assert stored.completed_at is None
        assert log_count == 0

    @pytest.mark.asyncio
    async def test_overdue_status_is_derived(self, async_session, test_user, pet):
        task = await TaskService(async_session).create_task(
            test_user.id, _task_data(pet.id, scheduled_time=utcnow() - timedelta(hours=1))
        )

        assert task.status == TaskStatus.OVERDUE


class TestDelete:

    @pytest.mark.asyncio
    async def test_delete_removes_task_and_logs(self, async_session, test_user, pet):
        service = TaskService(async_session)
        task = await service.create_task(test_user.id, _task_data(pet.id))
        await service.complete_task(test_user.id, task.id, TaskCompletion())

        await service.delete_task(test_user.id, task.id)

        assert await async_session.scalar(select(func.count()).select_from(Task)) == 0
        assert await async_session.scalar(select(func.count()).select_from(TaskLog)) == 0

    @pytest.mark.asyncio
    async def test_delete_by_other_user_is_not_found(self, async_session, test_user, other_user, pet):
        service = TaskService(async_session)
        owner_id, stranger_id = test_user.id, other_user.id
        task = await service.create_task(owner_id, _task_data(pet.id))
        task_id = task.id

        with pytest.raises(NotFoundError):
            await service.delete_task(stranger_id, task_id)

        assert (await service.get_task(owner_id, task_id)).id == task_id
