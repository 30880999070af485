"""In-app notifications owned by a single user."""
import uuid
from typing import List, Optional

from sqlalchemy import delete, select, update
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.errors import NotFoundError
from petcare.models.notification import Notification
from petcare.schemas.notification import NotificationCreate


class NotificationService:
    def __init__(self, session: AsyncSession):
        self.session = session

    async def list_notifications(
        self,
        user_id: uuid.UUID,
        is_read: Optional[bool] = None,
    ) -> List[Notification]:
        stmt = select(Notification).where(Notification.user_id == user_id)
        if is_read is not None:
            stmt = stmt.where(Notification.is_read == is_read)
        stmt = stmt.order_by(Notification.created_at.desc())
        result = await self.session.execute(stmt)
        return list(result.scalars().all())

    async def create_notification(
        self,
        user_id: uuid.UUID,
        data: NotificationCreate,
    ) -> Notification:
        notification = Notification(user_id=user_id, **data.model_dump())
        self.session.add(notification)
        await self.session.commit()
        return notification

    async def mark_read(self, user_id: uuid.UUID, notification_id: uuid.UUID) -> Notification:
        """
        Raises:
            NotFoundError: If the user has no such notification
        """
        result = await self.session.execute(
            update(Notification)
            .where(Notification.id == notification_id, Notification.user_id == user_id)
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Notification not found")
        await self.session.commit()

        notification = await self.session.scalar(
            select(Notification)
            .where(Notification.id == notification_id)
            .execution_options(populate_existing=True)
        )
        return notification

    async def mark_all_read(self, user_id: uuid.UUID) -> int:
        """Returns the number of notifications that changed."""
        result = await self.session.execute(
            update(Notification)
            .where(Notification.user_id == user_id, Notification.is_read.is_(False))
            .values(is_read=True)
            .execution_options(synchronize_session=False)
        )
        await self.session.commit()
        return result.rowcount

    async def delete_notification(self, user_id: uuid.UUID, notification_id: uuid.UUID) -> None:
        result = await self.session.execute(
            delete(Notification)
            .where(Notification.id == notification_id, Notification.user_id == user_id)
            .execution_options(synchronize_session=False)
        )
        if result.rowcount == 0:
            raise NotFoundError("Notification not found")
        await self.session.commit()
