"""Notification routes for the authenticated user."""
import uuid
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user
from petcare.models.notification import Notification
from petcare.models.user import User
from petcare.schemas.notification import (
    MarkAllReadResponse,
    NotificationCreate,
    NotificationRead,
)
from petcare.services.notification_service import NotificationService


router = APIRouter(
    prefix="/api/notifications",
    tags=["notifications"],
    responses={404: {"description": "Notification not found"}},
)


@router.get("", response_model=List[NotificationRead])
async def list_notifications(
    is_read: Optional[bool] = Query(None, alias="isRead"),
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[Notification]:
    return await NotificationService(session).list_notifications(user.id, is_read=is_read)


@router.post("", response_model=NotificationRead, status_code=status.HTTP_201_CREATED)
async def create_notification(
    data: NotificationCreate,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Notification:
    return await NotificationService(session).create_notification(user.id, data)


# Declared before the ``/{notification_id}`` routes so "read-all" is not parsed as an id
@router.put("/read-all", response_model=MarkAllReadResponse)
async def mark_all_read(
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> MarkAllReadResponse:
    updated = await NotificationService(session).mark_all_read(user.id)
    return MarkAllReadResponse(updated=updated)


@router.put("/{notification_id}/read", response_model=NotificationRead)
async def mark_read(
    notification_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Notification:
    return await NotificationService(session).mark_read(user.id, notification_id)


@router.delete("/{notification_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_notification(
    notification_id: uuid.UUID,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> Response:
    await NotificationService(session).delete_notification(user.id, notification_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
