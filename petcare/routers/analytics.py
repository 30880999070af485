"""Analytics routes."""
import uuid
from datetime import date
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user
from petcare.errors import ValidationError
from petcare.models.user import User
from petcare.schemas.analytics import PetAnalytics, TaskTypeAnalytics
from petcare.services.analytics_service import AnalyticsService


router = APIRouter(prefix="/api/analytics", tags=["analytics"])


@router.get("/tasks", response_model=List[TaskTypeAnalytics])
async def task_analytics(
    start_date: Optional[date] = Query(None, alias="startDate"),
    end_date: Optional[date] = Query(None, alias="endDate"),
    pet_id: Optional[uuid.UUID] = Query(None, alias="petId"),
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[TaskTypeAnalytics]:
    """
    Completion statistics per task type.

    ``startDate`` and ``endDate`` are inclusive calendar days of the
    scheduled time.
    """
    if start_date and end_date and start_date > end_date:
        raise ValidationError("startDate must not be after endDate", field="startDate")
    return await AnalyticsService(session).task_analytics(
        user.id, start_date=start_date, end_date=end_date, pet_id=pet_id
    )


@router.get("/pets", response_model=List[PetAnalytics])
async def pet_analytics(
    pet_id: Optional[uuid.UUID] = Query(None, alias="petId"),
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[PetAnalytics]:
    """Completion statistics per pet, including pets with no tasks yet."""
    return await AnalyticsService(session).pet_analytics(user.id, pet_id=pet_id)
