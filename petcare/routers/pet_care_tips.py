"""Pet care tip routes."""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user
from petcare.models.notification import PetCareTip
from petcare.models.user import User
from petcare.schemas.notification import PetCareTipRead
from petcare.services.care_tip_service import list_care_tips


router = APIRouter(prefix="/api/pet-care-tips", tags=["pet-care-tips"])


@router.get("", response_model=List[PetCareTipRead])
async def get_pet_care_tips(
    pet_type: Optional[str] = Query(None, alias="type"),
    category: Optional[str] = None,
    user: User = Depends(current_active_user),
    session: AsyncSession = Depends(get_async_session),
) -> List[PetCareTip]:
    return await list_care_tips(session, pet_type=pet_type, category=category)
