"""Profile, password and preferences of the authenticated user."""
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import get_async_session
from petcare.dependencies import current_active_user, get_user_manager
from petcare.models.user import User
from petcare.schemas.common import MessageResponse
from petcare.schemas.user import (
    PasswordChange,
    PreferencesUpdate,
    ProfileUpdate,
    UserPreferences,
    UserRead,
)
from petcare.services.user_manager import UserManager
from petcare.services.user_service import UserService


router = APIRouter(prefix="/api/user", tags=["user"])


async def get_user_service(
    session: AsyncSession = Depends(get_async_session),
    user_manager: UserManager = Depends(get_user_manager),
) -> UserService:
    return UserService(session, user_manager)


@router.get("/profile", response_model=UserRead)
async def get_profile(
    user: User = Depends(current_active_user),
) -> User:
    return user


@router.put("/profile", response_model=UserRead)
async def update_profile(
    data: ProfileUpdate,
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
) -> User:
    """
    Replace name, email and avatar.

    Returns 409 when the email belongs to another account.
    """
    return await user_service.update_profile(user, data)


@router.put("/password", response_model=MessageResponse)
async def change_password(
    data: PasswordChange,
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
) -> MessageResponse:
    await user_service.change_password(user, data)
    return MessageResponse(message="Password updated")


@router.get("/preferences", response_model=UserPreferences)
async def get_preferences(
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
) -> UserPreferences:
    return user_service.get_preferences(user)


@router.put("/preferences", response_model=UserPreferences)
async def update_preferences(
    data: PreferencesUpdate,
    user: User = Depends(current_active_user),
    user_service: UserService = Depends(get_user_service),
) -> UserPreferences:
    """
    Replace the preferences document.

    Missing fields take their defaults; unknown keys or invalid values
    are rejected with 400.
    """
    return await user_service.update_preferences(user, data.preferences)
