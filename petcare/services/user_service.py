"""Profile, password and preferences of the signed-in user."""
import logging
import uuid

from fastapi_users import InvalidPasswordException
from pydantic import ValidationError as PydanticValidationError
from sqlalchemy import func, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.database import utcnow
from petcare.errors import ConflictError, ValidationError
from petcare.models.user import User
from petcare.schemas.user import PasswordChange, ProfileUpdate, UserPreferences
from petcare.services.user_manager import UserManager


logger = logging.getLogger(__name__)


class UserService:
    """
    Operates on the ``User`` loaded by the auth dependency, which lives in
    the same session as this service.
    """

    def __init__(self, session: AsyncSession, user_manager: UserManager):
        self.session = session
        self.user_manager = user_manager

    async def _email_taken(self, email: str, user_id: uuid.UUID) -> bool:
        existing = await self.session.scalar(
            select(User.id).where(
                func.lower(User.email) == email.lower(),
                User.id != user_id,
            )
        )
        return existing is not None

    async def update_profile(self, user: User, data: ProfileUpdate) -> User:
        """
        Raises:
            ConflictError: If the email belongs to another account
        """
        if await self._email_taken(data.email, user.id):
            raise ConflictError("Email is already in use")

        user.name = data.name
        user.email = data.email
        user.avatar = data.avatar
        user.updated_at = utcnow()
        try:
            await self.session.commit()
        except IntegrityError:
            await self.session.rollback()
            raise ConflictError("Email is already in use")
        return user

    async def change_password(self, user: User, data: PasswordChange) -> None:
        """
        Raises:
            ValidationError: If the current password is wrong or the new one
                fails the password policy
        """
        password_helper = self.user_manager.password_helper
        verified, _ = password_helper.verify_and_update(
            data.current_password, user.hashed_password
        )
        if not verified:
            raise ValidationError(
                "Current password is incorrect", field="currentPassword"
            )
        try:
            await self.user_manager.validate_password(data.new_password, user)
        except InvalidPasswordException as e:
            raise ValidationError(str(e.reason), field="newPassword")

        user.hashed_password = password_helper.hash(data.new_password)
        user.updated_at = utcnow()
        await self.session.commit()
        logger.info(f"User {user.id} changed their password")

    def get_preferences(self, user: User) -> UserPreferences:
        """Stored preferences, or defaults when none are stored or they no longer validate."""
        if not user.preferences:
            return UserPreferences()
        try:
            return UserPreferences.model_validate(user.preferences)
        except PydanticValidationError:
            logger.warning(f"Discarding invalid stored preferences for user {user.id}")
            return UserPreferences()

    async def update_preferences(self, user: User, preferences: UserPreferences) -> UserPreferences:
        user.preferences = preferences.model_dump(mode="json")
        user.updated_at = utcnow()
        await self.session.commit()
        return preferences
