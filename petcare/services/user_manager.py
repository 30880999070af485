"""User manager for fastapi-users authentication system."""
import logging
import uuid
from typing import Optional, Union

from fastapi import Request
from fastapi_users import BaseUserManager, InvalidPasswordException, UUIDIDMixin

from petcare.models.user import User
from petcare.config import Settings
from petcare.schemas.user import MIN_PASSWORD_LENGTH, UserCreate


logger = logging.getLogger(__name__)


class UserManager(UUIDIDMixin, BaseUserManager[User, uuid.UUID]):
    """
    Custom user manager for handling user lifecycle events.

    Password hashing and verification come from the fastapi-users
    ``PasswordHelper``; this class adds the password policy and logs
    registrations.
    """

    def __init__(self, user_db, settings: Settings):
        """
        Initialize UserManager with user database and settings.

        Args:
            user_db: Database adapter for user operations
            settings: Application settings containing secrets
        """
        super().__init__(user_db)
        self.reset_password_token_secret = settings.secret_key
        self.verification_token_secret = settings.secret_key

    async def on_after_register(
        self,
        user: User,
        request: Optional[Request] = None
    ) -> None:
        logger.info(f"User {user.id} has registered with email {user.email}")

    async def validate_password(
        self,
        password: str,
        user: Union[UserCreate, User],
    ) -> None:
        """
        Validate password meets the length policy.

        Raises:
            InvalidPasswordException: If password is too short or too long
        """
        if len(password) < MIN_PASSWORD_LENGTH:
            raise InvalidPasswordException(
                reason=f"Password must be at least {MIN_PASSWORD_LENGTH} characters"
            )

        # Maximum length check (prevent DoS)
        if len(password) > 128:
            raise InvalidPasswordException(
                reason="Password must be at most 128 characters"
            )
