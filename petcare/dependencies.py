"""FastAPI dependencies for authentication and database access."""
import uuid
from typing import AsyncGenerator

from fastapi import Depends
from fastapi_users import FastAPIUsers
from fastapi_users.authentication import (
    AuthenticationBackend,
    BearerTransport,
)
from fastapi_users.db import SQLAlchemyUserDatabase
from sqlalchemy.ext.asyncio import AsyncSession

from petcare.config import Settings
from petcare.database import get_async_session
from petcare.models.user import User
from petcare.services.auth_service import AuthService, PetCareJWTStrategy
from petcare.services.user_manager import UserManager


# Initialize settings
settings = Settings()


async def get_user_db(
    session: AsyncSession = Depends(get_async_session)
) -> AsyncGenerator[SQLAlchemyUserDatabase, None]:
    """
    Dependency to get the user database adapter.

    Args:
        session: Async database session

    Yields:
        SQLAlchemyUserDatabase: Database adapter for user operations
    """
    yield SQLAlchemyUserDatabase(session, User)


async def get_user_manager(
    user_db: SQLAlchemyUserDatabase = Depends(get_user_db)
) -> AsyncGenerator[UserManager, None]:
    """
    Dependency to get the user manager.

    Args:
        user_db: User database adapter

    Yields:
        UserManager: User manager instance
    """
    yield UserManager(user_db, settings)


def get_jwt_strategy() -> PetCareJWTStrategy:
    """
    Get JWT authentication strategy.

    Returns:
        PetCareJWTStrategy: JWT strategy configured with secret and lifetime
    """
    return PetCareJWTStrategy(
        secret=settings.secret_key,
        lifetime_seconds=settings.jwt_lifetime_seconds,
        algorithm="HS256",
    )


async def get_auth_service(
    user_manager: UserManager = Depends(get_user_manager),
    strategy: PetCareJWTStrategy = Depends(get_jwt_strategy),
) -> AuthService:
    return AuthService(user_manager, strategy)


# Configure Bearer token transport
bearer_transport = BearerTransport(tokenUrl="api/auth/login")


# Configure authentication backend with JWT
auth_backend = AuthenticationBackend(
    name="jwt",
    transport=bearer_transport,
    get_strategy=get_jwt_strategy,
)


# Create FastAPIUsers instance
fastapi_users = FastAPIUsers[User, uuid.UUID](
    get_user_manager,
    [auth_backend],
)


# Gate for every endpoint except register and login
current_active_user = fastapi_users.current_user(active=True)
