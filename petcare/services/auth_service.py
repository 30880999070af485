"""
Authentication service: registration, login and token verification.

Passwords are hashed by the fastapi-users password helper and tokens are
HS256 JWTs produced by the fastapi-users JWT strategy, extended so the
payload also carries the user's email.
"""
import logging
import uuid
from typing import Optional, Tuple

import jwt
from fastapi.security import OAuth2PasswordRequestForm
from fastapi_users import exceptions as fastapi_users_exceptions
from fastapi_users.authentication import JWTStrategy
from fastapi_users.jwt import decode_jwt, generate_jwt

from petcare.errors import AuthError, ConflictError, ValidationError
from petcare.models.user import User
from petcare.schemas.user import RegisterRequest, TokenIdentity, UserCreate
from petcare.services.user_manager import UserManager


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid credentials"


class PetCareJWTStrategy(JWTStrategy[User, uuid.UUID]):
    """JWT strategy whose tokens embed ``{sub: user id, email}``."""

    async def write_token(self, user: User) -> str:
        data = {
            "sub": str(user.id),
            "email": user.email,
            "aud": self.token_audience,
        }
        return generate_jwt(
            data, self.encode_key, self.lifetime_seconds, algorithm=self.algorithm
        )

    def verify(self, token: Optional[str]) -> TokenIdentity:
        """
        Check signature, audience and expiry of a token.

        Raises:
            AuthError: If the token is missing, tampered with or expired
        """
        if not token:
            raise AuthError("Access token required")
        try:
            data = decode_jwt(
                token, self.decode_key, self.token_audience, algorithms=[self.algorithm]
            )
        except jwt.ExpiredSignatureError:
            raise AuthError("Token expired")
        except jwt.PyJWTError:
            raise AuthError("Invalid token")

        try:
            return TokenIdentity(user_id=uuid.UUID(data["sub"]), email=data["email"])
        except (KeyError, ValueError):
            raise AuthError("Invalid token")


class AuthService:
    """Registers and authenticates users and issues their tokens."""

    def __init__(self, user_manager: UserManager, strategy: PetCareJWTStrategy):
        self.user_manager = user_manager
        self.strategy = strategy

    async def register(self, data: RegisterRequest) -> Tuple[str, User]:
        """
        Create an account and sign the new user in.

        Raises:
            ConflictError: If the email is already registered
            ValidationError: If the password does not meet the policy
        """
        user_create = UserCreate(
            name=data.name,
            email=data.email,
            password=data.password,
        )
        try:
            user = await self.user_manager.create(user_create, safe=True)
        except fastapi_users_exceptions.UserAlreadyExists:
            logger.warning(f"Attempt to register existing email: {data.email}")
            raise ConflictError("User already exists")
        except fastapi_users_exceptions.InvalidPasswordException as e:
            raise ValidationError(str(e.reason), field="password")

        token = await self.strategy.write_token(user)
        return token, user

    async def login(self, email: str, password: str) -> Tuple[str, User]:
        """
        Authenticate by email and password.

        Unknown email and wrong password produce the same error.

        Raises:
            AuthError: If the credentials do not match an active user
        """
        credentials = OAuth2PasswordRequestForm(username=email, password=password)
        user = await self.user_manager.authenticate(credentials)
        if user is None or not user.is_active:
            logger.info(f"Failed login attempt for {email}")
            raise AuthError(INVALID_CREDENTIALS)

        token = await self.strategy.write_token(user)
        logger.info(f"User {user.id} logged in")
        return token, user

    def verify_token(self, token: Optional[str]) -> TokenIdentity:
        return self.strategy.verify(token)
