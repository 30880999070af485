"""Authentication routes: register, login and token verification."""
from typing import Optional

from fastapi import APIRouter, Depends, status

from petcare.dependencies import bearer_transport, get_auth_service
from petcare.schemas.user import (
    AuthResponse,
    LoginRequest,
    RegisterRequest,
    TokenIdentity,
    UserRead,
)
from petcare.services.auth_service import AuthService


router = APIRouter(
    prefix="/api/auth",
    tags=["auth"],
)


@router.post("/register", response_model=AuthResponse, status_code=status.HTTP_201_CREATED)
async def register(
    data: RegisterRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Create an account and return a token for it.

    **Example:**
    ```json
    {"name": "Alex", "email": "alex@example.com", "password": "secret1"}
    ```

    Returns 409 when the email is already registered.
    """
    token, user = await auth_service.register(data)
    return AuthResponse(token=token, user=UserRead.model_validate(user))


@router.post("/login", response_model=AuthResponse)
async def login(
    data: LoginRequest,
    auth_service: AuthService = Depends(get_auth_service),
) -> AuthResponse:
    """
    Exchange email and password for a token.

    Unknown emails and wrong passwords both return 401 with the same message.
    """
    token, user = await auth_service.login(data.email, data.password)
    return AuthResponse(token=token, user=UserRead.model_validate(user))


@router.get("/verify", response_model=TokenIdentity)
async def verify(
    token: Optional[str] = Depends(bearer_transport.scheme),
    auth_service: AuthService = Depends(get_auth_service),
) -> TokenIdentity:
    """Return the identity embedded in the bearer token."""
    return auth_service.verify_token(token)
