"""User Auth — signup, login and the current-user session.

Invariants:
    - Duplicate email → 409, bad credentials → 401 with one generic message
    - Passwords over the bcrypt byte limit → 400, never a 500
    - Responses never contain secrets
"""

import logging

from fastapi import APIRouter, Depends, status

from marketplace.api.dependencies import get_marketplace
from marketplace.core.errors import (
    AuthenticationError, DuplicateAccountError, InvalidSecretError,
    ResourceNotFoundError,
)
from marketplace.schemas.account import LoginRequest, SignupRequest, UserResponse
from marketplace.services.account_store import DUPLICATE_EMAIL_MESSAGE
from marketplace.services.marketplace import Marketplace

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/auth", tags=["auth"])


@router.post(
    "/signup", response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
)
async def signup(
    body: SignupRequest, marketplace: Marketplace = Depends(get_marketplace),
):
    """Register and sign in."""
    result = marketplace.accounts.signup(
        body.email, body.password, body.postal_code, body.university.value,
    )
    if not result.success:
        if result.message == DUPLICATE_EMAIL_MESSAGE:
            raise DuplicateAccountError(result.message)
        raise InvalidSecretError(result.message)
    return UserResponse(**result.user)


@router.post("/login", response_model=UserResponse)
async def login(
    body: LoginRequest, marketplace: Marketplace = Depends(get_marketplace),
):
    result = marketplace.accounts.login(body.email, body.password)
    if not result.success:
        raise AuthenticationError(result.message)
    return UserResponse(**result.user)


@router.get("/me", response_model=UserResponse)
async def current_user(marketplace: Marketplace = Depends(get_marketplace)):
    user = marketplace.accounts.get_current_user()
    if user is None:
        raise ResourceNotFoundError("Session", "current_user")
    return UserResponse(**user)


@router.post("/logout", status_code=status.HTTP_204_NO_CONTENT)
async def logout(marketplace: Marketplace = Depends(get_marketplace)):
    marketplace.accounts.logout_user()
