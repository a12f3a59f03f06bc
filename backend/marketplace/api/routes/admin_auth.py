"""Admin Auth — single-credential admin login and session.

Invariants:
    - Successful login returns the opaque token admin routes expect in X-Admin-Token
    - Logging the admin out never touches the user session
"""

import logging

from fastapi import APIRouter, Depends, status

from marketplace.api.dependencies import get_marketplace, require_admin
from marketplace.core.account import AdminIdentity
from marketplace.core.errors import AuthenticationError
from marketplace.schemas.account import (
    AdminLoginRequest, AdminProfile, AdminResponse,
)
from marketplace.services.marketplace import Marketplace

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/admin", tags=["admin"])


@router.post("/login", response_model=AdminResponse)
async def admin_login(
    body: AdminLoginRequest, marketplace: Marketplace = Depends(get_marketplace),
):
    admin = marketplace.accounts.admin_login(body.username, body.password)
    if admin is None:
        raise AuthenticationError("Invalid admin credentials")
    return AdminResponse.from_identity(admin)


@router.get("/me", response_model=AdminProfile)
async def current_admin(admin: AdminIdentity = Depends(require_admin)):
    return AdminProfile(id=admin.id, username=admin.username)


@router.post(
    "/logout", status_code=status.HTTP_204_NO_CONTENT,
    dependencies=[Depends(require_admin)],
)
async def admin_logout(marketplace: Marketplace = Depends(get_marketplace)):
    marketplace.accounts.logout_admin()
