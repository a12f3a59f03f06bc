"""Route Dependencies — Marketplace injection and the admin guard.

Invariants:
    - get_marketplace returns the instance built in lifespan (app.state)
    - require_admin raises AuthenticationError unless X-Admin-Token matches
      the current admin session

Design Decisions:
    - Tests override get_marketplace via app.dependency_overrides
"""

from fastapi import Depends, Header, Request

from marketplace.core.account import AdminIdentity
from marketplace.core.errors import AuthenticationError
from marketplace.services.marketplace import Marketplace


def get_marketplace(request: Request) -> Marketplace:
    marketplace = getattr(request.app.state, "marketplace", None)
    if marketplace is None:
        raise RuntimeError("Marketplace not initialized")
    return marketplace


async def require_admin(
    x_admin_token: str | None = Header(None),
    marketplace: Marketplace = Depends(get_marketplace),
) -> AdminIdentity:
    """Admin-only routes: the token must belong to the current admin session."""
    if not marketplace.accounts.is_admin_token(x_admin_token):
        raise AuthenticationError("Admin session required")
    return marketplace.accounts.get_admin()
