"""Session State — who is currently signed in, as user and as admin.

Invariants:
    - At most one current user and, independently, at most one current admin
    - Logging one out never touches the other
    - Held in memory and mirrored to storage on every change (survives restart)
    - Storage is written first; a failed write leaves the session as it was
    - The user session never carries the credential secret

Design Decisions:
    - Holds references (public user record, admin identity), not ownership:
      the account store remains the owner of account records
"""

import logging

from marketplace.core.account import AdminIdentity
from marketplace.core.storage_protocols import (
    ADMIN_KEY, CURRENT_USER_KEY, KeyValueStorage,
)

logger = logging.getLogger(__name__)


class SessionState:
    """Process-wide current user / current admin."""

    def __init__(self, storage: KeyValueStorage):
        self._storage = storage
        self._user: dict | None = storage.read(CURRENT_USER_KEY)
        admin = storage.read(ADMIN_KEY)
        self._admin = AdminIdentity.from_record(admin) if admin else None

    @property
    def current_user(self) -> dict | None:
        return dict(self._user) if self._user else None

    @property
    def current_admin(self) -> AdminIdentity | None:
        return self._admin

    def set_user(self, user: dict) -> None:
        user = dict(user)
        self._storage.write(CURRENT_USER_KEY, user)
        self._user = user
        logger.info("User session started", extra={"user_id": user.get("id")})

    def clear_user(self) -> None:
        if self._user:
            logger.info(
                "User session ended", extra={"user_id": self._user.get("id")},
            )
        self._storage.remove(CURRENT_USER_KEY)
        self._user = None

    def set_admin(self, admin: AdminIdentity) -> None:
        self._storage.write(ADMIN_KEY, admin.to_record())
        self._admin = admin
        logger.info("Admin session started")

    def clear_admin(self) -> None:
        if self._admin:
            logger.info("Admin session ended")
        self._storage.remove(ADMIN_KEY)
        self._admin = None
