"""Account Store — registered users, the single admin credential, and login.

Invariants:
    - Email uniqueness is case-insensitive (emails stored lower-cased)
    - Secrets stored as bcrypt hashes only; returned users never carry them
    - Login failure message is identical for unknown email and wrong secret
    - signup and login establish the user session; admin_login the admin session
    - Every signup persists the full account collection before returning,
      and a failed write leaves the collection unchanged
    - Secrets longer than MAX_SECRET_BYTES are refused at signup, never truncated

Design Decisions:
    - Result objects over exceptions: duplicate email and bad credentials are
      expected outcomes, the API layer decides the HTTP status
    - Unknown emails still pay for one bcrypt check, so response time does
      not reveal whether an account exists
    - Admin secret hashed once at construction and checked like user secrets
"""

import logging
import uuid
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Callable

from marketplace.core.account import AdminIdentity, UserAccount, normalize_email
from marketplace.core.credentials import (
    MAX_SECRET_BYTES, hash_secret, new_session_token, same_text, secret_fits,
    verify_secret,
)
from marketplace.core.domain_types import UserId
from marketplace.core.storage_protocols import USERS_KEY, KeyValueStorage
from marketplace.services.session_state import SessionState

logger = logging.getLogger(__name__)

DUPLICATE_EMAIL_MESSAGE = "An account with this email already exists."
INVALID_CREDENTIALS_MESSAGE = "Invalid email or password."
SECRET_TOO_LONG_MESSAGE = (
    f"Password must be at most {MAX_SECRET_BYTES} bytes when UTF-8 encoded."
)
ADMIN_ID = "admin_1"


@dataclass
class AuthResult:
    """Outcome of signup/login."""
    success: bool
    user: dict | None = None
    message: str | None = None


class AccountStore:
    """Owns user accounts; authenticates users and the admin."""

    def __init__(
        self,
        storage: KeyValueStorage,
        sessions: SessionState,
        admin_username: str,
        admin_password: str,
        hash_rounds: int = 12,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ):
        self._storage = storage
        self._sessions = sessions
        self._hash_rounds = hash_rounds
        self._clock = clock
        self._admin_username = admin_username
        self._admin_secret_hash = hash_secret(admin_password, hash_rounds)
        self._decoy_hash = hash_secret(uuid.uuid4().hex, hash_rounds)
        self._accounts = [
            UserAccount.from_record(r) for r in storage.read(USERS_KEY) or []
        ]

    def _commit(self, accounts: list[UserAccount]) -> None:
        """Write accounts to storage, then make them the current collection."""
        self._storage.write(USERS_KEY, [a.to_record() for a in accounts])
        self._accounts = accounts

    def _find_by_email(self, email: str) -> UserAccount | None:
        wanted = normalize_email(email)
        return next((a for a in self._accounts if a.email == wanted), None)

    # ─── Users ───────────────────────────────────────────────────

    def signup(
        self, email: str, secret: str, postal_code: str, university: str,
    ) -> AuthResult:
        if not secret_fits(secret):
            return AuthResult(success=False, message=SECRET_TOO_LONG_MESSAGE)
        if self._find_by_email(email):
            logger.info("Signup rejected: email already registered")
            return AuthResult(success=False, message=DUPLICATE_EMAIL_MESSAGE)

        account = UserAccount(
            id=UserId(uuid.uuid4().hex),
            email=normalize_email(email),
            postal_code=postal_code,
            university=university,
            created_at=self._clock().isoformat(),
            secret_hash=hash_secret(secret, self._hash_rounds),
        )
        self._commit([*self._accounts, account])
        user = account.public()
        self._sessions.set_user(user)
        logger.info("Account created", extra={"user_id": account.id})
        return AuthResult(success=True, user=user)

    def login(self, email: str, secret: str) -> AuthResult:
        account = self._find_by_email(email)
        stored_hash = account.secret_hash if account else self._decoy_hash
        if not verify_secret(secret, stored_hash) or account is None:
            logger.info("Login failed")
            return AuthResult(success=False, message=INVALID_CREDENTIALS_MESSAGE)

        user = account.public()
        self._sessions.set_user(user)
        return AuthResult(success=True, user=user)

    def get_current_user(self) -> dict | None:
        return self._sessions.current_user

    def logout_user(self) -> None:
        self._sessions.clear_user()

    # ─── Admin ───────────────────────────────────────────────────

    def admin_login(self, username: str, secret: str) -> AdminIdentity | None:
        """Check the single admin credential; start an admin session on match."""
        username_ok = same_text(username, self._admin_username)
        secret_ok = verify_secret(secret, self._admin_secret_hash)
        if not (username_ok and secret_ok):
            logger.warning("Admin login failed")
            return None
        admin = AdminIdentity(
            id=ADMIN_ID, username=self._admin_username, token=new_session_token(),
        )
        self._sessions.set_admin(admin)
        return admin

    def get_admin(self) -> AdminIdentity | None:
        return self._sessions.current_admin

    def logout_admin(self) -> None:
        self._sessions.clear_admin()

    def is_admin_token(self, token: str | None) -> bool:
        admin = self._sessions.current_admin
        if admin is None or not token:
            return False
        return same_text(token, admin.token)
