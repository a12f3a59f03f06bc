"""Credentials — salted secret hashing and constant-time verification.

Invariants:
    - Secrets are never stored or compared in clear text
    - verify_secret never raises on malformed stored hashes (returns False)
    - Comparison time does not depend on where two values differ
    - Only secrets of at most MAX_SECRET_BYTES UTF-8 bytes are hashed

Design Decisions:
    - bcrypt: per-hash salt embedded in the hash string, checkpw is constant time
    - rounds configurable so tests can use the bcrypt minimum (4)
    - bcrypt only reads 72 bytes and rejects longer input, so callers check
      secret_fits() and refuse long secrets instead of truncating them
"""

import secrets

import bcrypt

MIN_ROUNDS = 4
MAX_SECRET_BYTES = 72


def secret_fits(secret: str) -> bool:
    return len(secret.encode("utf-8")) <= MAX_SECRET_BYTES


def hash_secret(secret: str, rounds: int = 12) -> str:
    salt = bcrypt.gensalt(rounds=max(rounds, MIN_ROUNDS))
    return bcrypt.hashpw(secret.encode("utf-8"), salt).decode("utf-8")


def verify_secret(secret: str, hashed: str | None) -> bool:
    """Check secret against a stored bcrypt hash."""
    if not hashed or not secret_fits(secret):
        return False
    try:
        return bcrypt.checkpw(secret.encode("utf-8"), hashed.encode("utf-8"))
    except ValueError:
        return False


def same_text(a: str, b: str) -> bool:
    """Constant-time string equality (usernames, session tokens)."""
    return secrets.compare_digest(a.encode("utf-8"), b.encode("utf-8"))


def new_session_token() -> str:
    return secrets.token_urlsafe(32)
