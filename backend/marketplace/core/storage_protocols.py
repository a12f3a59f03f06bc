"""Boundary Protocols — contract between the stores and durable storage.

Invariants:
    - Core NEVER imports from infrastructure; dependency arrows point inward only
    - Values crossing the boundary are JSON-serializable (dict/list/str/int/None)
    - write() is synchronous and durable when it returns

Design Decisions:
    - Protocol over ABC: structural subtyping, no inheritance hierarchy
    - Key/value shape mirrors the four independent records the marketplace
      keeps (listings, accounts, admin session, current user session)
"""

from typing import Any, Protocol

LISTINGS_KEY = "bue_marketplace_books"
ADMIN_KEY = "bue_marketplace_admin"
USERS_KEY = "bue_marketplace_users"
CURRENT_USER_KEY = "bue_marketplace_current_user"


class KeyValueStorage(Protocol):
    """Contract for durable record storage — implemented by infrastructure."""
    def read(self, key: str) -> Any | None: ...
    def write(self, key: str, value: Any) -> None: ...
    def remove(self, key: str) -> None: ...
