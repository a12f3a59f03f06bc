"""Domain Types — rich types that replace bare primitives across the codebase.

Invariants:
    - ListingId, UserId wrap str; never mix them in store signatures
    - All valid states encoded as Enums, no raw string matching
    - ALL_UNIVERSITIES is a filter sentinel, never a stored university

Design Decisions:
    - NewType over dataclass wrappers: zero runtime cost, full type-checker support
    - str Enums: serialize to JSON without custom encoders (records are JSON)
"""

from enum import Enum
from typing import NewType


# ─── Identity Types ──────────────────────────────────────────────

ListingId = NewType("ListingId", str)
UserId = NewType("UserId", str)


# ─── Enums ───────────────────────────────────────────────────────

class University(str, Enum):
    """Universities a listing can belong to."""
    BUE = "BUE"
    AUC = "AUC"
    GUC = "GUC"


# "All Universities" filter value accepted by list_books / list_stock
ALL_UNIVERSITIES = "All Universities"


class BookStatus(str, Enum):
    """Moderation lifecycle. Only APPROVED is visible to buyers."""
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"


class BookCondition(str, Enum):
    """Physical condition of a listed copy."""
    NEW = "New"
    LIKE_NEW = "Like New"
    GOOD = "Good"
    FAIR = "Fair"
