"""Listing Store — authoritative collection of book listings and their lifecycle.

Invariants:
    - Buyers only ever see APPROVED listings (list_books, list_stock)
    - submit_listing always creates a PENDING listing with a fresh id and timestamp
    - Flagged submissions are created anyway; the result carries an advisory message
    - Mutations on an unknown id return False and leave the collection untouched
    - Every mutation persists the full collection before returning
    - A failed storage write leaves the in-memory collection unchanged
    - Quantities are never negative (rejected with InvalidQuantityError)

Design Decisions:
    - Copy-on-write: mutations build the next collection, write it, then
      swap it in; listings are replaced, never edited in place
    - Insertion order is the only ordering guarantee (no sort, no pagination)
    - Moving a listing out of REJECTED clears its rejection reason
    - Demo catalog seeded only when storage has never held a listings record
"""

import logging
import uuid
from dataclasses import dataclass, replace
from datetime import datetime, timezone
from typing import Callable

from marketplace.core.content_filter import (
    build_screening_text, is_flagged, matched_keywords,
)
from marketplace.core.demo_listings import build_demo_listings
from marketplace.core.domain_types import (
    ALL_UNIVERSITIES, BookStatus, ListingId, University,
)
from marketplace.core.errors import ErrorContext, InvalidQuantityError
from marketplace.core.listing import (
    BookListing, ListingSubmission, create_listing, matches_search,
)
from marketplace.core.storage_protocols import LISTINGS_KEY, KeyValueStorage

logger = logging.getLogger(__name__)

FLAGGED_MESSAGE = (
    "Your listing has been flagged for review due to specific keywords. "
    "It will be moderated soon."
)


@dataclass
class SubmissionResult:
    """Outcome of submit_listing. message is set only when flagged."""
    success: bool
    listing: BookListing | None = None
    message: str | None = None

    @property
    def flagged(self) -> bool:
        return bool(self.message)


def _new_listing_id() -> ListingId:
    return ListingId(uuid.uuid4().hex[:12])


class ListingStore:
    """Owns all book listings; enforces the moderation lifecycle."""

    def __init__(
        self,
        storage: KeyValueStorage,
        placeholder_photo: str,
        seed_demo: bool = False,
        clock: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
        id_factory: Callable[[], ListingId] = _new_listing_id,
    ):
        self._storage = storage
        self._placeholder_photo = placeholder_photo
        self._clock = clock
        self._id_factory = id_factory

        self._books: list[BookListing] = []
        records = storage.read(LISTINGS_KEY)
        if records is None:
            self._commit(
                build_demo_listings(clock().isoformat()) if seed_demo else [],
            )
            if seed_demo:
                logger.info(f"Seeded {len(self._books)} demo listings")
        else:
            self._books = [BookListing.from_record(r) for r in records]

    def _commit(self, books: list[BookListing]) -> None:
        """Write books to storage, then make them the current collection."""
        self._storage.write(LISTINGS_KEY, [b.to_record() for b in books])
        self._books = books

    def _find(self, listing_id: str) -> BookListing | None:
        return next((b for b in self._books if b.id == listing_id), None)

    def _replace(self, updated: BookListing) -> None:
        self._commit([updated if b.id == updated.id else b for b in self._books])

    # ─── Buyer views ─────────────────────────────────────────────

    def list_books(
        self,
        university: University | str | None = None,
        search: str | None = None,
    ) -> list[BookListing]:
        """Approved listings, optionally by university and title/author search."""
        books = self.list_stock(university)
        if search:
            books = [b for b in books if matches_search(b, search)]
        return books

    def list_stock(
        self, university: University | str | None = None,
    ) -> list[BookListing]:
        """Approved listings, optionally restricted to one university."""
        stock = [b for b in self._books if b.is_visible]
        if university and university != ALL_UNIVERSITIES:
            stock = [b for b in stock if b.university == University(university)]
        return stock

    def get_listing(self, listing_id: str) -> BookListing | None:
        return self._find(listing_id)

    # ─── Seller submission ───────────────────────────────────────

    def submit_listing(self, submission: ListingSubmission) -> SubmissionResult:
        """Create a PENDING listing; screen its text for piracy keywords."""
        if submission.quantity is not None and submission.quantity < 0:
            raise InvalidQuantityError(submission.quantity)

        listing = create_listing(
            submission,
            listing_id=self._id_factory(),
            created_at=self._clock().isoformat(),
            placeholder_photo=self._placeholder_photo,
        )
        self._commit([*self._books, listing])

        text = build_screening_text(
            submission.title, submission.description, submission.author_doctor,
        )
        if is_flagged(text):
            logger.warning(
                "Listing flagged for review",
                extra={
                    "listing_id": listing.id,
                    "keywords": matched_keywords(text),
                },
            )
            return SubmissionResult(
                success=True, listing=listing, message=FLAGGED_MESSAGE,
            )

        logger.info("Listing submitted", extra={"listing_id": listing.id})
        return SubmissionResult(success=True, listing=listing)

    # ─── Admin moderation ────────────────────────────────────────

    def list_by_status(self, status: BookStatus | None = None) -> list[BookListing]:
        if status is None:
            return list(self._books)
        return [b for b in self._books if b.status == status]

    def set_status(
        self, listing_id: str, status: BookStatus, reason: str | None = None,
    ) -> bool:
        book = self._find(listing_id)
        if book is None:
            return False
        status = BookStatus(status)
        if status != BookStatus.REJECTED:
            rejection_reason = None
        else:
            rejection_reason = reason or book.rejection_reason
        self._replace(replace(
            book, status=status, rejection_reason=rejection_reason,
        ))
        logger.info(
            "Listing status changed",
            extra={"listing_id": listing_id, "status": status.value},
        )
        return True

    def delete_listing(self, listing_id: str) -> bool:
        if self._find(listing_id) is None:
            return False
        self._commit([b for b in self._books if b.id != listing_id])
        logger.info("Listing deleted", extra={"listing_id": listing_id})
        return True

    def update_quantity(self, listing_id: str, quantity: int) -> bool:
        if quantity < 0:
            raise InvalidQuantityError(
                quantity, ErrorContext(listing_id=listing_id),
            )
        book = self._find(listing_id)
        if book is None:
            return False
        self._replace(replace(book, quantity=quantity))
        logger.info(
            f"Listing quantity set to {quantity}",
            extra={"listing_id": listing_id},
        )
        return True
