"""Listings — buyer browsing and seller submission.

Invariants:
    - GET endpoints expose APPROVED listings only
    - POST always yields a PENDING listing; the flag advisory is returned verbatim
    - seller_id comes from the current user session, "guest" when signed out
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from marketplace.api.dependencies import get_marketplace
from marketplace.core.domain_types import ALL_UNIVERSITIES, University
from marketplace.core.errors import ErrorContext, ResourceNotFoundError
from marketplace.schemas.listing import (
    ListingCreate, ListingResponse, SubmissionResponse,
)
from marketplace.services.marketplace import Marketplace

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/v1/listings", tags=["listings"])

GUEST_SELLER_ID = "guest"


def parse_university(value: str | None) -> University | None:
    """Query value → University; None and the all-universities sentinel mean no filter."""
    if not value or value == ALL_UNIVERSITIES:
        return None
    return University(value)


@router.get("", response_model=list[ListingResponse])
async def list_books(
    university: str | None = Query(
        None, pattern=r"^(BUE|AUC|GUC|All Universities)$",
    ),
    search: str | None = Query(None, max_length=200),
    marketplace: Marketplace = Depends(get_marketplace),
):
    """Browse approved listings."""
    books = marketplace.listings.list_books(parse_university(university), search)
    return [ListingResponse.from_listing(b) for b in books]


@router.get("/{listing_id}", response_model=ListingResponse)
async def get_listing(
    listing_id: str, marketplace: Marketplace = Depends(get_marketplace),
):
    """Listing detail. Unapproved listings are reported as missing."""
    listing = marketplace.listings.get_listing(listing_id)
    if listing is None or not listing.is_visible:
        raise ResourceNotFoundError(
            "Listing", listing_id, ErrorContext(listing_id=listing_id),
        )
    return ListingResponse.from_listing(listing)


@router.post(
    "", response_model=SubmissionResponse,
    status_code=status.HTTP_201_CREATED,
)
async def submit_listing(
    body: ListingCreate, marketplace: Marketplace = Depends(get_marketplace),
):
    """Submit a listing for moderation."""
    user = marketplace.accounts.get_current_user()
    seller_id = user["id"] if user else GUEST_SELLER_ID
    result = marketplace.listings.submit_listing(body.to_submission(seller_id))
    return SubmissionResponse(
        success=result.success,
        flagged=result.flagged,
        message=result.message,
        listing=ListingResponse.from_listing(result.listing),
    )
