"""Admin Listings — moderation queue, status transitions, stock and deletion.

Invariants:
    - Every route requires the admin session (require_admin)
    - Unknown listing ids → 404; the collection is left untouched
    - Negative quantities never reach the store (schema ge=0, store re-checks)
"""

import logging

from fastapi import APIRouter, Depends, Query, status

from marketplace.api.dependencies import get_marketplace, require_admin
from marketplace.api.routes.listings import parse_university
from marketplace.core.domain_types import BookStatus
from marketplace.core.errors import ErrorContext, ResourceNotFoundError
from marketplace.schemas.listing import (
    ListingResponse, QuantityUpdate, StatusUpdate,
)
from marketplace.services.marketplace import Marketplace

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/admin", tags=["admin"],
    dependencies=[Depends(require_admin)],
)


def _listing_or_404(marketplace: Marketplace, listing_id: str) -> ListingResponse:
    listing = marketplace.listings.get_listing(listing_id)
    if listing is None:
        raise ResourceNotFoundError(
            "Listing", listing_id, ErrorContext(listing_id=listing_id),
        )
    return ListingResponse.from_listing(listing)


@router.get("/listings", response_model=list[ListingResponse])
async def list_by_status(
    status_filter: BookStatus | None = Query(None, alias="status"),
    marketplace: Marketplace = Depends(get_marketplace),
):
    """All listings, or only those with the given status."""
    books = marketplace.listings.list_by_status(status_filter)
    return [ListingResponse.from_listing(b) for b in books]


@router.get("/stock", response_model=list[ListingResponse])
async def list_stock(
    university: str | None = Query(
        None, pattern=r"^(BUE|AUC|GUC|All Universities)$",
    ),
    marketplace: Marketplace = Depends(get_marketplace),
):
    """Approved listings (the stock table), optionally per university."""
    books = marketplace.listings.list_stock(parse_university(university))
    return [ListingResponse.from_listing(b) for b in books]


@router.patch("/listings/{listing_id}/status", response_model=ListingResponse)
async def set_status(
    listing_id: str,
    body: StatusUpdate,
    marketplace: Marketplace = Depends(get_marketplace),
):
    if not marketplace.listings.set_status(listing_id, body.status, body.reason):
        raise ResourceNotFoundError(
            "Listing", listing_id, ErrorContext(listing_id=listing_id),
        )
    return _listing_or_404(marketplace, listing_id)


@router.patch("/listings/{listing_id}/quantity", response_model=ListingResponse)
async def update_quantity(
    listing_id: str,
    body: QuantityUpdate,
    marketplace: Marketplace = Depends(get_marketplace),
):
    if not marketplace.listings.update_quantity(listing_id, body.quantity):
        raise ResourceNotFoundError(
            "Listing", listing_id, ErrorContext(listing_id=listing_id),
        )
    return _listing_or_404(marketplace, listing_id)


@router.delete("/listings/{listing_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_listing(
    listing_id: str, marketplace: Marketplace = Depends(get_marketplace),
):
    """Hard delete."""
    if not marketplace.listings.delete_listing(listing_id):
        raise ResourceNotFoundError(
            "Listing", listing_id, ErrorContext(listing_id=listing_id),
        )
