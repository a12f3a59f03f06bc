"""Inventory Stats — pure computation of stock statistics from listings.

Invariants:
    - Only APPROVED listings count; everything else is ignored
    - Returns a flat dict of integers plus two breakdown dicts (JSON-safe)
    - Never raises: an empty stock yields zeros everywhere
    - Recomputed from scratch on every call (no cache, no increments)

Design Decisions:
    - Pure function, not a store method: the store owns records, stats are presentation
    - avg_price is the per-listing mean (not quantity-weighted), rounded half-up
    - unique_titles counts listing records, not distinct title strings
    - Breakdowns always carry every enum member, zero-filled
"""

import math

from marketplace.core.domain_types import BookCondition, BookStatus, University
from marketplace.core.listing import BookListing

LOW_STOCK_THRESHOLD = 2


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def compute_inventory_stats(listings: list[BookListing]) -> dict:
    """Compute dashboard stock statistics. Pure, no IO."""
    stock = [b for b in listings if b.status == BookStatus.APPROVED]

    by_university = {u.value: 0 for u in University}
    by_condition = {c.value: 0 for c in BookCondition}
    for book in stock:
        by_university[book.university.value] += book.quantity
        by_condition[book.condition.value] += book.quantity

    avg_price = (
        _round_half_up(sum(b.price for b in stock) / len(stock)) if stock else 0
    )

    return {
        "total_items": sum(b.quantity for b in stock),
        "unique_titles": len(stock),
        "total_value": sum(b.price * b.quantity for b in stock),
        "avg_price": avg_price,
        "stock_by_university": by_university,
        "stock_by_condition": by_condition,
        "low_stock_count": sum(
            1 for b in stock if 0 < b.quantity <= LOW_STOCK_THRESHOLD
        ),
        "out_of_stock_count": sum(1 for b in stock if b.quantity == 0),
        "total_sellers": len({b.seller_id for b in stock}),
    }
