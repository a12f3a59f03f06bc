"""Inventory — aggregator over the live store and the periodic poller.

Tests cover:
    - total_items tracks approved quantities through any mutation sequence
    - The Calculus I moderation scenario
    - StatsPoller delivers snapshots and stops cleanly
"""

import asyncio

from marketplace.core.domain_types import BookStatus
from marketplace.services.inventory import StatsPoller


def _approved_quantity(listings) -> int:
    return sum(b.quantity for b in listings.list_by_status(BookStatus.APPROVED))


def test_stats_recomputed_from_current_state(marketplace, make_submission):
    listings, inventory = marketplace.listings, marketplace.inventory
    assert inventory.compute_stats()["total_items"] == 0

    a = listings.submit_listing(make_submission(quantity=3)).listing
    assert inventory.compute_stats()["total_items"] == 0

    listings.set_status(a.id, BookStatus.APPROVED)
    assert inventory.compute_stats()["total_items"] == 3


def test_total_items_matches_approved_sum_across_mutations(marketplace, make_submission):
    listings, inventory = marketplace.listings, marketplace.inventory
    ids = [
        listings.submit_listing(make_submission(quantity=q)).listing.id
        for q in (1, 2, 5, 0)
    ]
    steps = [
        lambda: listings.set_status(ids[0], BookStatus.APPROVED),
        lambda: listings.set_status(ids[1], BookStatus.APPROVED),
        lambda: listings.update_quantity(ids[1], 7),
        lambda: listings.set_status(ids[2], BookStatus.REJECTED, "dup"),
        lambda: listings.set_status(ids[3], BookStatus.APPROVED),
        lambda: listings.delete_listing(ids[0]),
        lambda: listings.set_status(ids[2], BookStatus.APPROVED),
        lambda: listings.set_status(ids[1], BookStatus.PENDING),
    ]
    for step in steps:
        step()
        assert inventory.compute_stats()["total_items"] == _approved_quantity(listings)


def test_calculus_scenario(marketplace, make_submission):
    listings, inventory = marketplace.listings, marketplace.inventory
    result = listings.submit_listing(
        make_submission(title="Calculus I", price=300, quantity=1),
    )
    listing = result.listing
    assert listing.status == BookStatus.PENDING

    assert listings.set_status(listing.id, "approved")
    visible = listings.list_books()
    assert [(b.id, b.price) for b in visible] == [(listing.id, 300)]

    before = inventory.compute_stats()
    assert listings.update_quantity(listing.id, 0)
    after = inventory.compute_stats()
    assert after["out_of_stock_count"] == before["out_of_stock_count"] + 1
    assert after["total_items"] == before["total_items"] - 1


async def test_poller_delivers_snapshots(marketplace):
    updates = []
    poller = StatsPoller(marketplace.inventory, 0.01, updates.append)
    poller.start()
    assert poller.running
    await asyncio.sleep(0.05)
    poller.stop()
    assert not poller.running
    assert len(updates) >= 2
    assert updates[0]["total_items"] == 0


async def test_stopped_poller_delivers_nothing_more(marketplace):
    updates = []
    poller = StatsPoller(marketplace.inventory, 0.01, updates.append)
    poller.start()
    await asyncio.sleep(0.03)
    poller.stop()
    await asyncio.sleep(0)
    count = len(updates)
    await asyncio.sleep(0.05)
    assert len(updates) == count


async def test_poller_start_and_stop_are_idempotent(marketplace):
    updates = []
    poller = StatsPoller(marketplace.inventory, 10, updates.append)
    poller.start()
    poller.start()
    await asyncio.sleep(0)
    poller.stop()
    poller.stop()
    assert updates and len(updates) == 1


async def test_poller_sees_store_changes(marketplace, make_submission):
    updates = []
    poller = StatsPoller(marketplace.inventory, 0.01, updates.append)
    poller.start()
    await asyncio.sleep(0.02)
    listing = marketplace.listings.submit_listing(make_submission(quantity=4)).listing
    marketplace.listings.set_status(listing.id, BookStatus.APPROVED)
    await asyncio.sleep(0.05)
    poller.stop()
    assert updates[-1]["total_items"] == 4
