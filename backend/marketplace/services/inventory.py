"""Inventory — on-demand stock statistics and the periodic dashboard refresh.

Invariants:
    - compute_stats() always recomputes from the listing store's current state
    - StatsPoller runs at most one task; stop() cancels it and is idempotent
    - A stopped poller never delivers another update

Design Decisions:
    - asyncio task over a thread: the API runs on one event loop and the
      store is not thread-safe
    - First snapshot delivered immediately on start, then every interval
"""

import asyncio
import logging
from typing import Callable

from marketplace.core.domain_types import BookStatus
from marketplace.core.inventory_stats import compute_inventory_stats
from marketplace.services.listing_store import ListingStore

logger = logging.getLogger(__name__)


class InventoryAggregator:
    """Read-only stock statistics over the approved listings."""

    def __init__(self, listings: ListingStore):
        self._listings = listings

    def compute_stats(self) -> dict:
        return compute_inventory_stats(
            self._listings.list_by_status(BookStatus.APPROVED),
        )


class StatsPoller:
    """Recompute stats every interval_seconds and hand them to on_update."""

    def __init__(
        self,
        aggregator: InventoryAggregator,
        interval_seconds: float,
        on_update: Callable[[dict], None],
    ):
        self._aggregator = aggregator
        self._interval = interval_seconds
        self._on_update = on_update
        self._task: asyncio.Task | None = None

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    def start(self) -> None:
        """Start polling on the running event loop."""
        if self.running:
            return
        self._task = asyncio.get_running_loop().create_task(self._run())
        logger.info(f"Stats polling started (every {self._interval}s)")

    def stop(self) -> None:
        if self._task is None:
            return
        self._task.cancel()
        self._task = None
        logger.info("Stats polling stopped")

    async def _run(self) -> None:
        while True:
            self._on_update(self._aggregator.compute_stats())
            await asyncio.sleep(self._interval)
