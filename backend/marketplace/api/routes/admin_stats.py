"""Admin Stats — inventory statistics, on demand and as a periodic SSE stream.

Invariants:
    - GET /stats recomputes on every request
    - Each SSE client gets its own StatsPoller, stopped when the client disconnects

Design Decisions:
    - StreamingResponse for SSE: event_generator yields formatted SSE lines
    - Poller → asyncio.Queue → generator: the poller owns timing, the
      generator only formats
"""

import asyncio
import json
import logging

from fastapi import APIRouter, Depends
from fastapi.responses import StreamingResponse

from marketplace.api.dependencies import get_marketplace, require_admin
from marketplace.schemas.stats import InventoryStatsResponse
from marketplace.services.inventory import StatsPoller
from marketplace.services.marketplace import Marketplace

logger = logging.getLogger(__name__)
router = APIRouter(
    prefix="/api/v1/admin/stats", tags=["admin"],
    dependencies=[Depends(require_admin)],
)

# SSE headers prevent proxy/browser buffering of streamed events.
_SSE_HEADERS = {
    "Cache-Control": "no-cache",
    "X-Accel-Buffering": "no",
    "Connection": "keep-alive",
}


def sse_line(event: dict) -> str:
    """Format event as SSE data line."""
    return f"data: {json.dumps(event, ensure_ascii=False)}\n\n"


@router.get("", response_model=InventoryStatsResponse)
async def get_stats(marketplace: Marketplace = Depends(get_marketplace)):
    return InventoryStatsResponse(**marketplace.inventory.compute_stats())


@router.get("/stream")
async def stream_stats(marketplace: Marketplace = Depends(get_marketplace)):
    """SSE stream of stats snapshots every stats_refresh_seconds."""
    updates: asyncio.Queue[dict] = asyncio.Queue()
    poller = StatsPoller(
        marketplace.inventory,
        marketplace.stats_refresh_seconds,
        updates.put_nowait,
    )

    async def event_generator():
        poller.start()
        try:
            while True:
                stats = await updates.get()
                yield sse_line({"type": "stats", "data": stats})
        except asyncio.CancelledError:
            logger.info("Client disconnected from stats stream")
            raise
        finally:
            poller.stop()

    return StreamingResponse(
        event_generator(),
        media_type="text/event-stream",
        headers=_SSE_HEADERS,
    )
