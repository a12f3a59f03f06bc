"""Marketplace — composition root wiring storage, sessions and stores.

Invariants:
    - Built once per process (FastAPI lifespan) and injected into routes
    - All stores share one storage backend and one SessionState

Design Decisions:
    - Explicit object over module-level singletons: each test builds its own
"""

from dataclasses import dataclass

from marketplace.config import Settings
from marketplace.core.storage_protocols import KeyValueStorage
from marketplace.services.account_store import AccountStore
from marketplace.services.inventory import InventoryAggregator
from marketplace.services.listing_store import ListingStore
from marketplace.services.session_state import SessionState


@dataclass
class Marketplace:
    """Every store the API layer talks to."""
    storage: KeyValueStorage
    sessions: SessionState
    listings: ListingStore
    accounts: AccountStore
    inventory: InventoryAggregator
    stats_refresh_seconds: float


def build_marketplace(settings: Settings, storage: KeyValueStorage) -> Marketplace:
    sessions = SessionState(storage)
    listings = ListingStore(
        storage,
        placeholder_photo=settings.placeholder_photo_url,
        seed_demo=settings.seed_demo_listings,
    )
    accounts = AccountStore(
        storage,
        sessions,
        admin_username=settings.admin_username,
        admin_password=settings.admin_password,
        hash_rounds=settings.bcrypt_rounds,
    )
    return Marketplace(
        storage=storage,
        sessions=sessions,
        listings=listings,
        accounts=accounts,
        inventory=InventoryAggregator(listings),
        stats_refresh_seconds=settings.stats_refresh_seconds,
    )
