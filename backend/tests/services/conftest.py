"""Service test fixtures — fresh in-memory Marketplace + FastAPI test client.

Invariants:
    - Every test gets its own InMemoryStorage and Marketplace (no shared state)
    - get_marketplace dependency overridden to return the test Marketplace
    - bcrypt at minimum cost so auth tests stay fast

Design Decisions:
    - ASGITransport does not run the lifespan: the override is the only
      source of the Marketplace in route tests
"""

import pytest
from httpx import ASGITransport, AsyncClient

from marketplace.api.dependencies import get_marketplace
from marketplace.config import Settings
from marketplace.core.domain_types import University
from marketplace.core.errors import StorageError
from marketplace.core.listing import ListingSubmission
from marketplace.infrastructure.storage import InMemoryStorage
from marketplace.main import app
from marketplace.services.marketplace import build_marketplace

ADMIN_USERNAME = "admin"
ADMIN_PASSWORD = "admin123"


@pytest.fixture
def settings():
    return Settings(
        database_url="memory://",
        admin_username=ADMIN_USERNAME,
        admin_password=ADMIN_PASSWORD,
        bcrypt_rounds=4,
        seed_demo_listings=False,
        stats_refresh_seconds=0.01,
    )


@pytest.fixture
def storage():
    return InMemoryStorage()


class FlakyStorage(InMemoryStorage):
    """InMemoryStorage whose writes and removes fail while fail_writes is set."""

    def __init__(self):
        super().__init__()
        self.fail_writes = False

    def write(self, key, value):
        if self.fail_writes:
            raise StorageError("disk full", "write")
        super().write(key, value)

    def remove(self, key):
        if self.fail_writes:
            raise StorageError("disk full", "remove")
        super().remove(key)


@pytest.fixture
def flaky_storage():
    return FlakyStorage()


@pytest.fixture
def marketplace(settings, storage):
    return build_marketplace(settings, storage)


@pytest.fixture
def listings(marketplace):
    return marketplace.listings


@pytest.fixture
def accounts(marketplace):
    return marketplace.accounts


@pytest.fixture
def make_submission():
    """Factory for valid ListingSubmission objects with overridable fields."""
    def _make(**overrides) -> ListingSubmission:
        data = dict(
            title="Calculus I",
            author_doctor="James Stewart",
            university=University.BUE,
            price=300,
            seller_id="u1",
            seller_name="Ahmed Ali",
            seller_phone="01012345678",
        )
        data.update(overrides)
        return ListingSubmission(**data)
    return _make


@pytest.fixture
async def client(marketplace):
    """FastAPI test client with the Marketplace dependency overridden."""
    app.dependency_overrides[get_marketplace] = lambda: marketplace

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
def admin_headers(accounts):
    admin = accounts.admin_login(ADMIN_USERNAME, ADMIN_PASSWORD)
    return {"X-Admin-Token": admin.token}
