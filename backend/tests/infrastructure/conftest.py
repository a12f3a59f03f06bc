"""Infrastructure test fixtures."""

import pytest

from marketplace.core.domain_types import University
from marketplace.core.listing import ListingSubmission


@pytest.fixture
def make_listing_submission():
    def _make(**overrides) -> ListingSubmission:
        data = dict(
            title="Physics", author_doctor="Halliday", university=University.AUC,
            price=500, seller_id="u1", seller_name="Sara", seller_phone="01198765432",
        )
        data.update(overrides)
        return ListingSubmission(**data)
    return _make
