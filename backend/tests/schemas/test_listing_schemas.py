"""Listing and account schemas — boundary validation.

Invariants:
    - ListingCreate drops unknown fields (status never reaches the store)
    - Required text fields are stripped and must be non-empty
    - StatusUpdate only accepts a reason with a rejection
    - SignupRequest requires matching password confirmation
"""

import pytest
from pydantic import ValidationError

from marketplace.core.domain_types import BookStatus, University
from marketplace.schemas.account import SignupRequest
from marketplace.schemas.listing import ListingCreate, QuantityUpdate, StatusUpdate


def _listing(**overrides) -> dict:
    data = {
        "title": "  Calculus I  ",
        "author_doctor": "Stewart",
        "university": "GUC",
        "price": 300,
        "seller_name": "Mona",
        "seller_phone": "01234567890",
    }
    data.update(overrides)
    return data


def test_listing_create_strips_and_converts():
    body = ListingCreate(**_listing())
    assert body.title == "Calculus I"
    assert body.university == University.GUC


def test_listing_create_ignores_status_field():
    body = ListingCreate(**_listing(status="approved"))
    assert not hasattr(body, "status")
    submission = body.to_submission("u1")
    assert not hasattr(submission, "status")
    assert submission.seller_id == "u1"


def test_listing_create_rejects_blank_title():
    with pytest.raises(ValidationError):
        ListingCreate(**_listing(title="   "))


def test_listing_create_rejects_negative_quantity():
    with pytest.raises(ValidationError):
        ListingCreate(**_listing(quantity=-1))


def test_listing_create_optional_fields_default_to_none():
    submission = ListingCreate(**_listing()).to_submission("u1")
    assert submission.condition is None
    assert submission.quantity is None
    assert submission.photos is None


def test_status_update_reason_requires_rejection():
    assert StatusUpdate(status="rejected", reason="scan").reason == "scan"
    assert StatusUpdate(status="pending").status == BookStatus.PENDING
    with pytest.raises(ValidationError):
        StatusUpdate(status="approved", reason="why")


def test_status_update_rejects_unknown_status():
    with pytest.raises(ValidationError):
        StatusUpdate(status="archived")


def test_quantity_update_non_negative():
    assert QuantityUpdate(quantity=0).quantity == 0
    with pytest.raises(ValidationError):
        QuantityUpdate(quantity=-3)


def test_signup_requires_matching_confirmation():
    with pytest.raises(ValidationError):
        SignupRequest(
            email="a@x.com", password="secret1", confirm_password="secret2",
            postal_code="12345", university="BUE",
        )
