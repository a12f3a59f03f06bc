"""Book Listing — record type, submission struct, and the defaulting step.

Invariants:
    - A new listing is always PENDING; ListingSubmission has no status field
    - rejection_reason is only meaningful when status == REJECTED
    - price and quantity are non-negative integers
    - to_record() is JSON-safe (enums as values), from_record() is its inverse

Design Decisions:
    - Dataclasses over dicts: field names checked once here, stores and
      routes never index into raw records
    - Clock and id factory passed in: create_listing stays pure and testable
"""

from dataclasses import asdict, dataclass, fields

from marketplace.core.domain_types import (
    BookCondition, BookStatus, ListingId, University,
)

DEFAULT_CONDITION = BookCondition.GOOD
DEFAULT_QUANTITY = 1


@dataclass
class ListingSubmission:
    """Seller-supplied listing data. Required fields have no default."""
    title: str
    author_doctor: str
    university: University
    price: int
    seller_id: str
    seller_name: str
    seller_phone: str
    subject: str | None = None
    grade_year: str | None = None
    condition: BookCondition | None = None
    edition: str | None = None
    description: str | None = None
    photos: str | None = None
    pdf_url: str | None = None
    quantity: int | None = None


@dataclass
class BookListing:
    """A book-for-sale record owned by the listing store."""
    id: ListingId
    title: str
    author_doctor: str
    university: University
    condition: BookCondition
    price: int
    photos: str
    status: BookStatus
    seller_id: str
    seller_name: str
    seller_phone: str
    quantity: int
    created_at: str
    subject: str | None = None
    grade_year: str | None = None
    edition: str | None = None
    description: str | None = None
    pdf_url: str | None = None
    rejection_reason: str | None = None

    @property
    def is_visible(self) -> bool:
        return self.status == BookStatus.APPROVED

    def to_record(self) -> dict:
        """JSON-safe dict for durable storage."""
        record = asdict(self)
        record["university"] = self.university.value
        record["condition"] = self.condition.value
        record["status"] = self.status.value
        return record

    @classmethod
    def from_record(cls, record: dict) -> "BookListing":
        known = {f.name for f in fields(cls)}
        data = {k: v for k, v in record.items() if k in known}
        data["university"] = University(data["university"])
        data["condition"] = BookCondition(data["condition"])
        data["status"] = BookStatus(data["status"])
        return cls(**data)


def apply_listing_defaults(
    submission: ListingSubmission, placeholder_photo: str,
) -> ListingSubmission:
    """Fill optional fields that have a marketplace default."""
    return ListingSubmission(
        **{
            **asdict(submission),
            "condition": submission.condition or DEFAULT_CONDITION,
            "quantity": (
                DEFAULT_QUANTITY if submission.quantity is None
                else submission.quantity
            ),
            "photos": submission.photos or placeholder_photo,
        }
    )


def create_listing(
    submission: ListingSubmission,
    listing_id: ListingId,
    created_at: str,
    placeholder_photo: str,
) -> BookListing:
    """Build a new PENDING listing from a submission."""
    filled = apply_listing_defaults(submission, placeholder_photo)
    return BookListing(
        id=listing_id,
        title=filled.title,
        author_doctor=filled.author_doctor,
        university=University(filled.university),
        condition=BookCondition(filled.condition),
        price=filled.price,
        photos=filled.photos,
        status=BookStatus.PENDING,
        seller_id=filled.seller_id,
        seller_name=filled.seller_name,
        seller_phone=filled.seller_phone,
        quantity=filled.quantity,
        created_at=created_at,
        subject=filled.subject,
        grade_year=filled.grade_year,
        edition=filled.edition,
        description=filled.description,
        pdf_url=filled.pdf_url,
    )


def matches_search(listing: BookListing, search: str) -> bool:
    """Case-folded substring match on title OR author."""
    needle = search.casefold()
    return (
        needle in listing.title.casefold()
        or needle in listing.author_doctor.casefold()
    )
