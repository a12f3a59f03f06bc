"""Listing Schemas — Pydantic models for listing submission, moderation and views.

Invariants:
    - ListingCreate: title/author/seller fields stripped and non-empty, price >= 0
    - ListingCreate ignores unknown fields, so a client-sent "status" never reaches the store
    - QuantityUpdate.quantity >= 0
    - StatusUpdate.reason only accepted alongside "rejected"

Design Decisions:
    - to_submission() is the single conversion point from API input to core struct
    - from_listing() classmethods keep routes free of field-by-field copying
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator, model_validator

from marketplace.core.domain_types import BookCondition, BookStatus, University
from marketplace.core.listing import BookListing, ListingSubmission


class ListingCreate(BaseModel):
    """Seller submission form."""
    model_config = ConfigDict(extra="ignore")

    title: str = Field(min_length=1, max_length=300)
    author_doctor: str = Field(min_length=1, max_length=200)
    university: University
    price: int = Field(ge=0)
    seller_name: str = Field(min_length=1, max_length=120)
    seller_phone: str = Field(min_length=5, max_length=30)
    subject: str | None = Field(None, max_length=120)
    grade_year: str | None = Field(None, max_length=50)
    condition: BookCondition | None = None
    edition: str | None = Field(None, max_length=50)
    description: str | None = Field(None, max_length=5000)
    photos: str | None = None
    pdf_url: str | None = None
    quantity: int | None = Field(None, ge=0)

    @field_validator("title", "author_doctor", "seller_name", "seller_phone")
    @classmethod
    def strip_required(cls, v: str) -> str:
        v = v.strip()
        if not v:
            raise ValueError("field cannot be empty or whitespace")
        return v

    def to_submission(self, seller_id: str) -> ListingSubmission:
        return ListingSubmission(
            title=self.title,
            author_doctor=self.author_doctor,
            university=self.university,
            price=self.price,
            seller_id=seller_id,
            seller_name=self.seller_name,
            seller_phone=self.seller_phone,
            subject=self.subject,
            grade_year=self.grade_year,
            condition=self.condition,
            edition=self.edition,
            description=self.description,
            photos=self.photos,
            pdf_url=self.pdf_url,
            quantity=self.quantity,
        )


class ListingResponse(BaseModel):
    """Public listing view."""
    id: str
    title: str
    author_doctor: str
    university: University
    subject: str | None = None
    grade_year: str | None = None
    condition: BookCondition
    edition: str | None = None
    price: int
    description: str | None = None
    photos: str
    pdf_url: str | None = None
    status: BookStatus
    rejection_reason: str | None = None
    seller_id: str
    seller_name: str
    seller_phone: str
    quantity: int
    created_at: str

    @classmethod
    def from_listing(cls, listing: BookListing) -> "ListingResponse":
        return cls(**listing.to_record())


class SubmissionResponse(BaseModel):
    """Result of a seller submission. message is the flag advisory, if any."""
    success: bool
    flagged: bool
    message: str | None = None
    listing: ListingResponse


class StatusUpdate(BaseModel):
    """Admin moderation decision."""
    status: BookStatus
    reason: str | None = Field(None, max_length=1000)

    @model_validator(mode="after")
    def reason_only_on_rejection(self):
        if self.reason and self.status != BookStatus.REJECTED:
            raise ValueError("reason is only accepted when rejecting a listing")
        return self


class QuantityUpdate(BaseModel):
    """Admin stock correction."""
    quantity: int = Field(ge=0)
