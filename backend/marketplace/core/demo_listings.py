"""Demo Catalog — listings seeded into an empty store on first start.

Invariants:
    - Mix of statuses: two APPROVED (visible), one PENDING (moderation queue)
    - Ids are stable strings so seeded data is recognisable in logs
"""

from marketplace.core.domain_types import (
    BookCondition, BookStatus, ListingId, University,
)
from marketplace.core.listing import BookListing


def build_demo_listings(created_at: str) -> list[BookListing]:
    return [
        BookListing(
            id=ListingId("1"),
            title="Modern Operating Systems",
            author_doctor="Andrew S. Tanenbaum",
            university=University.BUE,
            subject="Computer Science",
            grade_year="Year 2",
            condition=BookCondition.GOOD,
            edition="4th Ed",
            price=450,
            description="Great condition, some highlights but very readable.",
            photos="https://picsum.photos/seed/os/400/600",
            pdf_url="https://www.w3.org/WAI/ER/tests/xhtml/testfiles/resources/pdf/dummy.pdf",
            status=BookStatus.APPROVED,
            seller_id="s1",
            seller_name="Ahmed Ali",
            seller_phone="01012345678",
            quantity=1,
            created_at=created_at,
        ),
        BookListing(
            id=ListingId("2"),
            title="Principles of Economics",
            author_doctor="N. Gregory Mankiw",
            university=University.AUC,
            subject="Economics",
            grade_year="Year 1",
            condition=BookCondition.LIKE_NEW,
            edition="9th Ed",
            price=800,
            description="Hardly used. Still has the original smell!",
            photos="https://picsum.photos/seed/econ/400/600",
            status=BookStatus.APPROVED,
            seller_id="s2",
            seller_name="Sara Ibrahim",
            seller_phone="01198765432",
            quantity=2,
            created_at=created_at,
        ),
        BookListing(
            id=ListingId("3"),
            title="Advanced Engineering Math",
            author_doctor="Erwin Kreyszig",
            university=University.GUC,
            subject="Engineering",
            grade_year="Year 3",
            condition=BookCondition.GOOD,
            edition="10th Ed",
            price=600,
            photos="https://picsum.photos/seed/math/400/600",
            status=BookStatus.PENDING,
            seller_id="s3",
            seller_name="Mona Hassan",
            seller_phone="01234567890",
            quantity=1,
            created_at=created_at,
        ),
    ]
