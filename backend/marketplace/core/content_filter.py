"""Content Filter — keyword heuristic that flags likely pirated-copy listings.

Invariants:
    - Pure: no IO, no side effects, never raises
    - Matching is case-folded substring search, not tokenized
    - Flagging is advisory; callers never block creation on it

Design Decisions:
    - Substring match over word boundaries: "scanned" and "Google Drive link"
      must both trip the filter, false positives go to the moderation queue
"""

PIRACY_KEYWORDS: tuple[str, ...] = (
    "soft copy",
    "scan",
    "ebook",
    "link",
    "drive",
    "pdf only",
    "cracked",
)


def build_screening_text(
    title: str | None, description: str | None, author_doctor: str | None,
) -> str:
    """Join the free-text listing fields that are screened at submission."""
    return " ".join(part or "" for part in (title, description, author_doctor))


def matched_keywords(text: str) -> list[str]:
    """Denylist entries found in text, in denylist order."""
    folded = text.casefold()
    return [kw for kw in PIRACY_KEYWORDS if kw in folded]


def is_flagged(text: str) -> bool:
    return any(kw in text.casefold() for kw in PIRACY_KEYWORDS)
