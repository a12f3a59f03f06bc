"""Content Filter — keyword heuristic for pirated-copy listings."""

import pytest

from marketplace.core.content_filter import (
    PIRACY_KEYWORDS, build_screening_text, is_flagged, matched_keywords,
)


@pytest.mark.parametrize("keyword", PIRACY_KEYWORDS)
def test_every_keyword_flags(keyword):
    assert is_flagged(f"Selling {keyword} of the textbook")


def test_matching_is_case_insensitive():
    assert is_flagged("Free PDF Drive Link")
    assert is_flagged("SOFT COPY AVAILABLE")


def test_substring_match_flags_inside_words():
    # Crude on purpose: "scanned" contains "scan", "linked" contains "link"
    assert is_flagged("Scanned pages")
    assert is_flagged("Linked exercises")


def test_clean_text_is_not_flagged():
    assert not is_flagged("Calculus I by Stewart, good condition")


def test_empty_text_is_not_flagged():
    assert not is_flagged("")


def test_matched_keywords_in_denylist_order():
    assert matched_keywords("Drive link, soft copy") == ["soft copy", "link", "drive"]


def test_screening_text_tolerates_missing_fields():
    text = build_screening_text("Title", None, "Dr. Author")
    assert "Title" in text
    assert "Dr. Author" in text
    assert "None" not in text


def test_screening_text_includes_description():
    assert is_flagged(build_screening_text("Physics", "soft copy available", "Halliday"))
