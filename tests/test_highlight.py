"""Tests for match highlighting."""

from __future__ import annotations

from culinary_cli.search.highlight import MATCH_STYLE, highlight_match, split_matches


class TestSplitMatches:
    def test_marks_case_insensitive_match(self) -> None:
        assert split_matches("Pizza Dough", "piz") == [("Piz", True), ("za Dough", False)]

    def test_every_occurrence_is_marked_in_order(self) -> None:
        parts = split_matches("Pizza with pizza sauce", "pizza")
        assert parts == [
            ("Pizza", True),
            (" with ", False),
            ("pizza", True),
            (" sauce", False),
        ]

    def test_parts_concatenate_back_to_text(self) -> None:
        text = "Margherita Pizza"
        assert "".join(part for part, _ in split_matches(text, "ar")) == text

    def test_empty_term_returns_text_unchanged(self) -> None:
        assert split_matches("Pizza Dough", "") == [("Pizza Dough", False)]

    def test_no_match_leaves_text_unmarked(self) -> None:
        assert split_matches("Bobotie", "curry") == [("Bobotie", False)]

    def test_invalid_pattern_falls_back_to_plain_text(self) -> None:
        assert split_matches("a(b", "(") == [("a(b", False)]

    def test_pattern_match_that_differs_from_term_is_not_marked(self) -> None:
        # "." matches any character but only literal "." parts are marked
        parts = split_matches("abc", "b.")
        assert parts == [("a", False), ("bc", False)]


class TestHighlightMatch:
    def test_styles_only_the_match(self) -> None:
        text = highlight_match("Pizza Dough", "piz")
        assert text.plain == "Pizza Dough"
        assert len(text.spans) == 1
        span = text.spans[0]
        assert (span.start, span.end) == (0, 3)
        assert str(span.style) == MATCH_STYLE

    def test_fallback_does_not_raise(self) -> None:
        text = highlight_match("a(b", "(")
        assert text.plain == "a(b"
        assert text.spans == []

    def test_empty_term(self) -> None:
        text = highlight_match("Pizza Dough", "")
        assert text.plain == "Pizza Dough"
        assert text.spans == []
