"""Unit tests for text normalization, segmentation and confidence adjustment."""

import uuid

import pytest

from doc_extraction.utils.text import (
    calculate_confidence,
    generate_id,
    normalize_text,
    split_into_paragraphs,
)


class TestNormalizeText:
    """Tests for normalize_text."""

    def test_line_endings_are_unified(self):
        assert normalize_text("a\r\nb\rc") == "a\nb\nc"

    def test_tabs_and_space_runs_collapse(self):
        assert normalize_text("a\t\tb    c") == "a b c"

    def test_whitespace_around_breaks_is_removed(self):
        assert normalize_text("first line   \n   second line") == "first line\nsecond line"

    def test_blank_line_runs_become_one_paragraph_break(self):
        assert normalize_text("one\n\n\n\n\ntwo") == "one\n\ntwo"

    def test_blank_lines_with_spaces_still_count_as_breaks(self):
        assert normalize_text("one\n   \n  \ntwo") == "one\n\ntwo"

    def test_result_is_trimmed(self):
        assert normalize_text("  \n hello \n ") == "hello"

    def test_empty_string(self):
        assert normalize_text("") == ""


class TestSplitIntoParagraphs:
    """Tests for split_into_paragraphs."""

    def test_splits_on_double_line_break(self):
        text = normalize_text("First paragraph.\n\nSecond paragraph.\nStill second.")
        assert split_into_paragraphs(text) == [
            "First paragraph.",
            "Second paragraph.\nStill second.",
        ]

    def test_empty_input_yields_no_paragraphs(self):
        assert split_into_paragraphs("") == []

    @pytest.mark.parametrize("raw", [
        "a\n\n\n\nb",
        "\r\n\r\n  x  \r\n\r\n\r\ny\t\tz",
        " \n \n ",
        "one\n \n \ntwo\n\nthree",
    ])
    def test_no_empty_pieces_and_no_internal_paragraph_breaks(self, raw):
        paragraphs = split_into_paragraphs(normalize_text(raw))
        assert all(paragraphs)
        assert all("\n\n" not in p for p in paragraphs)


class TestCalculateConfidence:
    """Tests for calculate_confidence."""

    def test_medium_length_text_keeps_score(self):
        assert calculate_confidence("x" * 50, 0.75) == 0.75

    def test_long_text_gets_bonus(self):
        assert calculate_confidence("x" * 150, 0.7) == 0.75

    def test_long_text_bonus_is_capped(self):
        assert calculate_confidence("x" * 150, 0.98) == 1.0

    def test_short_text_gets_penalty(self):
        assert calculate_confidence("x" * 15, 0.7) == 0.6

    def test_short_text_penalty_is_floored(self):
        assert calculate_confidence("x" * 15, 0.05) == 0.0

    def test_rounds_to_two_decimals(self):
        assert calculate_confidence("x" * 50, 0.123456) == 0.12

    @pytest.mark.parametrize("length", [0, 5, 19, 20, 100, 101, 500])
    @pytest.mark.parametrize("score", [0.0, 0.01, 0.5, 0.96, 1.0])
    def test_always_within_bounds(self, length, score):
        confidence = calculate_confidence("x" * length, score)
        assert 0.0 <= confidence <= 1.0


def test_generate_id_returns_unique_uuids():
    ids = {generate_id() for _ in range(50)}
    assert len(ids) == 50
    for value in ids:
        uuid.UUID(value)
