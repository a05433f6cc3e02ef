"""Tests for the meta resolver, word counter and density helpers."""

import pytest
from bs4 import BeautifulSoup

from seolens.text_metrics import (
    collapse_whitespace,
    count_words,
    get_meta,
    text_to_html_ratio,
)


def _doc(head: str) -> BeautifulSoup:
    return BeautifulSoup(f"<html><head>{head}</head><body></body></html>", "lxml")


class TestGetMeta:
    """Test cases for get_meta."""

    def test_returns_name_content(self):
        doc = _doc('<meta name="author" content="Jane Doe">')
        assert get_meta(doc, "author") == "Jane Doe"

    def test_falls_back_to_open_graph(self):
        doc = _doc('<meta property="og:description" content="OG description">')
        assert get_meta(doc, "description") == "OG description"

    def test_name_takes_precedence_over_open_graph(self):
        doc = _doc(
            '<meta property="og:description" content="From OG">'
            '<meta name="description" content="Plain">'
        )
        assert get_meta(doc, "description") == "Plain"

    def test_missing_returns_empty_string(self):
        assert get_meta(_doc(""), "keywords") == ""

    def test_tag_without_content_returns_empty_string(self):
        doc = _doc('<meta name="robots"><meta property="og:robots" content="index">')
        assert get_meta(doc, "robots") == ""


class TestCountWords:
    """Test cases for count_words."""

    def test_single_word(self):
        assert count_words("single") == 1

    def test_whitespace_runs(self):
        assert count_words("a b   c") == 3

    def test_surrounding_and_mixed_whitespace(self):
        assert count_words("\n\t  one\ttwo\nthree  \n") == 3

    @pytest.mark.parametrize("text", ["", "   ", "\n\t"])
    def test_blank_text_has_no_words(self, text):
        assert count_words(text) == 0


class TestTextToHtmlRatio:
    """Test cases for text_to_html_ratio."""

    def test_equal_lengths_is_one_hundred(self):
        assert text_to_html_ratio("abcd", "abcd") == "100.00"

    def test_two_decimal_formatting(self):
        assert text_to_html_ratio("x" * 3, "a") == "33.33"

    def test_text_is_trimmed(self):
        assert text_to_html_ratio("x" * 10, "  ab  ") == "20.00"

    def test_empty_html_is_zero(self):
        assert text_to_html_ratio("", "anything") == "0.00"

    def test_non_increasing_as_html_grows(self):
        text = "hello world"
        ratios = [
            float(text_to_html_ratio("x" * length, text))
            for length in range(len(text), 500, 7)
        ]
        assert all(a >= b for a, b in zip(ratios, ratios[1:]))


def test_collapse_whitespace():
    assert collapse_whitespace("  My \n  Page\tTitle ") == "My Page Title"
