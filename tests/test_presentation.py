"""Tests for report cards and renderers."""

import json

import pytest
from bs4 import BeautifulSoup

from seolens.exceptions import FetchError
from seolens.metrics import extract_metrics
from seolens.models import ComparisonResult, MetricReport, TechnicalMetrics
from seolens.presentation import (
    build_cards,
    mark,
    render_html,
    render_json,
    render_text,
)


PAGE = (
    '<html lang="en"><head><title>Shop</title>'
    '<meta name="robots" content="noindex">'
    '<meta property="og:title" content="OG Shop">'
    '</head><body><h1>Shop</h1><a href="/a">A</a></body></html>'
)


def _report(url="https://example.com/", html=PAGE) -> MetricReport:
    return extract_metrics(BeautifulSoup(html, "lxml"), html, url)


@pytest.fixture
def report():
    return _report()


def _card(cards, title):
    return next(card for card in cards if card.title == title)


class TestBuildCards:

    def test_card_order(self, report):
        titles = [card.title for card in build_cards(report)]
        assert titles == [
            "Page Title",
            "Meta Description",
            "Meta Information",
            "Content Structure",
            "Images Analysis",
            "Links Analysis",
            "Technical SEO",
            "Social Media",
            "Performance Optimization",
            "Mobile Optimization",
            "Security Headers",
            "Structured Data",
            "Accessibility",
        ]

    def test_title_card_shows_length(self, report):
        card = _card(build_cards(report), "Page Title")
        assert card.lines == ["Shop", "Length: 4 characters"]

    def test_missing_description_shows_not_found(self, report):
        card = _card(build_cards(report), "Meta Description")
        assert card.lines == ["Not found"]

    def test_missing_charset_shows_not_specified(self, report):
        card = _card(build_cards(report), "Meta Information")
        assert "Character Encoding: Not specified" in card.lines
        assert "Language Tag: en" in card.lines

    def test_booleans_rendered_as_marks(self, report):
        card = _card(build_cards(report), "Technical SEO")
        assert "SSL (HTTPS): ✅" in card.lines
        assert "Favicon: ❌" in card.lines

    def test_empty_strings_omitted(self, report):
        technical = _card(build_cards(report), "Technical SEO")
        assert "Robots Content: noindex" in technical.lines
        assert not any(line.startswith("Canonical URL") for line in technical.lines)

        social = _card(build_cards(report), "Social Media")
        assert "OG Title: OG Shop" in social.lines
        assert not any(line.startswith("Twitter Title") for line in social.lines)

    def test_ratio_shown_as_percentage(self, report):
        card = _card(build_cards(report), "Content Structure")
        assert f"Text to HTML Ratio: {report.content.text_to_html_ratio}%" in card.lines

    def test_mark(self):
        assert mark(True) == "✅"
        assert mark(False) == "❌"


class TestRenderers:

    @pytest.fixture
    def comparison(self, report):
        competitor = MetricReport(
            url="https://rival.com/",
            technical=TechnicalMetrics(has_ssl=True, canonical_url="https://rival.com/"),
        )
        return ComparisonResult(
            primary=report, competitor=competitor, competitor_url="https://rival.com/"
        )

    def test_text_has_both_labels(self, comparison):
        output = render_text(comparison)
        assert "Your Website: https://example.com/" in output
        assert "Competitor's Website: https://rival.com/" in output
        assert "Canonical URL: https://rival.com/" in output

    def test_text_shows_competitor_error(self, report):
        result = ComparisonResult(
            primary=report,
            competitor_url="https://down.example/",
            competitor_error=FetchError("https://down.example/", "Connection error"),
        )
        output = render_text(result)
        assert "Your Website" in output
        assert "Could not analyze the page https://down.example/" in output

    def test_json_output(self, comparison):
        data = json.loads(render_json(comparison))
        assert data["primary"]["title"] == "Shop"
        assert data["primary"]["linkCount"] == 1
        assert data["competitor"]["url"] == "https://rival.com/"
        assert "competitorError" not in data

    def test_json_output_with_error(self, report):
        result = ComparisonResult(
            primary=report, competitor_error=FetchError("https://down.example/", status_code=503)
        )
        data = json.loads(render_json(result))
        assert "competitor" not in data
        assert "503" in data["competitorError"]

    def test_html_side_by_side(self, comparison):
        html = render_html(comparison)
        doc = BeautifulSoup(html, "lxml")

        columns = doc.select(".column")
        assert len(columns) == 2
        assert columns[0].select_one(".site-title").get_text() == "Your Website"
        assert columns[1].select_one(".site-title").get_text() == "Competitor's Website"
        assert len(columns[0].select(".metric-card")) == 13
        assert "✅" in html

    def test_html_escapes_page_content(self):
        hostile = '<html><head><title>&lt;script&gt;alert(1)&lt;/script&gt;</title></head></html>'
        result = ComparisonResult(primary=_report(html=hostile))
        html = render_html(result)
        assert "<script>alert(1)</script>" not in html
        assert "&lt;script&gt;" in html

    def test_html_competitor_error(self, report):
        result = ComparisonResult(
            primary=report,
            competitor_url="https://down.example/",
            competitor_error=FetchError("https://down.example/", "Connection error"),
        )
        doc = BeautifulSoup(render_html(result), "lxml")
        assert "https://down.example/" in doc.select_one(".error").get_text()
