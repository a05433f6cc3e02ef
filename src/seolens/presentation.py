"""Rendering of metric reports as labelled cards (text, JSON, HTML)."""

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional

from jinja2 import Environment, FileSystemLoader, select_autoescape

from seolens.constants import (
    CHECK_MARK,
    COMPETITOR_LABEL,
    CROSS_MARK,
    NOT_FOUND,
    NOT_SPECIFIED,
    PRIMARY_LABEL,
)
from seolens.models import ComparisonResult, MetricReport

TEMPLATE_DIR = Path(__file__).parent / "templates"


@dataclass
class Card:
    """One field group of a report, ready for display."""

    title: str
    lines: list[str] = field(default_factory=list)


def mark(value: bool) -> str:
    return CHECK_MARK if value else CROSS_MARK


def _optional(label: str, value: str) -> list[str]:
    """A single "label: value" line, or nothing when value is empty."""
    return [f"{label}: {value}"] if value else []


def _text_card(title: str, value: str) -> Card:
    lines = [value or NOT_FOUND]
    if value:
        lines.append(f"Length: {len(value)} characters")
    return Card(title, lines)


def build_cards(report: MetricReport) -> list[Card]:
    """Lay a report out as display cards in a fixed order.

    Booleans are shown as check / cross marks; optional string fields are
    omitted when empty.

    Args:
        report: Report to lay out

    Returns:
        Ordered list of cards
    """
    identity = report.identity
    headings = report.headings
    content = report.content
    images = report.images
    links = report.links
    technical = report.technical
    social = report.social
    performance = report.performance
    mobile = report.mobile
    security = report.security
    structured = report.structured_data
    accessibility = report.accessibility

    return [
        _text_card("Page Title", identity.title),
        _text_card("Meta Description", identity.description),
        Card("Meta Information", [
            f"Keywords: {identity.keywords or NOT_FOUND}",
            f"Author: {identity.author or NOT_FOUND}",
            f"Language Tag: {identity.language_tag or NOT_SPECIFIED}",
            f"Character Encoding: {identity.charset or NOT_SPECIFIED}",
        ]),
        Card("Content Structure", [
            f"H1 Tags: {headings.h1_count}",
            f"H2 Tags: {headings.h2_count}",
            f"H3 Tags: {headings.h3_count}",
            f"H4 Tags: {headings.h4_count}",
            f"H5 Tags: {headings.h5_count}",
            f"H6 Tags: {headings.h6_count}",
            f"Word Count: {content.word_count}",
            f"Text to HTML Ratio: {content.text_to_html_ratio}%",
        ]),
        Card("Images Analysis", [
            f"Total Images: {images.img_count}",
            f"SVG Images: {images.svg_images}",
            f"Images without Alt Text: {images.img_without_alt}",
            f"Images with Dimensions: {images.images_with_size}",
            f"Images with Lazy Loading: {images.images_with_lazy_loading}",
            f"Images with Title: {images.images_with_title}",
            f"Images with ARIA Labels: {images.images_with_aria}",
        ]),
        Card("Links Analysis", [
            f"Total Links: {links.link_count}",
            f"Internal Links: {links.internal_links_count}",
            f"External Links: {links.external_links_count}",
            f"Broken Links: {links.broken_links}",
            f"Links with Title: {links.links_with_title}",
            f"Links with ARIA Label: {links.links_with_aria_label}",
            f"Has Nofollow Links: {mark(links.has_nofollow)}",
        ]),
        Card("Technical SEO", [
            f"SSL (HTTPS): {mark(technical.has_ssl)}",
            f"Favicon: {mark(technical.has_favicon)}",
            f"Apple Touch Icon: {mark(technical.has_apple_icon)}",
            f"Viewport Meta Tag: {mark(technical.has_viewport)}",
            f"Robots Meta Tag: {mark(technical.has_robots)}",
            *_optional("Robots Content", technical.robots_content),
            f"Canonical Link: {mark(technical.has_canonical)}",
            *_optional("Canonical URL", technical.canonical_url),
            f"Sitemap XML: {mark(technical.has_sitemap)}",
            f"RSS Feed: {mark(technical.has_rss)}",
            f"Atom Feed: {mark(technical.has_atom)}",
        ]),
        Card("Social Media", [
            f"Open Graph Tags: {mark(social.has_og_tags)}",
            f"Twitter Cards: {mark(social.has_twitter_tags)}",
            *_optional("OG Title", social.og_title),
            *_optional("OG Description", social.og_description),
            *_optional("OG Image", social.og_image),
            *_optional("Twitter Title", social.twitter_title),
            *_optional("Twitter Description", social.twitter_description),
            *_optional("Twitter Image", social.twitter_image),
        ]),
        Card("Performance Optimization", [
            f"Preload: {mark(performance.has_preload)}",
            f"Prefetch: {mark(performance.has_prefetch)}",
            f"Preconnect: {mark(performance.has_preconnect)}",
            f"DNS Prefetch: {mark(performance.has_dns_prefetch)}",
            f"Module Preload: {mark(performance.has_module_preload)}",
        ]),
        Card("Mobile Optimization", [
            f"AMP Link: {mark(mobile.has_amp_link)}",
            f"Web Manifest: {mark(mobile.has_manifest)}",
            f"Theme Color: {mark(mobile.has_theme_color)}",
            f"Mobile Viewport: {mark(mobile.has_mobile_viewport)}",
            f"Apple Mobile Web App Capable: {mark(mobile.has_apple_mobile_capable)}",
        ]),
        Card("Security Headers", [
            f"Content Security Policy: {mark(security.has_csp)}",
            f"XSS Protection: {mark(security.has_xss_protection)}",
            f"Frame Options: {mark(security.has_frame_options)}",
            f"Referrer Policy: {mark(security.has_referrer_policy)}",
            f"Permissions Policy: {mark(security.has_permissions_policy)}",
        ]),
        Card("Structured Data", [
            f"Schema.org: {mark(structured.has_schema_org)}",
            f"JSON-LD: {mark(structured.has_jsonld)}",
        ]),
        Card("Accessibility", [
            f"Skip Navigation Link: {mark(accessibility.has_skip_link)}",
            f"Language Attribute: {mark(accessibility.has_lang_attribute)}",
            f"ARIA Landmarks: {accessibility.has_aria_landmarks}",
        ]),
    ]


def render_report_text(report: MetricReport, label: str) -> str:
    """Render one report as plain text cards under a label."""
    out = [
        "=" * 60,
        f"{label}: {report.url}",
        "=" * 60,
    ]
    for card in build_cards(report):
        out.append("")
        out.append(f"## {card.title}")
        out.extend(f"  • {line}" for line in card.lines)
    return "\n".join(out)


def render_text(result: ComparisonResult) -> str:
    sections = [render_report_text(result.primary, PRIMARY_LABEL)]
    if result.competitor is not None:
        sections.append(render_report_text(result.competitor, COMPETITOR_LABEL))
    elif result.competitor_error is not None:
        sections.append(f"{COMPETITOR_LABEL}\n\n{CROSS_MARK} {result.competitor_error}")
    return "\n\n".join(sections) + "\n"


def render_json(result: ComparisonResult) -> str:
    return json.dumps(result.to_dict(), indent=2, ensure_ascii=False)


def render_html(result: ComparisonResult, template_dir: Optional[str] = None) -> str:
    """Render the comparison as a standalone HTML page, one column per site.

    Args:
        result: Comparison to render
        template_dir: Directory holding ``comparison.html`` (defaults to
            the templates shipped with the package)

    Returns:
        HTML document as a string
    """
    env = Environment(
        loader=FileSystemLoader(str(template_dir or TEMPLATE_DIR)),
        autoescape=select_autoescape(["html"]),
    )
    template = env.get_template("comparison.html")

    columns = [
        {"label": PRIMARY_LABEL, "url": result.primary.url, "cards": build_cards(result.primary)}
    ]
    if result.competitor is not None:
        columns.append({
            "label": COMPETITOR_LABEL,
            "url": result.competitor.url,
            "cards": build_cards(result.competitor),
        })
    elif result.competitor_error is not None:
        columns.append({
            "label": COMPETITOR_LABEL,
            "url": result.competitor_url or "",
            "error": str(result.competitor_error),
            "cards": [],
        })

    return template.render(columns=columns)
