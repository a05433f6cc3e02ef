"""Extraction rules turning a parsed page into a MetricReport."""

import re
from typing import Optional
from urllib.parse import urljoin, urlparse

from bs4 import BeautifulSoup, Tag

from seolens.constants import (
    ATOM_CONTENT_TYPE,
    BROKEN_HREFS,
    HEADING_TAGS,
    JSONLD_CONTENT_TYPE,
    MOBILE_VIEWPORT_MARKER,
    RSS_CONTENT_TYPE,
    SCHEMA_ORG_MARKER,
    SITEMAP_MARKER,
    SKIP_LINK_WORDS,
)
from seolens.models import (
    AccessibilityMetrics,
    ContentMetrics,
    HeadingMetrics,
    IdentityMetrics,
    ImageMetrics,
    LinkMetrics,
    MetricReport,
    MobileMetrics,
    PerformanceMetrics,
    SecurityMetrics,
    SocialMetrics,
    StructuredDataMetrics,
    TechnicalMetrics,
)
from seolens.text_metrics import (
    collapse_whitespace,
    count_words,
    get_meta,
    text_to_html_ratio,
)


def _attr_text(tag: Tag, name: str) -> str:
    """Attribute value as a string; multi-valued attributes are space-joined."""
    value = tag.get(name)
    if value is None:
        return ""
    if isinstance(value, list):
        return " ".join(value)
    return value


def _exists(doc: BeautifulSoup, selector: str) -> bool:
    return doc.select_one(selector) is not None


def _hostname(url: str) -> Optional[str]:
    try:
        return urlparse(url).hostname
    except ValueError:
        return None


def _body_text(doc: BeautifulSoup) -> str:
    return doc.body.get_text() if doc.body is not None else ""


def _social_meta(doc: BeautifulSoup, key: str) -> str:
    """Look up a fully-prefixed social tag (og:*, twitter:*) by property or name."""
    meta = doc.find("meta", attrs={"property": key}) or doc.find("meta", attrs={"name": key})
    if meta is None:
        return ""
    return meta.get("content") or ""


def _meta_declared(doc: BeautifulSoup, name: str) -> bool:
    """Whether a policy is declared via <meta name> or <meta http-equiv>."""
    if get_meta(doc, name):
        return True
    meta = doc.find(
        "meta", attrs={"http-equiv": re.compile(f"^{re.escape(name)}$", re.IGNORECASE)}
    )
    return meta is not None and bool(meta.get("content"))


def extract_title(doc: BeautifulSoup) -> str:
    """Page title from <title>, falling back to a title meta tag."""
    title_tag = doc.find("title")
    title = collapse_whitespace(title_tag.get_text()) if title_tag else ""
    return title or get_meta(doc, "title")


def extract_charset(doc: BeautifulSoup) -> str:
    charset_tag = doc.find("meta", charset=True)
    if charset_tag:
        return charset_tag.get("charset", "").strip()

    # Check http-equiv content-type
    content_type_tag = doc.find(
        "meta", attrs={"http-equiv": re.compile("^content-type$", re.IGNORECASE)}
    )
    if content_type_tag:
        content = content_type_tag.get("content", "")
        if "charset=" in content.lower():
            return content[content.lower().index("charset=") + len("charset="):].strip()
    return ""


def extract_identity(doc: BeautifulSoup) -> IdentityMetrics:
    html_tag = doc.find("html")
    return IdentityMetrics(
        title=extract_title(doc),
        description=get_meta(doc, "description"),
        keywords=get_meta(doc, "keywords"),
        author=get_meta(doc, "author"),
        language_tag=_attr_text(html_tag, "lang") if html_tag else "",
        charset=extract_charset(doc),
    )


def extract_headings(doc: BeautifulSoup) -> HeadingMetrics:
    counts = {tag: len(doc.find_all(tag)) for tag in HEADING_TAGS}
    return HeadingMetrics(**{f"{tag}_count": count for tag, count in counts.items()})


def extract_content(doc: BeautifulSoup, html: str) -> ContentMetrics:
    text = _body_text(doc)
    return ContentMetrics(
        word_count=count_words(text),
        text_to_html_ratio=text_to_html_ratio(html, text),
    )


def extract_images(doc: BeautifulSoup) -> ImageMetrics:
    images = doc.find_all("img")
    return ImageMetrics(
        img_count=len(images),
        img_without_alt=sum(1 for img in images if not img.get("alt")),
        images_with_size=sum(
            1 for img in images if img.has_attr("width") and img.has_attr("height")
        ),
        images_with_lazy_loading=sum(
            1 for img in images if _attr_text(img, "loading").strip().lower() == "lazy"
        ),
        images_with_title=sum(1 for img in images if img.get("title")),
        images_with_aria=sum(1 for img in images if img.get("aria-label")),
        svg_images=len(doc.find_all("svg")),
    )


def classify_link(href: Optional[str], page_url: str) -> str:
    """Classify an anchor href as "internal", "external" or "broken".

    Args:
        href: Raw href attribute value (None when missing)
        page_url: URL of the analyzed page, used as base and reference host

    Returns:
        One of "internal", "external", "broken"
    """
    if href is None or href.strip() in BROKEN_HREFS:
        return "broken"

    page_host = _hostname(page_url)
    try:
        link_host = urlparse(urljoin(page_url, href.strip())).hostname
    except ValueError:
        return "external"

    if page_host and link_host == page_host:
        return "internal"
    return "external"


def extract_links(doc: BeautifulSoup, page_url: str) -> LinkMetrics:
    links = doc.find_all("a")
    kinds = [classify_link(link.get("href"), page_url) for link in links]
    return LinkMetrics(
        link_count=len(links),
        internal_links_count=kinds.count("internal"),
        external_links_count=kinds.count("external"),
        broken_links=kinds.count("broken"),
        has_nofollow=any("nofollow" in _attr_text(link, "rel") for link in links),
        links_with_title=sum(1 for link in links if link.get("title")),
        links_with_aria_label=sum(1 for link in links if link.get("aria-label")),
    )


def extract_technical(doc: BeautifulSoup, html: str, page_url: str) -> TechnicalMetrics:
    canonical = doc.select_one('link[rel="canonical"]')
    canonical_url = ""
    if canonical is not None and canonical.get("href"):
        try:
            canonical_url = urljoin(page_url, canonical["href"].strip())
        except ValueError:
            canonical_url = canonical["href"]

    return TechnicalMetrics(
        has_ssl=urlparse(page_url).scheme.lower() == "https",
        has_favicon=_exists(doc, 'link[rel*="icon"]'),
        has_apple_icon=_exists(doc, 'link[rel="apple-touch-icon"]'),
        has_viewport=_exists(doc, 'meta[name="viewport"]'),
        has_robots=doc.find("meta", attrs={"name": "robots"}) is not None,
        robots_content=get_meta(doc, "robots"),
        has_canonical=canonical is not None,
        canonical_url=canonical_url,
        has_sitemap=SITEMAP_MARKER in html,
        has_rss=_exists(doc, f'link[type="{RSS_CONTENT_TYPE}"]'),
        has_atom=_exists(doc, f'link[type="{ATOM_CONTENT_TYPE}"]'),
    )


def extract_social(doc: BeautifulSoup) -> SocialMetrics:
    metas = doc.find_all("meta")
    return SocialMetrics(
        has_og_tags=any(_attr_text(m, "property").startswith("og:") for m in metas),
        has_twitter_tags=any(_attr_text(m, "name").startswith("twitter:") for m in metas),
        og_title=_social_meta(doc, "og:title"),
        og_description=_social_meta(doc, "og:description"),
        og_image=_social_meta(doc, "og:image"),
        twitter_title=_social_meta(doc, "twitter:title"),
        twitter_description=_social_meta(doc, "twitter:description"),
        twitter_image=_social_meta(doc, "twitter:image"),
    )


def extract_performance(doc: BeautifulSoup) -> PerformanceMetrics:
    return PerformanceMetrics(
        has_preload=_exists(doc, 'link[rel="preload"]'),
        has_prefetch=_exists(doc, 'link[rel="prefetch"]'),
        has_preconnect=_exists(doc, 'link[rel="preconnect"]'),
        has_dns_prefetch=_exists(doc, 'link[rel="dns-prefetch"]'),
        has_module_preload=_exists(doc, 'link[rel="modulepreload"]'),
    )


def extract_mobile(doc: BeautifulSoup) -> MobileMetrics:
    return MobileMetrics(
        has_amp_link=_exists(doc, 'link[rel="amphtml"]'),
        has_manifest=_exists(doc, 'link[rel="manifest"]'),
        has_theme_color=bool(get_meta(doc, "theme-color")),
        has_mobile_viewport=_exists(
            doc, f'meta[name="viewport"][content*="{MOBILE_VIEWPORT_MARKER}"]'
        ),
        has_apple_mobile_capable=_exists(doc, 'meta[name="apple-mobile-web-app-capable"]'),
    )


def extract_security(doc: BeautifulSoup) -> SecurityMetrics:
    return SecurityMetrics(
        has_csp=_meta_declared(doc, "content-security-policy"),
        has_xss_protection=_meta_declared(doc, "x-xss-protection"),
        has_frame_options=_meta_declared(doc, "x-frame-options"),
        has_referrer_policy=_exists(doc, 'meta[name="referrer"]'),
        has_permissions_policy=_meta_declared(doc, "permissions-policy"),
    )


def extract_structured_data(doc: BeautifulSoup, html: str) -> StructuredDataMetrics:
    return StructuredDataMetrics(
        has_schema_org=SCHEMA_ORG_MARKER in html,
        has_jsonld=_exists(doc, f'script[type="{JSONLD_CONTENT_TYPE}"]'),
    )


def _is_skip_link(link: Tag) -> bool:
    text = link.get_text().lower()
    return all(word in text for word in SKIP_LINK_WORDS)


def extract_accessibility(doc: BeautifulSoup) -> AccessibilityMetrics:
    html_tag = doc.find("html")
    return AccessibilityMetrics(
        has_skip_link=any(_is_skip_link(link) for link in doc.find_all("a")),
        has_lang_attribute=bool(html_tag and _attr_text(html_tag, "lang")),
        has_aria_landmarks=len(doc.select("[role]")),
    )


def extract_metrics(
    doc: BeautifulSoup, html: str, url: str, final_url: Optional[str] = None
) -> MetricReport:
    """Run every extraction rule over a parsed page.

    Args:
        doc: Parsed document
        html: Raw HTML the document was parsed from
        url: Normalized URL that was requested
        final_url: URL after redirects; links are resolved and classified
            against it, and it decides hasSSL. Defaults to ``url``.

    Returns:
        MetricReport for the page
    """
    page_url = final_url or url
    return MetricReport(
        url=url,
        final_url=page_url,
        identity=extract_identity(doc),
        headings=extract_headings(doc),
        content=extract_content(doc, html),
        images=extract_images(doc),
        links=extract_links(doc, page_url),
        technical=extract_technical(doc, html, page_url),
        social=extract_social(doc),
        performance=extract_performance(doc),
        mobile=extract_mobile(doc),
        security=extract_security(doc),
        structured_data=extract_structured_data(doc, html),
        accessibility=extract_accessibility(doc),
    )
