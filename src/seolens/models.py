"""Data models for page analysis."""

from dataclasses import dataclass, field, fields
from typing import Any, Optional


def _metric(default: Any, key: str):
    """Declare a report field together with its flat serialization key."""
    return field(default=default, metadata={"key": key})


@dataclass(frozen=True)
class IdentityMetrics:
    """Title and document-level meta information."""

    title: str = _metric("", "title")
    description: str = _metric("", "description")
    keywords: str = _metric("", "keywords")
    author: str = _metric("", "author")
    language_tag: str = _metric("", "languageTag")
    charset: str = _metric("", "charset")


@dataclass(frozen=True)
class HeadingMetrics:
    """Raw heading element counts."""

    h1_count: int = _metric(0, "h1Count")
    h2_count: int = _metric(0, "h2Count")
    h3_count: int = _metric(0, "h3Count")
    h4_count: int = _metric(0, "h4Count")
    h5_count: int = _metric(0, "h5Count")
    h6_count: int = _metric(0, "h6Count")


@dataclass(frozen=True)
class ContentMetrics:
    """Body text volume and text-to-markup density."""

    word_count: int = _metric(0, "wordCount")
    text_to_html_ratio: str = _metric("0.00", "textToHtmlRatio")  # percentage, 2 decimals


@dataclass(frozen=True)
class ImageMetrics:
    img_count: int = _metric(0, "imgCount")
    img_without_alt: int = _metric(0, "imgWithoutAlt")
    images_with_size: int = _metric(0, "imagesWithSize")  # width AND height present
    images_with_lazy_loading: int = _metric(0, "imagesWithLazyLoading")
    images_with_title: int = _metric(0, "imagesWithTitle")
    images_with_aria: int = _metric(0, "imagesWithAria")
    svg_images: int = _metric(0, "svgImages")


@dataclass(frozen=True)
class LinkMetrics:
    """Anchor statistics.

    Every anchor is exactly one of internal, external or broken.
    """

    link_count: int = _metric(0, "linkCount")
    internal_links_count: int = _metric(0, "internalLinksCount")
    external_links_count: int = _metric(0, "externalLinksCount")
    broken_links: int = _metric(0, "brokenLinks")
    has_nofollow: bool = _metric(False, "hasNofollow")
    links_with_title: int = _metric(0, "linksWithTitle")
    links_with_aria_label: int = _metric(0, "linksWithAriaLabel")


@dataclass(frozen=True)
class TechnicalMetrics:
    has_ssl: bool = _metric(False, "hasSSL")
    has_favicon: bool = _metric(False, "hasFavicon")
    has_apple_icon: bool = _metric(False, "hasAppleIcon")
    has_viewport: bool = _metric(False, "hasViewport")
    has_robots: bool = _metric(False, "hasRobots")
    robots_content: str = _metric("", "robotsContent")
    has_canonical: bool = _metric(False, "hasCanonical")
    canonical_url: str = _metric("", "canonicalUrl")
    has_sitemap: bool = _metric(False, "hasSitemap")
    has_rss: bool = _metric(False, "hasRSS")
    has_atom: bool = _metric(False, "hasAtom")


@dataclass(frozen=True)
class SocialMetrics:
    """Open Graph and Twitter Card tags."""

    has_og_tags: bool = _metric(False, "hasOgTags")
    has_twitter_tags: bool = _metric(False, "hasTwitterTags")
    og_title: str = _metric("", "ogTitle")
    og_description: str = _metric("", "ogDescription")
    og_image: str = _metric("", "ogImage")
    twitter_title: str = _metric("", "twitterTitle")
    twitter_description: str = _metric("", "twitterDescription")
    twitter_image: str = _metric("", "twitterImage")


@dataclass(frozen=True)
class PerformanceMetrics:
    """Resource hint <link rel> presence."""

    has_preload: bool = _metric(False, "hasPreload")
    has_prefetch: bool = _metric(False, "hasPrefetch")
    has_preconnect: bool = _metric(False, "hasPreconnect")
    has_dns_prefetch: bool = _metric(False, "hasDNSPrefetch")
    has_module_preload: bool = _metric(False, "hasModulePreload")


@dataclass(frozen=True)
class MobileMetrics:
    has_amp_link: bool = _metric(False, "hasAmpLink")
    has_manifest: bool = _metric(False, "hasManifest")
    has_theme_color: bool = _metric(False, "hasThemeColor")
    has_mobile_viewport: bool = _metric(False, "hasMobileViewport")
    has_apple_mobile_capable: bool = _metric(False, "hasAppleMobileCapable")


@dataclass(frozen=True)
class SecurityMetrics:
    """Security policies declared through <meta> tags.

    HTTP response headers are not inspected.
    """

    has_csp: bool = _metric(False, "hasCSP")
    has_xss_protection: bool = _metric(False, "hasXSSProtection")
    has_frame_options: bool = _metric(False, "hasFrameOptions")
    has_referrer_policy: bool = _metric(False, "hasReferrerPolicy")
    has_permissions_policy: bool = _metric(False, "hasPermissionsPolicy")


@dataclass(frozen=True)
class StructuredDataMetrics:
    has_schema_org: bool = _metric(False, "hasSchemaOrg")
    has_jsonld: bool = _metric(False, "hasJSONLD")


@dataclass(frozen=True)
class AccessibilityMetrics:
    has_skip_link: bool = _metric(False, "hasSkipLink")
    has_lang_attribute: bool = _metric(False, "hasLangAttribute")
    has_aria_landmarks: int = _metric(0, "hasAriaLandmarks")  # count of [role] elements


@dataclass(frozen=True)
class MetricReport:
    """On-page SEO signals extracted from a single page."""

    url: str
    final_url: str = ""
    identity: IdentityMetrics = field(default_factory=IdentityMetrics)
    headings: HeadingMetrics = field(default_factory=HeadingMetrics)
    content: ContentMetrics = field(default_factory=ContentMetrics)
    images: ImageMetrics = field(default_factory=ImageMetrics)
    links: LinkMetrics = field(default_factory=LinkMetrics)
    technical: TechnicalMetrics = field(default_factory=TechnicalMetrics)
    social: SocialMetrics = field(default_factory=SocialMetrics)
    performance: PerformanceMetrics = field(default_factory=PerformanceMetrics)
    mobile: MobileMetrics = field(default_factory=MobileMetrics)
    security: SecurityMetrics = field(default_factory=SecurityMetrics)
    structured_data: StructuredDataMetrics = field(default_factory=StructuredDataMetrics)
    accessibility: AccessibilityMetrics = field(default_factory=AccessibilityMetrics)

    GROUPS = (
        "identity",
        "headings",
        "content",
        "images",
        "links",
        "technical",
        "social",
        "performance",
        "mobile",
        "security",
        "structured_data",
        "accessibility",
    )

    def to_dict(self) -> dict[str, Any]:
        """Flatten the report into a single camelCase-keyed dictionary.

        Returns:
            Dictionary with ``url``, ``finalUrl`` and one key per metric
        """
        data: dict[str, Any] = {"url": self.url, "finalUrl": self.final_url}
        for group_name in self.GROUPS:
            group = getattr(self, group_name)
            for metric in fields(group):
                data[metric.metadata["key"]] = getattr(group, metric.name)
        return data


@dataclass
class FetchResponse:
    """Raw result of retrieving a URL."""

    status_code: int
    text: str
    url: str  # final URL after redirects
    content_type: Optional[str] = None

    @property
    def ok(self) -> bool:
        return 200 <= self.status_code < 300


@dataclass
class ComparisonResult:
    """Primary report plus an optional competitor report or error."""

    primary: MetricReport
    competitor: Optional[MetricReport] = None
    competitor_url: Optional[str] = None
    competitor_error: Optional[Exception] = None

    @property
    def has_competitor(self) -> bool:
        return self.competitor is not None or self.competitor_error is not None

    def to_dict(self) -> dict[str, Any]:
        data: dict[str, Any] = {"primary": self.primary.to_dict()}
        if self.competitor is not None:
            data["competitor"] = self.competitor.to_dict()
        if self.competitor_error is not None:
            data["competitorError"] = str(self.competitor_error)
        return data
