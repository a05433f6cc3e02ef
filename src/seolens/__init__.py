"""On-page SEO signal extraction with competitor comparison."""

__version__ = "0.1.0"

from seolens.analyzer import PageAnalyzer, normalize_url
from seolens.config import Config
from seolens.exceptions import (
    FetchError,
    PageNotAnalyzableError,
    ParseError,
    SEOLensError,
    ValidationError,
)
from seolens.fetcher import (
    AsyncDirectFetcher,
    AsyncRelayFetcher,
    DirectFetcher,
    RelayFetcher,
    build_async_fetcher,
    build_fetcher,
)
from seolens.html_parser import HtmlParser
from seolens.metrics import classify_link, extract_metrics
from seolens.models import (
    AccessibilityMetrics,
    ComparisonResult,
    ContentMetrics,
    FetchResponse,
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
from seolens.text_metrics import count_words, get_meta, text_to_html_ratio

__all__ = [
    # Core
    "PageAnalyzer",
    "normalize_url",
    "extract_metrics",
    "classify_link",
    "get_meta",
    "count_words",
    "text_to_html_ratio",
    # Collaborators
    "HtmlParser",
    "DirectFetcher",
    "RelayFetcher",
    "AsyncDirectFetcher",
    "AsyncRelayFetcher",
    "build_fetcher",
    "build_async_fetcher",
    # Models
    "MetricReport",
    "IdentityMetrics",
    "HeadingMetrics",
    "ContentMetrics",
    "ImageMetrics",
    "LinkMetrics",
    "TechnicalMetrics",
    "SocialMetrics",
    "PerformanceMetrics",
    "MobileMetrics",
    "SecurityMetrics",
    "StructuredDataMetrics",
    "AccessibilityMetrics",
    "FetchResponse",
    "ComparisonResult",
    # Errors
    "SEOLensError",
    "ValidationError",
    "PageNotAnalyzableError",
    "FetchError",
    "ParseError",
    # Config
    "Config",
]
