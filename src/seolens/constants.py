"""Centralized constants for the page analyzer.

For user-configurable values (timeouts, fetch strategy), see config.py.
"""

# =============================================================================
# Fetch Constants
# =============================================================================

# Default request timeout in seconds
DEFAULT_REQUEST_TIMEOUT_SECONDS = 30

# Default User-Agent sent with every request
DEFAULT_USER_AGENT = "SEOLens-Analyzer/1.0"

# Public cross-origin relay; the target URL is appended percent-encoded
DEFAULT_RELAY_URL = "https://api.allorigins.win/raw?url="

# Scheme assumed when the user omits one
DEFAULT_SCHEME = "https://"

FETCH_STRATEGIES = ("direct", "relay")

# Browser-like request headers (User-Agent is added separately)
DEFAULT_REQUEST_HEADERS = {
    "Accept": "text/html,application/xhtml+xml,application/xml;q=0.9,*/*;q=0.8",
    "Accept-Language": "en-US,en;q=0.9",
    "Accept-Encoding": "gzip, deflate",
    "DNT": "1",
    "Connection": "keep-alive",
    "Upgrade-Insecure-Requests": "1",
}


# =============================================================================
# Parser Constants
# =============================================================================

# BeautifulSoup tree builder; lxml synthesizes <html>/<body> like a browser
DEFAULT_HTML_PARSER = "lxml"

# Content types that can never be HTML (checked by prefix)
NON_HTML_CONTENT_TYPES = (
    "image/",
    "audio/",
    "video/",
    "font/",
    "application/pdf",
    "application/zip",
    "application/octet-stream",
    "application/json",
)


# =============================================================================
# Extraction Constants
# =============================================================================

HEADING_TAGS = ("h1", "h2", "h3", "h4", "h5", "h6")

BROKEN_HREFS = ("", "#")

# Both words must appear in a link's text for it to count as a skip link
SKIP_LINK_WORDS = ("skip", "navigation")

SCHEMA_ORG_MARKER = "schema.org"
SITEMAP_MARKER = "sitemap.xml"

RSS_CONTENT_TYPE = "application/rss+xml"
ATOM_CONTENT_TYPE = "application/atom+xml"
JSONLD_CONTENT_TYPE = "application/ld+json"

MOBILE_VIEWPORT_MARKER = "width=device-width"


# =============================================================================
# Presentation Constants
# =============================================================================

PRIMARY_LABEL = "Your Website"
COMPETITOR_LABEL = "Competitor's Website"

CHECK_MARK = "✅"
CROSS_MARK = "❌"

NOT_FOUND = "Not found"
NOT_SPECIFIED = "Not specified"
