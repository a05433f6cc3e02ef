"""Page analyzer: fetch, parse and extract on-page SEO signals."""

import asyncio
import logging
from typing import Optional

from seolens.config import Config
from seolens.constants import DEFAULT_SCHEME
from seolens.exceptions import FetchError, PageNotAnalyzableError, ValidationError
from seolens.fetcher import build_async_fetcher, build_fetcher
from seolens.html_parser import HtmlParser
from seolens.metrics import extract_metrics
from seolens.models import ComparisonResult, FetchResponse, MetricReport

logger = logging.getLogger(__name__)


def normalize_url(url: str) -> str:
    """Strip whitespace and assume https:// when no scheme is given."""
    url = url.strip()
    if not url.lower().startswith(("http://", "https://")):
        url = DEFAULT_SCHEME + url
    return url


def _require_url(url: Optional[str]) -> str:
    if url is None or not url.strip():
        raise ValidationError("Please enter a valid URL")
    return url


class PageAnalyzer:
    """Analyzes single pages and optionally compares them with a competitor."""

    def __init__(
        self,
        config: Optional[Config] = None,
        fetcher=None,
        async_fetcher=None,
        parser: Optional[HtmlParser] = None,
    ):
        """Initialize the analyzer.

        Args:
            config: Configuration (defaults to environment values)
            fetcher: Object with ``fetch(url) -> FetchResponse``
            async_fetcher: Object with ``async fetch(url) -> FetchResponse``
            parser: HTML parsing collaborator
        """
        self.config = config or Config.from_env()
        self._fetcher = fetcher
        self._owns_fetcher = fetcher is None
        self._async_fetcher = async_fetcher
        self.parser = parser or HtmlParser(self.config.html_parser)

    def __enter__(self):
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()

    def close(self) -> None:
        """Close the HTTP session of a fetcher built from the configuration.

        Injected fetchers belong to the caller and are left open.
        """
        if self._owns_fetcher and self._fetcher is not None:
            self._fetcher.close()
            self._fetcher = None

    @property
    def fetcher(self):
        if self._fetcher is None:
            self._fetcher = build_fetcher(self.config)
        return self._fetcher

    @property
    def async_fetcher(self):
        if self._async_fetcher is None:
            self._async_fetcher = build_async_fetcher(self.config)
        return self._async_fetcher

    def _build_report(self, url: str, response: FetchResponse) -> MetricReport:
        """Turn a fetch response into a report, or raise."""
        if not response.ok:
            logger.error(f"Non-success status {response.status_code} for {url}")
            raise FetchError(url, status_code=response.status_code)

        doc = self.parser.parse(response.text, url=url, content_type=response.content_type)
        report = extract_metrics(doc, response.text, url, final_url=response.url)
        logger.info(
            f"Analyzed {url}: {report.links.link_count} links, "
            f"{report.images.img_count} images, {report.content.word_count} words"
        )
        return report

    def analyze(self, url: str) -> MetricReport:
        """Analyze a single URL.

        Args:
            url: URL to analyze; https:// is assumed when no scheme is given

        Returns:
            MetricReport for the page

        Raises:
            ValidationError: If the URL is empty
            FetchError: If retrieval fails or returns a non-2xx status
            ParseError: If the body cannot be interpreted as HTML
        """
        url = normalize_url(_require_url(url))
        response = self.fetcher.fetch(url)
        return self._build_report(url, response)

    async def analyze_async(self, url: str) -> MetricReport:
        """Analyze a single URL using the async fetcher."""
        url = normalize_url(_require_url(url))
        response = await self.async_fetcher.fetch(url)
        return self._build_report(url, response)

    def compare(
        self, primary_url: str, competitor_url: Optional[str] = None
    ) -> ComparisonResult:
        """Analyze a page and, optionally, a competitor page.

        The primary page is analyzed first. If it fails, the error propagates
        and the competitor is never fetched. A competitor failure is recorded
        on the result instead of raised.

        Args:
            primary_url: The user's page
            competitor_url: Optional page to compare against

        Returns:
            ComparisonResult with the primary report and competitor outcome
        """
        _require_url(primary_url)
        primary = self.analyze(primary_url)
        result = ComparisonResult(primary=primary)

        if competitor_url and competitor_url.strip():
            result.competitor_url = normalize_url(competitor_url)
            try:
                result.competitor = self.analyze(competitor_url)
            except PageNotAnalyzableError as e:
                logger.warning(f"Competitor analysis failed: {e}")
                result.competitor_error = e

        return result

    async def compare_async(
        self, primary_url: str, competitor_url: Optional[str] = None
    ) -> ComparisonResult:
        """Concurrent variant of compare.

        Both pages are fetched at the same time. If the primary analysis fails
        the competitor task is cancelled and the primary error is raised.
        """
        _require_url(primary_url)

        competitor_task = None
        normalized_competitor = None
        if competitor_url and competitor_url.strip():
            normalized_competitor = normalize_url(competitor_url)
            competitor_task = asyncio.ensure_future(self.analyze_async(competitor_url))

        try:
            primary = await self.analyze_async(primary_url)
        except BaseException:
            if competitor_task is not None:
                competitor_task.cancel()
                await asyncio.gather(competitor_task, return_exceptions=True)
            raise

        result = ComparisonResult(primary=primary, competitor_url=normalized_competitor)
        if competitor_task is not None:
            try:
                result.competitor = await competitor_task
            except PageNotAnalyzableError as e:
                logger.warning(f"Competitor analysis failed: {e}")
                result.competitor_error = e

        return result
