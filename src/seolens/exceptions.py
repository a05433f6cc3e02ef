"""Exceptions raised while analyzing a page."""

from typing import Optional


class SEOLensError(Exception):
    """Base class for all analyzer errors."""


class ValidationError(SEOLensError):
    """Raised when user input is rejected before any network request."""


class PageNotAnalyzableError(SEOLensError):
    """A page could not be turned into a MetricReport.

    This is the single user-facing failure for an analysis. The message
    always names the offending URL; ``reason`` keeps the underlying detail.
    """

    def __init__(self, url: str, reason: Optional[str] = None):
        self.url = url
        self.reason = reason
        message = (
            f"Could not analyze the page {url}. "
            "Make sure the URL is correct and the website is accessible."
        )
        if reason:
            message = f"{message} ({reason})"
        super().__init__(message)


class FetchError(PageNotAnalyzableError):
    """Transport failure, timeout or non-success HTTP status."""

    def __init__(
        self,
        url: str,
        reason: Optional[str] = None,
        status_code: Optional[int] = None,
    ):
        self.status_code = status_code
        if reason is None and status_code is not None:
            reason = f"HTTP error! status: {status_code}"
        super().__init__(url, reason)


class ParseError(PageNotAnalyzableError):
    """The response body cannot be interpreted as HTML."""
