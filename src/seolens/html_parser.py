"""HTML parsing collaborator."""

import logging
from typing import Optional

from bs4 import BeautifulSoup
from bs4.builder import ParserRejectedMarkup

from seolens.constants import DEFAULT_HTML_PARSER, NON_HTML_CONTENT_TYPES
from seolens.exceptions import ParseError

logger = logging.getLogger(__name__)


class HtmlParser:
    """Turns response bodies into BeautifulSoup documents."""

    def __init__(self, features: str = DEFAULT_HTML_PARSER):
        """Initialize the parser.

        Args:
            features: BeautifulSoup tree builder ("lxml", "html.parser", ...)
        """
        self.features = features

    def parse(
        self, text: str, url: str = "", content_type: Optional[str] = None
    ) -> BeautifulSoup:
        """Parse a response body.

        Args:
            text: Response body
            url: URL the body came from (used in error messages)
            content_type: Response Content-Type header, if known

        Returns:
            Parsed document

        Raises:
            ParseError: If the body is not HTML
        """
        if content_type:
            media_type = content_type.split(";")[0].strip().lower()
            if media_type.startswith(NON_HTML_CONTENT_TYPES):
                raise ParseError(url, f"unsupported content type: {media_type}")

        if "\x00" in text:
            raise ParseError(url, "response body looks like binary data")

        try:
            return BeautifulSoup(text, self.features)
        except ParserRejectedMarkup as e:
            logger.warning(f"Parser rejected markup from {url}: {e}")
            raise ParseError(url, str(e)) from e
