"""Pure helpers shared by the extraction rules."""

import re

from bs4 import BeautifulSoup

_WHITESPACE = re.compile(r"\s+")


def get_meta(doc: BeautifulSoup, name: str) -> str:
    """Resolve a meta tag value by name, falling back to Open Graph.

    Looks up ``<meta name="{name}">`` first and ``<meta property="og:{name}">``
    second, so ``description`` resolves to ``og:description`` on pages that
    only declare the latter. The first matching tag wins even when it has no
    ``content`` attribute.

    Args:
        doc: Parsed document
        name: Meta name to look up

    Returns:
        The tag's content, or an empty string if neither tag exists
    """
    meta = doc.find("meta", attrs={"name": name})
    if meta is None:
        meta = doc.find("meta", attrs={"property": f"og:{name}"})
    if meta is None:
        return ""
    return meta.get("content") or ""


def count_words(text: str) -> int:
    """Count whitespace-separated tokens.

    Empty or whitespace-only text has no words.
    """
    stripped = text.strip()
    if not stripped:
        return 0
    return len(_WHITESPACE.split(stripped))


def text_to_html_ratio(html: str, text: str) -> str:
    """Percentage of visible text relative to raw markup length.

    Args:
        html: Raw HTML source
        text: Text content of the document body

    Returns:
        Ratio formatted to two decimals, "0.00" for empty HTML
    """
    html_length = len(html)
    if html_length == 0:
        return "0.00"
    text_length = len(text.strip())
    return f"{text_length / html_length * 100:.2f}"


def collapse_whitespace(text: str) -> str:
    """Strip and collapse internal whitespace runs to single spaces."""
    return _WHITESPACE.sub(" ", text).strip()
