"""Fetch strategies for retrieving page HTML."""

import logging
import time
from typing import Optional, Union
from urllib.parse import quote

import httpx
import requests

from seolens.config import Config
from seolens.constants import (
    DEFAULT_RELAY_URL,
    DEFAULT_REQUEST_HEADERS,
    DEFAULT_REQUEST_TIMEOUT_SECONDS,
    DEFAULT_USER_AGENT,
    FETCH_STRATEGIES,
)
from seolens.exceptions import FetchError
from seolens.models import FetchResponse

logger = logging.getLogger(__name__)


def relay_target(relay_url: str, url: str) -> str:
    """Build the relay request URL for a target page."""
    return relay_url + quote(url, safe="")


class DirectFetcher:
    """Retrieves pages directly with a requests session."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """Initialize the fetcher.

        Args:
            user_agent: User-Agent header value
            timeout: Request timeout in seconds
            session: Optional pre-configured session
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update(DEFAULT_REQUEST_HEADERS)
        self.session.headers.update({"User-Agent": self.user_agent})

    def _request_url(self, url: str) -> str:
        return url

    def _final_url(self, url: str, response: requests.Response) -> str:
        return response.url or url

    def fetch(self, url: str) -> FetchResponse:
        """Fetch a URL.

        Non-success status codes are returned, not raised; the caller decides.

        Args:
            url: Absolute URL to fetch

        Returns:
            FetchResponse with status, body and final URL

        Raises:
            FetchError: On timeout or transport failure
        """
        request_url = self._request_url(url)
        logger.info(f"Fetching {url}")
        start_time = time.time()

        try:
            response = self.session.get(
                request_url,
                timeout=self.timeout,
                allow_redirects=True,
                verify=True,
            )
        except requests.exceptions.Timeout as e:
            logger.error(f"Timeout fetching {url} (>{self.timeout}s)")
            raise FetchError(url, f"Request timeout after {self.timeout}s") from e
        except requests.exceptions.ConnectionError as e:
            logger.error(f"Connection error fetching {url}: {e}")
            raise FetchError(url, f"Connection error: {e}") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"Error fetching {url}: {e}")
            raise FetchError(url, str(e)) from e

        logger.debug(
            f"Fetched {url}: status={response.status_code} "
            f"in {time.time() - start_time:.2f}s"
        )
        return FetchResponse(
            status_code=response.status_code,
            text=response.text,
            url=self._final_url(url, response),
            content_type=response.headers.get("Content-Type"),
        )

    def close(self) -> None:
        self.session.close()


class RelayFetcher(DirectFetcher):
    """Retrieves pages through a cross-origin relay.

    The relay hides redirects, so the final URL is the requested one.
    """

    def __init__(self, relay_url: str = DEFAULT_RELAY_URL, **kwargs):
        super().__init__(**kwargs)
        self.relay_url = relay_url

    def _request_url(self, url: str) -> str:
        return relay_target(self.relay_url, url)

    def _final_url(self, url: str, response: requests.Response) -> str:
        return url


class AsyncDirectFetcher:
    """Retrieves pages directly with httpx, for use from asyncio code."""

    def __init__(
        self,
        user_agent: Optional[str] = None,
        timeout: float = DEFAULT_REQUEST_TIMEOUT_SECONDS,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ):
        """Initialize the fetcher.

        Args:
            user_agent: User-Agent header value
            timeout: Request timeout in seconds
            transport: Optional httpx transport (e.g. a MockTransport)
        """
        self.user_agent = user_agent or DEFAULT_USER_AGENT
        self.timeout = timeout
        self.transport = transport
        self.headers = {**DEFAULT_REQUEST_HEADERS, "User-Agent": self.user_agent}

    def _request_url(self, url: str) -> str:
        return url

    def _final_url(self, url: str, response: httpx.Response) -> str:
        return str(response.url)

    async def fetch(self, url: str) -> FetchResponse:
        """Fetch a URL; same contract as DirectFetcher.fetch."""
        request_url = self._request_url(url)
        logger.info(f"Fetching {url}")

        try:
            async with httpx.AsyncClient(
                timeout=self.timeout,
                follow_redirects=True,
                headers=self.headers,
                transport=self.transport,
            ) as client:
                response = await client.get(request_url)
        except httpx.TimeoutException as e:
            logger.error(f"Timeout fetching {url} (>{self.timeout}s)")
            raise FetchError(url, f"Request timeout after {self.timeout}s") from e
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            error_msg = str(e) if str(e) else type(e).__name__
            logger.error(f"Error fetching {url}: {error_msg}")
            raise FetchError(url, error_msg) from e

        logger.debug(f"Fetched {url}: status={response.status_code}")
        return FetchResponse(
            status_code=response.status_code,
            text=response.text,
            url=self._final_url(url, response),
            content_type=response.headers.get("Content-Type"),
        )


class AsyncRelayFetcher(AsyncDirectFetcher):
    """Async counterpart of RelayFetcher."""

    def __init__(self, relay_url: str = DEFAULT_RELAY_URL, **kwargs):
        super().__init__(**kwargs)
        self.relay_url = relay_url

    def _request_url(self, url: str) -> str:
        return relay_target(self.relay_url, url)

    def _final_url(self, url: str, response: httpx.Response) -> str:
        return url


def _check_strategy(strategy: str) -> None:
    if strategy not in FETCH_STRATEGIES:
        raise ValueError(
            f"Unknown fetch strategy '{strategy}', expected one of {FETCH_STRATEGIES}"
        )


def build_fetcher(config: Config) -> Union[DirectFetcher, RelayFetcher]:
    """Create the synchronous fetcher selected by the configuration."""
    _check_strategy(config.fetch_strategy)
    if config.fetch_strategy == "relay":
        return RelayFetcher(
            relay_url=config.relay_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )
    return DirectFetcher(user_agent=config.user_agent, timeout=config.timeout)


def build_async_fetcher(config: Config) -> Union[AsyncDirectFetcher, AsyncRelayFetcher]:
    """Create the asyncio fetcher selected by the configuration."""
    _check_strategy(config.fetch_strategy)
    if config.fetch_strategy == "relay":
        return AsyncRelayFetcher(
            relay_url=config.relay_url,
            user_agent=config.user_agent,
            timeout=config.timeout,
        )
    return AsyncDirectFetcher(user_agent=config.user_agent, timeout=config.timeout)
