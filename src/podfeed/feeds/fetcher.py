"""Content API client."""

import logging
from typing import Any

import requests

from podfeed.utils.errors import (
    FetchError,
    MalformedPageError,
    NetworkConnectionError,
    NetworkTimeoutError,
)

logger = logging.getLogger(__name__)


class FeedFetcher:
    """Fetches one page of episodes from the content API."""

    def __init__(self, timeout: float = 30.0, session: requests.Session | None = None) -> None:
        """Initialize the fetcher.

        Args:
            timeout: HTTP request timeout in seconds.
            session: Optional requests session (default: module-level requests)
        """
        self.timeout = timeout
        self.session = session

    def fetch(self, url: str) -> Any:
        """Fetch and decode a JSON page.

        Args:
            url: Page URL, including any API credentials

        Returns:
            Decoded JSON body

        Raises:
            FetchError: If the server does not answer 200
            NetworkConnectionError: If the server cannot be reached
            NetworkTimeoutError: If the request times out
            MalformedPageError: If the body is not JSON
        """
        http = self.session or requests
        try:
            response = http.get(url, timeout=self.timeout)
        except requests.Timeout as e:
            raise NetworkTimeoutError(
                f"Request timed out after {self.timeout}s: {e}"
            ) from e
        except requests.RequestException as e:
            raise NetworkConnectionError(f"Could not reach content API: {e}") from e

        if response.status_code != 200:
            raise FetchError(
                f"Failed to fetch data. Status: {response.status_code}",
                status_code=response.status_code,
            )

        try:
            return response.json()
        except ValueError as e:
            raise MalformedPageError(f"Response body is not valid JSON: {e}") from e
