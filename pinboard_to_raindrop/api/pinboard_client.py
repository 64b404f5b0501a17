"""Pinboard API client for retrieving a user's bookmarks."""

import os
from typing import Any, Optional

import requests
from requests.exceptions import RequestException

from ..core.models import PinboardBookmark
from ..errors import AuthError, NetworkError, ParseError

PINBOARD_ENDPOINT = "https://api.pinboard.in/v1"
DEFAULT_TIMEOUT = 30.0

# Pinboard answers a malformed token with a 500 rather than a 401
AUTH_FAILURE_STATUSES = (401, 403, 500)


class PinboardClient:
    """Client for interacting with the Pinboard v1 API."""

    def __init__(
        self,
        token: Optional[str] = None,
        timeout: float = DEFAULT_TIMEOUT,
        endpoint: str = PINBOARD_ENDPOINT,
    ):
        """Initialize the Pinboard API client.

        Args:
            token: Pinboard API token ("user:HEX"). If not provided, will look
                for PINBOARD_TOKEN env var.
            timeout: Seconds to wait for the API before giving up
            endpoint: Base URL of the Pinboard v1 API

        Raises:
            AuthError: If no token is provided or found in environment.
        """
        self.token = token or os.getenv("PINBOARD_TOKEN")

        if not self.token:
            raise AuthError(
                "Please set PINBOARD_TOKEN environment variable or provide token"
            )

        self.timeout = timeout
        self.endpoint = endpoint.rstrip("/")

    def fetch_all_posts(self) -> list[PinboardBookmark]:
        """Get every bookmark in the account with its full tag set.

        Returns:
            Bookmarks in the order the API returned them

        Raises:
            NetworkError: On transport failure or an unexpected HTTP status
            AuthError: If Pinboard rejects the token
            ParseError: If the response body is not a list of posts
        """
        url = f"{self.endpoint}/posts/all"
        params = {"auth_token": self.token, "format": "json"}
        try:
            response = requests.get(url, params=params, timeout=self.timeout)
        except RequestException as e:
            # The request URL carries the token, so only report the error type
            raise NetworkError(
                f"Could not reach the Pinboard API ({type(e).__name__})"
            ) from None

        status = response.status_code
        if status in AUTH_FAILURE_STATUSES:
            raise AuthError(f"HTTP {status}: The Pinboard API token may be invalid")
        if status != 200:
            raise NetworkError(f"HTTP {status}: Unknown error with the Pinboard API")

        return self._parse_posts(response)

    def _parse_posts(self, response: requests.Response) -> list[PinboardBookmark]:
        """Decode the ``posts/all`` body into bookmarks."""
        try:
            payload: Any = response.json()
        except ValueError as e:
            raise ParseError(f"Pinboard response is not valid JSON: {e}") from e

        if not isinstance(payload, list):
            raise ParseError(
                f"Expected a list of posts, got {type(payload).__name__}"
            )

        # Individual bad posts are carried through and skipped by the mapper
        return [PinboardBookmark.from_api(post) for post in payload]
