"""
Shared HTTP client infrastructure for the provider integrations.

Provides JsonFetcher, a blocking httpx client that GETs a URL and returns
the parsed JSON object. There are no retries and no rate limiting: a
failure is raised to the caller immediately.

Usage:
    class MyClient(JsonFetcher):
        BASE_URL = "https://data.example.com"

        def get_data(self) -> dict:
            return self.get_json("/data.json")
"""

import logging
from typing import Any

import httpx

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Errors
# ---------------------------------------------------------------------------

class ExternalAPIError(Exception):
    """Base exception for external API errors."""

    def __init__(
        self,
        message: str,
        code: str = "EXTERNAL_API_ERROR",
        status_code: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class TransportError(ExternalAPIError):
    """The remote resource could not be reached or read."""

    def __init__(self, message: str, status_code: int = 503):
        super().__init__(message, code="TRANSPORT_ERROR", status_code=status_code)


class InvalidContentsError(ExternalAPIError):
    """The remote resource was read but does not contain only a JSON object."""

    def __init__(self, message: str):
        super().__init__(message, code="INVALID_CONTENTS", status_code=502)


# ---------------------------------------------------------------------------
# Base client
# ---------------------------------------------------------------------------

class JsonFetcher:
    """
    Blocking HTTP client that reads JSON documents.

    Use as a context manager:

        with MyClient() as client:
            data = client.get_json("/endpoint")

    Or with lazy initialisation (for long-lived callers):

        client = MyClient()
        data = client.get_json("/endpoint")  # client auto-creates on first use
        client.close()
    """

    BASE_URL: str = ""

    def __init__(
        self,
        *,
        base_url: str | None = None,
        headers: dict[str, str] | None = None,
        timeout: float = 30.0,
        follow_redirects: bool = True,
        transport: httpx.BaseTransport | None = None,
    ):
        self._base_url = (base_url or self.BASE_URL).rstrip("/")
        self._default_headers = headers or {}
        self._timeout = timeout
        self._follow_redirects = follow_redirects
        self._transport = transport
        self._client: httpx.Client | None = None

    # -- Lifecycle -----------------------------------------------------------

    def __enter__(self) -> "JsonFetcher":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    @property
    def base_url(self) -> str:
        return self._base_url

    @property
    def client(self) -> httpx.Client:
        """Return the HTTP client, lazily creating it if needed."""
        if self._client is None or self._client.is_closed:
            self._client = httpx.Client(
                headers=self._default_headers,
                timeout=httpx.Timeout(self._timeout),
                follow_redirects=self._follow_redirects,
                transport=self._transport,
            )
        return self._client

    def close(self) -> None:
        """Close the HTTP client."""
        if self._client and not self._client.is_closed:
            self._client.close()
            self._client = None

    # -- HTTP methods --------------------------------------------------------

    def get_json(self, url: str) -> dict[str, Any]:
        """
        GET ``url`` and parse the body as a JSON object.

        Raises:
            TransportError: If the request fails or returns a non-2xx status
            InvalidContentsError: If the body is not a JSON object
        """
        logger.debug(f"GET {url}")
        try:
            response = self.client.get(url)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            status = e.response.status_code
            logger.error(f"HTTP {status} for {url}")
            raise TransportError(f"HTTP {status} for {url}", status_code=status) from e
        except httpx.RequestError as e:
            logger.error(f"Request failed for {url}: {e}")
            raise TransportError(f"Request failed: {str(e)}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise InvalidContentsError(
                f"The given URL does not contain only JSON: {url}"
            ) from e

        if not isinstance(data, dict):
            raise InvalidContentsError(
                f"Expected a JSON object from {url}, got {type(data).__name__}"
            )
        return data
