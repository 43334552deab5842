"""Transport capability: performs one HTTP request against the remote end."""

import logging
from abc import ABC, abstractmethod
from typing import Optional

import httpx

from remote_webdriver.core.exceptions import TransportError

logger = logging.getLogger(__name__)

JSON_CONTENT_TYPE = "application/json;charset=utf-8"


class APIService(ABC):
    """
    Narrow interface the driver uses to talk to the remote end.

    Implementations perform exactly one request and either return the raw
    response body or raise. ``TransportError`` lets them attach the status
    code and body; any other exception is still classified by the driver.
    """

    @abstractmethod
    def perform_request(self, url: str, method: str, body: Optional[bytes] = None) -> bytes:
        """Send a request and return the raw response body."""


class HttpxAPIService(APIService):
    """
    ``APIService`` backed by ``httpx.Client``.

    Non-2xx replies are treated as transport failures; the status code and
    the body the remote end sent are kept on the raised ``TransportError``.
    """

    def __init__(
        self,
        timeout: float = 30.0,
        verify: bool = True,
        client: Optional[httpx.Client] = None,
    ):
        """
        Args:
            timeout: Timeout for each round trip in seconds
            verify: Verify TLS certificates
            client: Pre-configured client (not closed by this service)
        """
        self._owns_client = client is None
        self._client = client or httpx.Client(timeout=timeout, verify=verify)

    def perform_request(self, url: str, method: str, body: Optional[bytes] = None) -> bytes:
        headers = {"Accept": "application/json"}
        if body is not None:
            headers["Content-Type"] = JSON_CONTENT_TYPE

        try:
            response = self._client.request(method, url, content=body, headers=headers)
        except httpx.HTTPError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e

        logger.debug(f"{method} {url} -> HTTP {response.status_code}")

        if not response.is_success:
            raise TransportError(
                f"{method} {url} returned HTTP {response.status_code}",
                status_code=response.status_code,
                response=response.content,
            )

        return response.content

    def close(self) -> None:
        """Close the underlying client if this service created it."""
        if self._owns_client:
            self._client.close()

    def __enter__(self) -> "HttpxAPIService":
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
