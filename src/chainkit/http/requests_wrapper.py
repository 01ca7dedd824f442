"""Text-returning HTTP client used by the HTTP request chain."""

import logging
from typing import Any, Optional

import httpx

from ..exceptions import ActionExecutionError

logger = logging.getLogger(__name__)


class TextRequestsWrapper:
    """
    Send HTTP requests with fixed headers and return the response body as text.

    Any transport error or non-2xx status raises ActionExecutionError; the
    underlying httpx exception is chained.
    """

    def __init__(
        self,
        headers: Optional[dict[str, Optional[str]]] = None,
        *,
        timeout: float = 30.0,
        transport: Optional[httpx.BaseTransport] = None,
    ):
        """
        headers: request headers; entries with a None value are not sent.
        transport: optional httpx transport (e.g. httpx.MockTransport in tests).
        """
        self.headers = {k: v for k, v in (headers or {}).items() if v is not None}
        self.timeout = timeout
        self._transport = transport

    def request(self, method: str, url: str, data: Optional[dict[str, Any]] = None) -> str:
        """Send a request; ``data`` is sent as a JSON body. Returns the body text."""
        logger.info("Send %s request to %s", method, url)
        try:
            with httpx.Client(timeout=self.timeout, transport=self._transport) as client:
                response = client.request(method, url, headers=self.headers, json=data)
        except httpx.HTTPError as e:
            raise ActionExecutionError(
                "http", f"An error occurred while performing {method} request to {url}: {e}"
            ) from e

        if not response.is_success:
            raise ActionExecutionError(
                "http",
                f"{method} {url} failed with status code {response.status_code}. messages: {response.text[:500]}",
                status_code=response.status_code,
            )
        return response.text

    def get(self, url: str) -> str:
        return self.request("GET", url)

    def post(self, url: str, data: dict[str, Any]) -> str:
        return self.request("POST", url, data)

    def patch(self, url: str, data: dict[str, Any]) -> str:
        return self.request("PATCH", url, data)

    def put(self, url: str, data: dict[str, Any]) -> str:
        return self.request("PUT", url, data)

    def delete(self, url: str) -> str:
        return self.request("DELETE", url)
