"""HTTP transport for the FRED API."""

import logging
import threading
from collections.abc import Mapping
from typing import Any, Protocol

import httpx

from fred_series_search.config import Settings
from fred_series_search.errors import TransportError


logger = logging.getLogger(__name__)


class RequestFn(Protocol):
    """Fetch a FRED endpoint and return the parsed JSON body."""

    def __call__(
        self, path: str, params: Mapping[str, str | int]
    ) -> dict[str, Any]: ...


class FredClient:
    """Issues GET requests against the FRED API."""

    def __init__(
        self,
        settings: Settings | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.settings = settings or Settings()
        self.settings.validate()
        self._transport = transport
        self._client: httpx.Client | None = None
        self._lock = threading.Lock()

    @property
    def client(self) -> httpx.Client:
        """Lazy-initialize HTTP client, shared by every thread using this instance."""
        with self._lock:
            if self._client is None:
                self._client = httpx.Client(
                    timeout=self.settings.timeout, transport=self._transport
                )
            return self._client

    def close(self) -> None:
        """Close HTTP client."""
        with self._lock:
            if self._client is not None:
                self._client.close()
                self._client = None

    def __enter__(self) -> "FredClient":
        return self

    def __exit__(self, *args) -> None:
        self.close()

    def request(self, path: str, params: Mapping[str, str | int]) -> dict[str, Any]:
        """
        GET a FRED endpoint.

        Args:
            path: Endpoint path relative to the API root, e.g. "series/search"
            params: Query parameters; api_key and file_type are added

        Returns:
            Parsed JSON object

        Raises:
            TransportError: On network failure, non-2xx status or a body
                that is not a JSON object
        """
        query = {
            **params,
            "api_key": self.settings.fred_api_key,
            "file_type": "json",
        }
        url = f"{self.settings.base_url}/{path}"
        logger.debug(f"GET {url} {dict(params)}")

        try:
            response = self.client.get(url, params=query)
            response.raise_for_status()
        except httpx.HTTPStatusError as e:
            raise TransportError(_describe_status_error(e.response)) from e
        except httpx.HTTPError as e:
            raise TransportError(f"Request to {path} failed: {e}") from e

        try:
            data = response.json()
        except ValueError as e:
            raise TransportError(f"Response from {path} is not valid JSON") from e

        if not isinstance(data, dict):
            raise TransportError(f"Response from {path} is not a JSON object")

        return data


def _describe_status_error(response: httpx.Response) -> str:
    message = f"FRED API error: {response.status_code} {response.reason_phrase}"
    try:
        body = response.json()
    except ValueError:
        return message
    if isinstance(body, dict) and body.get("error_message"):
        message += f" - {body['error_message']}"
    return message
