"""HTTP client helper."""

from __future__ import annotations

import asyncio
import json
import logging
from collections.abc import Mapping
from typing import Any

import aiohttp

from ...config import DEFAULT_TIMEOUT
from ...core.exceptions import APIError, PayloadError, RateLimitError, TransportError

logger = logging.getLogger(__name__)


class HTTPClient:
    """Async HTTP client wrapper returning decoded JSON bodies.

    Error bodies are turned into library exceptions; aiohttp errors never
    leak to callers.
    """

    def __init__(self, base_url: str | None = None, timeout: float = DEFAULT_TIMEOUT) -> None:
        self.base_url = base_url
        self.timeout = aiohttp.ClientTimeout(total=timeout)
        self._session: aiohttp.ClientSession | None = None

    @property
    def session(self) -> aiohttp.ClientSession:
        """Get or create session."""
        if self._session is None or self._session.closed:
            self._session = aiohttp.ClientSession(timeout=self.timeout)
        return self._session

    async def get(
        self,
        url: str,
        params: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """GET request."""
        return await self._request("GET", url, params=params, headers=headers)

    async def post(
        self,
        url: str,
        json: dict[str, Any] | None = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        """POST request with a JSON body."""
        return await self._request("POST", url, json=json, headers=headers)

    async def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        # If base_url is set and url is relative, combine them
        if self.base_url and not url.startswith("http"):
            url = f"{self.base_url}{url}"

        logger.debug("HTTP request", extra={"http_method": method, "url": url})
        try:
            async with self.session.request(method, url, **kwargs) as response:
                # Raw text, not response.json(): error bodies may not be JSON
                text = await response.text()
                return _decode(response.status, text)
        except aiohttp.ClientError as e:
            raise TransportError(f"{method} {url} failed: {e}") from e
        except asyncio.TimeoutError as e:
            raise TransportError(f"{method} {url} timed out") from e

    async def close(self) -> None:
        """Close session."""
        if self._session and not self._session.closed:
            await self._session.close()

    async def __aenter__(self) -> HTTPClient:
        """Context manager entry."""
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Context manager exit."""
        await self.close()


def _decode(status: int, text: str) -> Any:
    try:
        body = json.loads(text) if text else None
    except ValueError as e:
        if status >= 400:
            raise TransportError(f"HTTP {status}", status_code=status) from e
        raise PayloadError(f"Response is not valid JSON: {text[:200]!r}") from e

    is_error_body = isinstance(body, Mapping) and body.get("error") and "result" not in body
    if status >= 400 or is_error_body:
        raise error_from_response(status, body)
    return body


def error_from_response(status: int, body: Any) -> TransportError:
    """Map an error response to the matching exception.

    Args:
        status: HTTP status code
        body: Decoded JSON body (may be None)

    Returns:
        RateLimitError, APIError or TransportError
    """
    code = description = None
    if isinstance(body, Mapping):
        code = body.get("error")
        description = body.get("error_description")
    code = str(code) if code else None
    message = f"{code}: {description}" if code and description else code or f"HTTP {status}"

    if status == 429 or code == "QUERY_LIMIT_EXCEEDED":
        return RateLimitError(
            message,
            code=code or "QUERY_LIMIT_EXCEEDED",
            description=description,
            status_code=status,
        )
    if code:
        return APIError(message, code=code, description=description, status_code=status)
    return TransportError(message, status_code=status)
