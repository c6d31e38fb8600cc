"""High-level client wiring the REST transport to automatic listing.

Example:
    >>> async with Bitrix("https://portal.example.com/rest/1/secret/") as b24:
    ...     deals = await b24.list("crm.deal.list", {"select": ["ID", "TITLE"]})
    ...     print(deals.total, len(deals.result))
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any

from .config import DEFAULT_TIMEOUT
from .core.methods import Method, MethodRegistry, method_name
from .models import BatchPayload, CallPayload, Command, ListPayload
from .runtime.listing import ListOrchestrator, PagePolicy
from .runtime.rest import RESTTransport


class Bitrix:
    """REST client exposing single calls, batches and complete listings."""

    def __init__(
        self,
        rest_uri: str,
        access_token: str | None = None,
        *,
        timeout: float = DEFAULT_TIMEOUT,
        policy: PagePolicy | None = None,
        registry: MethodRegistry | None = None,
        transport: RESTTransport | None = None,
    ) -> None:
        """Initialize the client.

        Args:
            rest_uri: Portal REST root (webhook URL or OAuth REST endpoint)
            access_token: Optional OAuth access token sent as ``auth``
            timeout: Total request timeout in seconds
            policy: Optional paging policy for listings
            registry: Optional method registry (defaults to global singleton)
            transport: Optional preconfigured transport (overrides the above)
        """
        self._transport = transport or RESTTransport(
            rest_uri, access_token=access_token, timeout=timeout
        )
        self._lister = ListOrchestrator(
            call=self._transport.call,
            batch=self._transport.batch,
            policy=policy,
            registry=registry,
        )

    async def call(
        self, method: str | Method, params: Mapping[str, Any] | None = None
    ) -> CallPayload:
        """Call one method and return its raw payload."""
        return await self._transport.call(method_name(method), params)

    async def batch(self, commands: Sequence[Command]) -> BatchPayload:
        """Send several commands in as few round-trips as the API allows."""
        return await self._transport.batch(commands)

    async def list(
        self, method: str | Method, params: Mapping[str, Any] | None = None
    ) -> ListPayload:
        """Get every entry of a listable method."""
        return await self._lister.list(method, params)

    async def close(self) -> None:
        await self._transport.close()

    async def __aenter__(self) -> Bitrix:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()
