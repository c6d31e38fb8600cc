"""REST transport implementing the call and batch collaborators."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Mapping, Sequence
from typing import Any

from pydantic import ValidationError as PydanticValidationError

from ...config import BATCH_METHOD, DEFAULT_TIMEOUT, MAX_COMMANDS_PER_BATCH
from ...core.exceptions import PayloadError
from ...core.methods import Method, method_name
from ...models import BatchPayload, CallPayload, Command
from .encoding import encode_command
from .http_client import HTTPClient

logger = logging.getLogger(__name__)


class RESTTransport:
    """Sends single calls and batches to a REST endpoint.

    ``base_url`` is the portal REST root, either an inbound webhook
    (``https://portal.example.com/rest/1/<secret>/``) or the OAuth REST
    root used together with ``access_token``.
    """

    def __init__(
        self,
        base_url: str,
        *,
        access_token: str | None = None,
        timeout: float = DEFAULT_TIMEOUT,
        max_commands_per_batch: int = MAX_COMMANDS_PER_BATCH,
    ) -> None:
        if max_commands_per_batch <= 0:
            raise ValueError("max_commands_per_batch must be positive")
        if not base_url.endswith("/"):
            base_url = f"{base_url}/"
        self._http = HTTPClient(base_url=base_url, timeout=timeout)
        self._access_token = access_token
        self._max_commands = max_commands_per_batch

    async def call(
        self, method: str | Method, params: Mapping[str, Any] | None = None
    ) -> CallPayload:
        """Call one method.

        Raises:
            TransportError: On network failure or error response
            PayloadError: If the body is not a call payload
        """
        method = method_name(method)
        data = await self._http.post(method, json=self._with_auth(dict(params or {})))
        if not isinstance(data, Mapping):
            raise PayloadError(f"Unexpected response for {method}: {type(data).__name__}")
        try:
            return CallPayload.model_validate(dict(data))
        except PydanticValidationError as e:
            raise PayloadError(f"Malformed response for {method}: {e}") from e

    async def batch(self, commands: Sequence[Command]) -> BatchPayload:
        """Send commands as batches of at most ``max_commands_per_batch``.

        Commands are keyed by their position ("0", "1", ...) across all
        chunks, and the chunk payloads are merged back in submission order.
        Per-command errors stay in ``result_error``; only transport failures
        raise.
        """
        commands = list(commands)
        if not commands:
            return BatchPayload()

        offsets = range(0, len(commands), self._max_commands)
        # A failing chunk cancels the chunks still in flight
        try:
            async with asyncio.TaskGroup() as group:
                tasks = [
                    group.create_task(
                        self._send_batch(commands[offset : offset + self._max_commands], offset)
                    )
                    for offset in offsets
                ]
        except ExceptionGroup as e:
            raise e.exceptions[0] from None
        payloads = [task.result() for task in tasks]
        if len(payloads) == 1:
            return payloads[0]
        return merge_batch_payloads(payloads, [str(i) for i in range(len(commands))])

    async def _send_batch(self, chunk: list[Command], offset: int) -> BatchPayload:
        cmd = {str(offset + i): encode_command(command) for i, command in enumerate(chunk)}
        logger.debug(
            "Sending batch",
            extra={"commands": len(cmd), "offset": offset},
        )
        data = await self._http.post(BATCH_METHOD, json=self._with_auth({"halt": 0, "cmd": cmd}))
        payload = BatchPayload.from_response(data)
        return reorder_batch_payload(payload, list(cmd))

    def _with_auth(self, body: dict[str, Any]) -> dict[str, Any]:
        if self._access_token:
            body["auth"] = self._access_token
        return body

    async def close(self) -> None:
        await self._http.close()

    async def __aenter__(self) -> RESTTransport:
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        await self.close()


def _ordered(mapping: Mapping[str, Any], keys: Sequence[str]) -> dict[str, Any]:
    ordered = {key: mapping[key] for key in keys if key in mapping}
    ordered.update((key, value) for key, value in mapping.items() if key not in ordered)
    return ordered


def reorder_batch_payload(payload: BatchPayload, keys: Sequence[str]) -> BatchPayload:
    """Order every keyed section of a batch payload by submission keys."""
    return BatchPayload(
        result=_ordered(payload.result, keys),
        result_total=_ordered(payload.result_total, keys),
        result_error=_ordered(payload.result_error, keys),
        result_next=_ordered(payload.result_next, keys),
        time=payload.time,
    )


def merge_batch_payloads(payloads: Sequence[BatchPayload], keys: Sequence[str]) -> BatchPayload:
    """Merge the payloads of several batch requests into one.

    ``time`` becomes the list of per-request times.
    """
    merged: dict[str, dict[str, Any]] = {
        "result": {},
        "result_total": {},
        "result_error": {},
        "result_next": {},
    }
    for payload in payloads:
        merged["result"].update(payload.result)
        merged["result_total"].update(payload.result_total)
        merged["result_error"].update(payload.result_error)
        merged["result_next"].update(payload.result_next)

    return BatchPayload(
        **{section: _ordered(values, keys) for section, values in merged.items()},
        time=[payload.time for payload in payloads],
    )
