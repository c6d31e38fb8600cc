"""Automatic listing across pages.

The ListOrchestrator turns one logical "list" request into as many requests
as needed to retrieve every entry.

Request Flow:
    1. One single call starting at ``params["start"]`` (default 0)
    2. No ``next`` in the response → the listing is complete, return it
    3. Otherwise plan one command per page from ``start`` to ``total``
    4. Dispatch the commands as one batch
    5. Merge the keyed batch results into one ListPayload

The entries of the first call are not reused: the batch plan starts at the
same offset as the first call, so the first page is fetched again inside
the batch and the merged payload only contains batch results.

Failures of the call or batch collaborators propagate unchanged; nothing is
retried and no partial payload is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Awaitable, Callable, Mapping, Sequence
from time import perf_counter
from typing import Any

from ...core.methods import Method, MethodRegistry, get_method_registry
from ...models import BatchPayload, CallPayload, Command, ListPayload
from .aggregator import flatten_result, merge_batch_into_list_payload
from .planner import CommandPlanner, PagePolicy
from .telemetry import log_batch_merged, log_first_call_complete, log_list_error

logger = logging.getLogger(__name__)

CallFn = Callable[[str, dict[str, Any]], Awaitable[CallPayload | Mapping[str, Any]]]
BatchFn = Callable[[Sequence[Command]], Awaitable[BatchPayload | Mapping[str, Any]]]
ListFn = Callable[..., Awaitable[ListPayload]]


class ListOrchestrator:
    """Retrieves complete listings using a single-call and a batch collaborator.

    Each ``list`` invocation is independent; the orchestrator holds no
    per-request state, so it can be shared between concurrent tasks.
    """

    def __init__(
        self,
        *,
        call: CallFn,
        batch: BatchFn,
        policy: PagePolicy | None = None,
        registry: MethodRegistry | None = None,
    ) -> None:
        """Initialize the orchestrator.

        Args:
            call: Coroutine function issuing one method call
            batch: Coroutine function issuing a sequence of commands as one batch
            policy: Optional paging policy (defaults to 50 entries per command)
            registry: Optional method registry (defaults to global singleton)
        """
        self._call = call
        self._batch = batch
        self._planner = CommandPlanner(policy)
        self._registry = registry or get_method_registry()

    async def list(
        self, method: str | Method, params: Mapping[str, Any] | None = None
    ) -> ListPayload:
        """Get all entries of a listable method.

        Args:
            method: Listable method name
            params: Method parameters; ``start`` is the offset to begin at

        Returns:
            ListPayload covering every entry from ``start`` to the end

        Raises:
            MethodNotListableError: If the method is not tagged listable
            TransportError: If a collaborator fails
        """
        name = self._registry.require_listable(method)
        params = dict(params or {})
        start = int(params.get("start") or 0)
        started = perf_counter()

        try:
            first = _as_call_payload(await self._call(name, {**params, "start": start}))
        except Exception as e:
            log_list_error(
                method=name, stage="call", error_type=type(e).__name__, error_message=str(e)
            )
            raise

        log_first_call_complete(
            method=name,
            start=start,
            total=first.total,
            next_offset=first.next,
            latency_ms=(perf_counter() - started) * 1000.0,
        )

        if not first.next:
            return _complete(first)

        if first.total <= start:
            # next without anything left past start: never send an empty batch
            logger.debug(
                "Nothing left to fetch",
                extra={"method": name, "start": start, "total": first.total},
            )
            return _complete(first)

        commands = self._planner.plan(
            Command(method=name, params=params), start=start, total=first.total
        )

        try:
            raw = await self._batch(commands)
        except Exception as e:
            log_list_error(
                method=name, stage="batch", error_type=type(e).__name__, error_message=str(e)
            )
            raise

        payload = merge_batch_into_list_payload(_as_batch_payload(raw))
        log_batch_merged(
            method=name,
            commands=len(commands),
            payload=payload,
            total_latency_ms=(perf_counter() - started) * 1000.0,
        )
        return payload

    __call__ = list


def create_list(
    *,
    call: CallFn,
    batch: BatchFn,
    policy: PagePolicy | None = None,
    registry: MethodRegistry | None = None,
) -> ListFn:
    """Create a ``list`` coroutine function bound to the given collaborators."""
    return ListOrchestrator(call=call, batch=batch, policy=policy, registry=registry).list


def _as_call_payload(response: CallPayload | Mapping[str, Any]) -> CallPayload:
    if isinstance(response, CallPayload):
        return response
    return CallPayload.model_validate(dict(response))


def _as_batch_payload(response: BatchPayload | Mapping[str, Any]) -> BatchPayload:
    if isinstance(response, BatchPayload):
        return response
    return BatchPayload.from_response(response)


def _complete(payload: CallPayload) -> ListPayload:
    return ListPayload(
        result=[] if payload.result is None else flatten_result(payload.result),
        total=payload.total,
        next=None,
        error=payload.error or "",
        time=payload.time,
    )
