"""Merging of keyed batch results into one list payload.

Each key of a batch response holds the result of one command. Depending on
the method, that result is an array of entries, an object wrapping the
entries under ``items``, or a single entry. Results are first classified
into one of three shapes, then flattened and concatenated in key order.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from ...models import BatchPayload, ListPayload


@dataclass(frozen=True)
class SequenceResult:
    """Result that already is a sequence of entries."""

    entries: list[Any]


@dataclass(frozen=True)
class WrappedResult:
    """Object exposing its entries as an ``items`` list."""

    entries: list[Any]


@dataclass(frozen=True)
class ScalarResult:
    """Single entry (or anything of unrecognised shape)."""

    entry: Any


CommandResult = SequenceResult | WrappedResult | ScalarResult


def classify_result(value: Any) -> CommandResult:
    """Classify a per-command result by shape.

    Never raises: values matching neither a sequence nor an ``items``
    wrapper are treated as a single entry.
    """
    if isinstance(value, (list, tuple)):
        return SequenceResult(entries=list(value))

    # dict.items is a method, so mappings are checked by key
    if isinstance(value, Mapping):
        items = value.get("items")
    else:
        items = getattr(value, "items", None)
    if isinstance(items, (list, tuple)):
        return WrappedResult(entries=list(items))

    return ScalarResult(entry=value)


def flatten_result(value: Any) -> list[Any]:
    """Normalize a per-command result to a flat list of entries."""
    shape = classify_result(value)
    if isinstance(shape, (SequenceResult, WrappedResult)):
        return shape.entries
    return [shape.entry]


def highest(values: Iterable[float | None] | Mapping[Any, float | None]) -> float | None:
    """Get the highest defined value.

    Args:
        values: Optional numbers, or a mapping whose values are optional numbers

    Returns:
        The maximum of the values that are not None, or None if there are none
    """
    if isinstance(values, Mapping):
        values = values.values()

    best: float | None = None
    for value in values:
        if value is None:
            continue
        if best is None or value > best:
            best = value
    return best


def merge_batch_into_list_payload(batch: BatchPayload | Mapping[str, Any]) -> ListPayload:
    """Convert a batch payload to a list payload.

    Entries keep their per-command order and are concatenated in key order.
    ``total`` and ``next`` are the highest values reported by any command;
    ``error`` joins every per-command error with newlines, empty ones
    included.

    Args:
        batch: BatchPayload, or a mapping in the same flat shape

    Returns:
        Merged ListPayload
    """
    if not isinstance(batch, BatchPayload):
        batch = BatchPayload.model_validate(dict(batch))

    entries: list[Any] = []
    for value in batch.result.values():
        entries.extend(flatten_result(value))

    total = highest(batch.result_total)

    return ListPayload(
        result=entries,
        total=total if total is not None else 0,
        next=highest(batch.result_next),
        error="\n".join(batch.result_error.values()),
        time=batch.time,
    )
