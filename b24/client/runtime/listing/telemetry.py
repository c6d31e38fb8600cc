"""Structured logging for listing operations.

This module provides telemetry hooks for automatic listing, emitting
structured log records with the event name as message and details in
``extra``.
"""

from __future__ import annotations

import logging

from ...models import ListPayload

logger = logging.getLogger(__name__)


def log_list_plan(
    *,
    method: str,
    total_commands: int,
    start: int,
    total: int,
    page_size: int,
) -> None:
    """Log follow-up plan creation.

    Args:
        method: Listed method
        total_commands: Number of follow-up commands planned
        start: Offset the plan begins at
        total: Entry count reported by the first call
        page_size: Entries per command
    """
    logger.info(
        "list_plan_created",
        extra={
            "method": method,
            "total_commands": total_commands,
            "start": start,
            "total": total,
            "page_size": page_size,
        },
    )


def log_plan_truncated(
    *,
    method: str,
    planned_commands: int,
    max_commands: int,
    resume_start: int,
) -> None:
    """Log a plan cut short by the policy's command limit.

    Args:
        method: Listed method
        planned_commands: Commands needed to reach the total
        max_commands: Commands actually kept
        resume_start: Offset a caller must resume listing from
    """
    logger.warning(
        "list_plan_truncated",
        extra={
            "method": method,
            "planned_commands": planned_commands,
            "max_commands": max_commands,
            "resume_start": resume_start,
        },
    )


def log_first_call_complete(
    *,
    method: str,
    start: int,
    total: int,
    next_offset: int | None,
    latency_ms: float | None = None,
) -> None:
    """Log the result of the initial call of a listing.

    Args:
        method: Listed method
        start: Requested offset
        total: Entry count reported by the API
        next_offset: Continuation offset (None when the listing is complete)
        latency_ms: Latency in milliseconds (optional)
    """
    logger.debug(
        "list_first_call_complete",
        extra={
            "method": method,
            "start": start,
            "total": total,
            "next_offset": next_offset,
            "latency_ms": latency_ms,
        },
    )


def log_batch_merged(
    *,
    method: str,
    commands: int,
    payload: ListPayload,
    total_latency_ms: float | None = None,
) -> None:
    """Log completion of a listing that needed a batch.

    Args:
        method: Listed method
        commands: Number of commands in the batch
        payload: Merged payload
        total_latency_ms: Total latency in milliseconds (optional)
    """
    logger.info(
        "list_batch_merged",
        extra={
            "method": method,
            "commands": commands,
            "entries": len(payload.result),
            "total": payload.total,
            "has_errors": bool(payload.error.strip()),
            "total_latency_ms": total_latency_ms,
        },
    )


def log_list_error(
    *,
    method: str,
    stage: str,
    error_type: str,
    error_message: str,
) -> None:
    """Log a listing failure.

    Args:
        method: Listed method
        stage: "call" or "batch"
        error_type: Exception class name
        error_message: Error message
    """
    logger.error(
        "list_error",
        extra={
            "method": method,
            "stage": stage,
            "error_type": error_type,
            "error_message": error_message,
        },
    )
