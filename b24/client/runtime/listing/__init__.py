"""Automatic listing for paged methods.

Architecture:
    The listing layer consists of:
    - aggregator.py: merges keyed batch results into one ListPayload
    - planner.py: plans follow-up commands (one per remaining page)
    - orchestrator.py: first call, planning, batch dispatch and merge
    - telemetry.py: structured logging

Usage:
    The orchestrator only depends on two coroutine functions, ``call`` and
    ``batch``, so it can run on top of RESTTransport or any test double.
"""

from __future__ import annotations

from .aggregator import (
    CommandResult,
    ScalarResult,
    SequenceResult,
    WrappedResult,
    classify_result,
    flatten_result,
    highest,
    merge_batch_into_list_payload,
)
from .orchestrator import ListOrchestrator, create_list
from .planner import CommandPlanner, PagePolicy, plan_followup_commands

__all__ = [
    "CommandResult",
    "SequenceResult",
    "WrappedResult",
    "ScalarResult",
    "classify_result",
    "flatten_result",
    "highest",
    "merge_batch_into_list_payload",
    "PagePolicy",
    "CommandPlanner",
    "plan_followup_commands",
    "ListOrchestrator",
    "create_list",
]
