"""Shared client constants.

Limits imposed by the REST API on listing and batching live here so the
planner, transport and facade agree on them.
"""

from __future__ import annotations

# Entries returned by one call of a "*.list" method
MAX_ENTRIES_PER_COMMAND = 50

# Commands accepted by one "batch" request
MAX_COMMANDS_PER_BATCH = 50

# Total request timeout in seconds
DEFAULT_TIMEOUT = 30.0

# Batch endpoint method name
BATCH_METHOD = "batch"
