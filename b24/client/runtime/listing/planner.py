"""Follow-up command planning for listings.

This module determines which commands are needed to fetch the remaining
pages of a listing once the first call has reported the total entry count.
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from ...config import MAX_ENTRIES_PER_COMMAND
from ...models import Command
from .telemetry import log_list_plan, log_plan_truncated


@dataclass(frozen=True)
class PagePolicy:
    """Paging policy for listable methods.

    Attributes:
        page_size: Entries returned by one command
        max_commands: Upper bound on follow-up commands (None = unlimited).
            A truncated plan yields a partial listing whose ``total`` still
            reports every entry; callers must resume from ``next`` to get
            the rest.
    """

    page_size: int = MAX_ENTRIES_PER_COMMAND
    max_commands: int | None = None

    def __post_init__(self) -> None:
        if self.page_size <= 0:
            raise ValueError("PagePolicy page_size must be positive")
        if self.max_commands is not None and self.max_commands <= 0:
            raise ValueError("PagePolicy max_commands must be positive")


def plan_followup_commands(
    command: Command,
    start: int,
    total_to_reach: int,
    page_size: int,
) -> list[Command]:
    """Generate the commands required to cover entries from start to total.

    Args:
        command: Template command; its params are copied into every result
        start: Offset of the first entry to fetch
        total_to_reach: Total entry count reported by the API
        page_size: Entries per command

    Returns:
        ``ceil((total_to_reach - start) / page_size)`` commands whose
        ``start`` params are ``start, start + page_size, ...``. Empty when
        ``total_to_reach <= start``.

    Raises:
        ValueError: If page_size is not positive
    """
    if page_size <= 0:
        raise ValueError("page_size must be positive")

    count = max(0, math.ceil((total_to_reach - start) / page_size))
    return [command.with_params(start=start + page_size * i) for i in range(count)]


class CommandPlanner:
    """Plans follow-up commands according to a PagePolicy."""

    def __init__(self, policy: PagePolicy | None = None) -> None:
        self._policy = policy or PagePolicy()

    @property
    def policy(self) -> PagePolicy:
        return self._policy

    def plan(self, command: Command, *, start: int, total: int) -> list[Command]:
        """Plan follow-up commands for a listing.

        Args:
            command: Template command of the listing
            start: Offset the listing started at
            total: Entry count reported by the first call

        Returns:
            List of commands, truncated to the policy's max_commands (logged at WARNING)
        """
        commands = plan_followup_commands(command, start, total, self._policy.page_size)
        limit = self._policy.max_commands
        if limit is not None and len(commands) > limit:
            log_plan_truncated(
                method=command.method,
                planned_commands=len(commands),
                max_commands=limit,
                resume_start=start + self._policy.page_size * limit,
            )
            commands = commands[:limit]

        log_list_plan(
            method=command.method,
            total_commands=len(commands),
            start=start,
            total=total,
            page_size=self._policy.page_size,
        )

        return commands
