"""Command value object."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from ..core.methods import Method, method_name


@dataclass(frozen=True)
class Command:
    """A single method invocation, as sent alone or inside a batch.

    Attributes:
        method: REST method name (e.g. "crm.deal.list"); Method members are
            stored as their value
        params: Method parameters; ``start`` is the listing offset
    """

    method: str
    params: dict[str, Any] = field(default_factory=dict)

    def __post_init__(self) -> None:
        if isinstance(self.method, Method):
            object.__setattr__(self, "method", method_name(self.method))

    def with_params(self, **overrides: Any) -> Command:
        """Return a copy with some parameters replaced."""
        return Command(method=self.method, params={**self.params, **overrides})
