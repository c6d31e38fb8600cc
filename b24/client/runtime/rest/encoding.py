"""Query-string encoding for batch commands.

Commands inside a batch are sent as ``"method?query"`` strings. The API
parses the query PHP-style, so nested parameters are flattened with
bracketed keys::

    {"filter": {">ID": 1}, "select": ["ID", "TITLE"]}
    -> filter[>ID]=1&select[0]=ID&select[1]=TITLE
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any
from urllib.parse import urlencode

from ...models import Command


def flatten_params(params: Mapping[str, Any], prefix: str | None = None) -> list[tuple[str, str]]:
    """Flatten nested parameters into bracketed key/value pairs.

    ``None`` values are skipped; booleans are sent as ``true``/``false``.
    """
    pairs: list[tuple[str, str]] = []
    for key, value in params.items():
        name = str(key) if prefix is None else f"{prefix}[{key}]"
        pairs.extend(_flatten_value(name, value))
    return pairs


def _flatten_value(name: str, value: Any) -> list[tuple[str, str]]:
    if value is None:
        return []
    if isinstance(value, Mapping):
        return flatten_params(value, name)
    if isinstance(value, (list, tuple)):
        return flatten_params(dict(enumerate(value)), name)
    if isinstance(value, bool):
        return [(name, "true" if value else "false")]
    return [(name, str(value))]


def encode_params(params: Mapping[str, Any]) -> str:
    """Encode parameters as a query string."""
    return urlencode(flatten_params(params))


def encode_command(command: Command) -> str:
    """Encode a command as ``method?query`` (or just ``method`` without params)."""
    query = encode_params(command.params)
    return f"{command.method}?{query}" if query else command.method
