"""Response payload models.

These models describe the bodies returned by single calls and by the
``batch`` method, plus the merged payload produced by automatic listing.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic import ValidationError as PydanticValidationError

from ..core.exceptions import PayloadError


class CallPayload(BaseModel):
    """Body of a single method call.

    ``next`` is the offset to resume from; it is absent once the listing
    is exhausted.
    """

    result: Any = None
    total: int = 0
    next: int | None = None
    error: str | None = None
    time: Any = None

    model_config = ConfigDict(frozen=True)


class ListPayload(BaseModel):
    """Every entry of a listing, merged into one payload."""

    result: list[Any] = Field(default_factory=list)
    total: int = 0
    next: int | None = None
    error: str = ""
    time: Any = None

    model_config = ConfigDict(frozen=True)


class BatchPayload(BaseModel):
    """Body of a ``batch`` call, keyed by per-command key.

    The API sends each keyed section either as an object or, when the
    commands were submitted as an array, as a JSON array. Arrays are turned
    into mappings keyed by their string index so iteration order always
    equals submission order.
    """

    result: dict[str, Any] = Field(default_factory=dict)
    result_total: dict[str, int | None] = Field(default_factory=dict)
    result_error: dict[str, str] = Field(default_factory=dict)
    result_next: dict[str, int | None] = Field(default_factory=dict)
    time: Any = None

    model_config = ConfigDict(frozen=True)

    @field_validator("result", "result_total", "result_next", mode="before")
    @classmethod
    def _keyed(cls, v: Any) -> Any:
        return _as_mapping(v)

    @field_validator("result_error", mode="before")
    @classmethod
    def _keyed_errors(cls, v: Any) -> Any:
        return {key: _error_text(value) for key, value in _as_mapping(v).items()}

    @classmethod
    def from_response(cls, data: Any) -> BatchPayload:
        """Build a BatchPayload from a decoded ``batch`` response body.

        Accepts the wire shape, where the keyed sections sit under
        ``result`` next to ``time``::

            {"result": {"result": {...}, "result_total": {...}, ...}, "time": {...}}

        as well as the already flat shape of this model.

        Raises:
            PayloadError: If the body is not a JSON object
        """
        if not isinstance(data, Mapping):
            raise PayloadError(f"Unexpected batch response: {type(data).__name__}")
        inner = data.get("result")
        if isinstance(inner, Mapping) and "result" in inner:
            fields = {
                "result": inner.get("result"),
                "result_total": inner.get("result_total"),
                "result_error": inner.get("result_error"),
                "result_next": inner.get("result_next"),
                "time": data.get("time"),
            }
        else:
            fields = dict(data)
        try:
            return cls.model_validate(fields)
        except PydanticValidationError as e:
            raise PayloadError(f"Malformed batch response: {e}") from e


def _as_mapping(value: Any) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, Mapping):
        return {str(key): item for key, item in value.items()}
    if isinstance(value, (list, tuple)):
        return {str(index): item for index, item in enumerate(value)}
    raise ValueError(f"expected an object or an array, got {type(value).__name__}")


def _error_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return value
    if isinstance(value, Mapping):
        # {"error": "NOT_FOUND", "error_description": "Not found"}
        return str(value.get("error_description") or value.get("error") or "")
    return str(value)
