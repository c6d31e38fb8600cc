"""Data models for requests and responses.

Architecture:
    Payload models are Pydantic v2 models, frozen so merged results cannot be
    modified after aggregation. Commands are plain frozen dataclasses since
    they are built internally and never validated from the wire.
"""

from .commands import Command
from .payloads import BatchPayload, CallPayload, ListPayload

__all__ = [
    "BatchPayload",
    "CallPayload",
    "Command",
    "ListPayload",
]
