"""b24 client - REST client with automatic list pagination."""

from .client import Bitrix
from .config import MAX_COMMANDS_PER_BATCH, MAX_ENTRIES_PER_COMMAND
from .core import (
    APIError,
    ClientError,
    Method,
    MethodNotListableError,
    MethodRegistry,
    MethodSpec,
    PayloadError,
    RateLimitError,
    TransportError,
    ValidationError,
    get_method_registry,
    is_listable,
    method_name,
)
from .models import BatchPayload, CallPayload, Command, ListPayload
from .runtime.listing import (
    CommandPlanner,
    ListOrchestrator,
    PagePolicy,
    create_list,
    highest,
    merge_batch_into_list_payload,
    plan_followup_commands,
)
from .runtime.rest import HTTPClient, RESTTransport

__version__ = "0.1.0"

__all__ = [
    # Client
    "Bitrix",
    "RESTTransport",
    "HTTPClient",
    # Listing
    "ListOrchestrator",
    "create_list",
    "CommandPlanner",
    "PagePolicy",
    "plan_followup_commands",
    "merge_batch_into_list_payload",
    "highest",
    # Models
    "Command",
    "CallPayload",
    "BatchPayload",
    "ListPayload",
    # Methods
    "Method",
    "MethodSpec",
    "MethodRegistry",
    "get_method_registry",
    "is_listable",
    "method_name",
    # Exceptions
    "ClientError",
    "TransportError",
    "APIError",
    "RateLimitError",
    "PayloadError",
    "ValidationError",
    "MethodNotListableError",
    # Constants
    "MAX_ENTRIES_PER_COMMAND",
    "MAX_COMMANDS_PER_BATCH",
]
