"""REST runtime abstractions."""

from .encoding import encode_command, encode_params, flatten_params
from .http_client import HTTPClient, error_from_response
from .transport import RESTTransport, merge_batch_payloads, reorder_batch_payload

__all__ = [
    "HTTPClient",
    "RESTTransport",
    "encode_command",
    "encode_params",
    "error_from_response",
    "flatten_params",
    "merge_batch_payloads",
    "reorder_batch_payload",
]
