"""Runtime orchestration components."""

from .listing import ListOrchestrator, PagePolicy, create_list
from .rest import HTTPClient, RESTTransport

__all__ = [
    "HTTPClient",
    "ListOrchestrator",
    "PagePolicy",
    "RESTTransport",
    "create_list",
]
