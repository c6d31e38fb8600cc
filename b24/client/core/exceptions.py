"""Custom exception hierarchy."""

from __future__ import annotations


class ClientError(Exception):
    """Base exception for all library errors."""

    pass


class TransportError(ClientError):
    """Request could not be completed by the transport layer.

    Raised for network failures and non-success HTTP statuses. The
    listing layer never retries these; they propagate to the caller.
    """

    def __init__(
        self,
        message: str,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message)
        self.status_code = status_code


class APIError(TransportError):
    """Error body returned by the REST API (``error`` / ``error_description``)."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = None,
        description: str | None = None,
        status_code: int | None = None,
    ) -> None:
        super().__init__(message, status_code=status_code)
        self.code = code
        self.description = description


class RateLimitError(APIError):
    """Portal query limit exceeded."""

    def __init__(
        self,
        message: str,
        *,
        code: str | None = "QUERY_LIMIT_EXCEEDED",
        description: str | None = None,
        status_code: int | None = 503,
    ) -> None:
        super().__init__(message, code=code, description=description, status_code=status_code)


class PayloadError(ClientError):
    """Response body could not be decoded into a payload."""

    pass


class ValidationError(ClientError):
    """Invalid request arguments."""

    pass


class MethodNotListableError(ValidationError):
    """Method is not tagged as listable in the method registry."""

    def __init__(self, method: str) -> None:
        super().__init__(f"Method '{method}' does not support listing")
        self.method = method
