"""Precise unit tests for exception hierarchy.

Tests focus on meaningful behavior, not just field access.
"""

from b24.client.core import (
    APIError,
    ClientError,
    MethodNotListableError,
    RateLimitError,
    TransportError,
    ValidationError,
)


def test_rate_limit_error_defaults():
    """Test RateLimitError carries the portal limit code."""
    error = RateLimitError("too many requests")
    assert error.status_code == 503
    assert error.code == "QUERY_LIMIT_EXCEEDED"
    assert isinstance(error, APIError)
    assert isinstance(error, TransportError)
    assert isinstance(error, ClientError)


def test_api_error_with_code_and_description():
    """Test APIError keeps the API error code and description."""
    error = APIError(
        "NOT_FOUND: Not found", code="NOT_FOUND", description="Not found", status_code=400
    )
    assert str(error) == "NOT_FOUND: Not found"
    assert error.code == "NOT_FOUND"
    assert error.description == "Not found"
    assert error.status_code == 400


def test_transport_error_with_status_code():
    """Test TransportError with status_code."""
    error = TransportError("HTTP 502", status_code=502)
    assert error.status_code == 502
    assert isinstance(error, ClientError)


def test_method_not_listable_error_names_method():
    """Test MethodNotListableError message and method attribute."""
    error = MethodNotListableError("crm.deal.get")
    assert error.method == "crm.deal.get"
    assert "crm.deal.get" in str(error)
    assert isinstance(error, ValidationError)
