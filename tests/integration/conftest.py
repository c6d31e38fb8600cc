"""Shared fixtures for integration tests."""

import os

import pytest

# Skip all integration tests unless RUN_B24_NETWORK_TESTS=1
pytestmark = pytest.mark.skipif(
    os.environ.get("RUN_B24_NETWORK_TESTS") != "1",
    reason="Requires network access. Set RUN_B24_NETWORK_TESTS=1 to run",
)


@pytest.fixture
def webhook_url() -> str:
    """Inbound webhook URL of the portal under test."""
    url = os.environ.get("B24_WEBHOOK_URL")
    if not url:
        pytest.skip("B24_WEBHOOK_URL is not set")
    return url
