"""Pytest configuration and shared fixtures for transport-chain tests."""

import httpx
import pytest


@pytest.fixture(autouse=True)
def clear_env(monkeypatch):
    """Clear transport-chain and test environment variables before each test.

    Keeps the factory and key resolution tests independent of the shell they
    run in.
    """
    import os

    test_prefixes = ("TEST_", "TRANSPORT_CHAIN_")

    for key in list(os.environ.keys()):
        if any(key.startswith(prefix) for prefix in test_prefixes):
            monkeypatch.delenv(key, raising=False)

    yield


@pytest.fixture
def recorded_requests():
    """List collecting every request that reached the terminal transport."""
    return []


@pytest.fixture
def ok_transport(recorded_requests):
    """Terminal transport answering 200 with a JSON body and recording requests."""

    def handler(request: httpx.Request) -> httpx.Response:
        recorded_requests.append(request)
        return httpx.Response(200, json={"ok": True})

    return httpx.MockTransport(handler)
