"""Pytest configuration for integration tests.

This module provides a fake custom agents API. The HttpxTransport created
by the app lifespan is patched so every request reaches the fake instead of
the network.
"""

from unittest.mock import patch

import httpx
import pytest

from custom_agents_server.client import HttpxTransport


class FakeCustomAgentsApi:
    """Records requests and answers them with a configurable response."""

    def __init__(self) -> None:
        self.requests: list[httpx.Request] = []
        self.status_code = 200
        self.payload: object = {"agents": []}
        self.raw_body: bytes | None = None
        self.error: Exception | None = None

    def handler(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        if self.error is not None:
            raise self.error
        if self.raw_body is not None:
            return httpx.Response(self.status_code, content=self.raw_body)
        return httpx.Response(self.status_code, json=self.payload)


@pytest.fixture(autouse=True)
def upstream():
    """Route the app's HTTP transport to a FakeCustomAgentsApi."""
    fake = FakeCustomAgentsApi()

    def make_transport(timeout: float) -> HttpxTransport:
        client = httpx.AsyncClient(
            transport=httpx.MockTransport(fake.handler), timeout=timeout
        )
        return HttpxTransport(timeout=timeout, client=client)

    with patch("custom_agents_server.app.HttpxTransport", side_effect=make_transport):
        yield fake
