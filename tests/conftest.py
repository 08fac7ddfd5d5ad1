"""Pytest configuration and shared fixtures for custom-agents-server tests.

This module provides common fixtures used across all test modules,
including test app creation, async client setup and sample agents.
"""

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from custom_agents_server import create_app
from custom_agents_server.config import CustomAgentsSettings


@pytest.fixture
def test_settings():
    """Create test settings that never depend on the environment.

    Returns:
        CustomAgentsSettings: Settings instance configured for testing.
    """
    return CustomAgentsSettings(
        host="127.0.0.1",
        port=8000,
        url="https://agents.test/agents/swe/custom-agents",
        github_token="test-token",
        repo_owner="acme",
        repo_name="widgets",
        log_level="DEBUG",
        cors_origins=["*"],
    )


@pytest.fixture
def test_app(test_settings):
    """Create a FastAPI test application instance.

    Args:
        test_settings: Test settings fixture.

    Returns:
        FastAPI: Configured test application.
    """
    return create_app(settings=test_settings)


@pytest_asyncio.fixture
async def async_client(test_app):
    """Create an async HTTP client for testing FastAPI endpoints.

    Args:
        test_app: Test application fixture.

    Yields:
        AsyncClient: Async HTTP client for making test requests.
    """
    # Trigger the lifespan startup manually for tests
    async with test_app.router.lifespan_context(test_app):
        transport = ASGITransport(app=test_app)
        async with AsyncClient(transport=transport, base_url="http://test") as client:
            yield client


@pytest.fixture
def sample_agents():
    """Two custom agents in the wire format used by the custom agents API."""
    return [
        {
            "name": "reviewer",
            "repo_owner_id": 101,
            "repo_owner": "acme",
            "repo_id": 2002,
            "repo_name": "widgets",
            "display_name": "Code Reviewer",
            "description": "Reviews pull requests",
            "tools": ["read_file", "search"],
            "version": "1.2.0",
            "metadata": {"team": "platform", "priority": 3},
            "mcp-servers": {"github": {"type": "http", "url": "https://mcp.test"}},
            "target": "vscode",
        },
        {
            "name": "docs-writer",
            "repo_owner_id": 101,
            "repo_owner": "acme",
            "repo_id": 2002,
            "repo_name": "widgets",
            "display_name": "Docs Writer",
            "description": "Drafts documentation",
            "tools": [],
            "argument_hint": "<topic>",
            "version": "0.1.0",
            "config_error": "unknown tool: publish",
        },
    ]
