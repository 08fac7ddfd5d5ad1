"""FastAPI routers for API endpoints.

This package contains all route handlers organized by resource type.
"""

from custom_agents_server.routers import custom_agents, health

__all__ = [
    "custom_agents",
    "health",
]
