"""Pydantic models for API response schemas.

This package contains all Pydantic models used for serializing API responses
across all endpoints.
"""

from custom_agents_server.models.custom_agents import CustomAgentListResponse
from custom_agents_server.models.health import HealthResponse

__all__ = [
    "CustomAgentListResponse",
    "HealthResponse",
]
