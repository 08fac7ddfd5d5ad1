"""Pydantic models for custom agents API responses.

This module contains the response schema for the /api/v1/custom-agents
endpoints.
"""

from typing import Any

from pydantic import BaseModel, Field


class CustomAgentListResponse(BaseModel):
    """Response model for listing the custom agents of a repository.

    Agents are returned exactly as the custom agents service sent them.

    Attributes:
        agents: List of custom agent descriptors
        count: Number of agents in the list
    """

    agents: list[Any] = Field(
        default_factory=list, description="List of custom agent descriptors"
    )
    count: int = Field(0, description="Number of agents returned")
