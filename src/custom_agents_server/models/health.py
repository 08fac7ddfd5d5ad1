"""Health check response model."""

from pydantic import BaseModel, Field


class HealthResponse(BaseModel):
    """Response model for the health check endpoint.

    Attributes:
        status: Health status indicator ("ok" or "error").
        version: The version of custom-agents-server.
        custom_agents_url: Base URL of the custom agents API, if configured.
        authenticated: Whether a GitHub session is available, if known.
    """

    status: str = Field(..., description="Health status of the service")
    version: str = Field(..., description="Version of custom-agents-server")
    custom_agents_url: str | None = Field(
        default=None,
        description="Base URL of the custom agents API",
    )
    authenticated: bool | None = Field(
        default=None,
        description="Whether a GitHub authentication session is available",
    )
