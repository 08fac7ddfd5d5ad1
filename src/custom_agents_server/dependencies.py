"""Dependency injection providers for FastAPI endpoints.

This module provides FastAPI dependency functions that are used across
routers to inject common dependencies like settings and services.
"""

from functools import lru_cache

from fastapi import HTTPException, Request

from custom_agents_server.config import CustomAgentsSettings
from custom_agents_server.services import CustomAgentsService


@lru_cache
def get_settings() -> CustomAgentsSettings:
    """Get the application settings instance.

    This function is cached so that the same settings instance is reused
    across all requests. Settings are loaded from environment variables
    with the CUSTOM_AGENTS_ prefix.

    Returns:
        CustomAgentsSettings: The application configuration settings.
    """
    return CustomAgentsSettings()


def get_custom_agents_service(request: Request) -> CustomAgentsService:
    """Get the custom agents service from app state.

    This function retrieves the CustomAgentsService instance that was created
    during application startup and stored in app.state.

    Args:
        request: The FastAPI request object.

    Returns:
        CustomAgentsService: The custom agents service instance.

    Raises:
        HTTPException: If the service is not initialized (503 Service Unavailable).
    """
    if not hasattr(request.app.state, "custom_agents_service"):
        raise HTTPException(
            status_code=503,
            detail="Custom agents service not initialized",
        )
    return request.app.state.custom_agents_service
