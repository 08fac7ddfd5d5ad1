"""FastAPI application factory and lifespan management.

This module contains the create_app() factory function that creates and configures
the FastAPI application instance, including lifespan management for startup/shutdown
and router registration.
"""

import logging
from contextlib import asynccontextmanager
from typing import AsyncIterator

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from custom_agents_server.auth import StaticAuthenticationStore
from custom_agents_server.client import HttpxTransport
from custom_agents_server.config import CustomAgentsSettings
from custom_agents_server.routers import custom_agents, health
from custom_agents_server.services import CustomAgentsService
from custom_agents_server.version import __version__
from custom_agents_server.workspace import StaticRepositoryResolver

logger = logging.getLogger(__name__)


def build_custom_agents_service(
    settings: CustomAgentsSettings, transport: HttpxTransport
) -> CustomAgentsService:
    """Wire a CustomAgentsService from settings and a transport.

    Args:
        settings: Application settings.
        transport: The HTTP transport the service sends requests through.

    Returns:
        CustomAgentsService: The configured service.
    """
    return CustomAgentsService(
        transport=transport,
        auth_store=StaticAuthenticationStore(access_token=settings.github_token),
        resolver=StaticRepositoryResolver(
            owner=settings.repo_owner, name=settings.repo_name
        ),
        base_url=settings.url,
    )


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Lifespan context manager for FastAPI application.

    The HTTP transport and the custom agents service are created once at
    startup and stored in app.state for reuse across all requests.

    Args:
        app: The FastAPI application instance.

    Yields:
        None: Control is yielded while the app is running.
    """
    settings: CustomAgentsSettings = app.state.settings
    app.state.http_transport = HttpxTransport(timeout=settings.request_timeout)
    app.state.custom_agents_service = build_custom_agents_service(
        settings, app.state.http_transport
    )
    logger.info(f"Initialized custom agents service with URL: {settings.url}")

    if not settings.github_token:
        logger.warning(
            "No GitHub token configured - custom agent requests will return no agents"
        )

    yield

    # Shutdown: Clean up resources
    if hasattr(app.state, "http_transport"):
        await app.state.http_transport.close()
        logger.info("HTTP transport closed")


def create_app(settings: CustomAgentsSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application.

    This factory function creates a FastAPI instance with all routers,
    middleware, and configuration applied. It can accept an optional
    settings object for testing or explicit configuration.

    Args:
        settings: Optional CustomAgentsSettings instance. If not provided,
                  settings will be loaded from environment variables.

    Returns:
        FastAPI: Configured FastAPI application instance.
    """
    if settings is None:
        from custom_agents_server.dependencies import get_settings

        settings = get_settings()

    app = FastAPI(
        title="custom-agents-server",
        description="Headless FastAPI server for fetching repository custom agents",
        version=__version__,
        lifespan=lifespan,
    )

    # Store settings in app.state for lifespan access
    app.state.settings = settings

    # Note: FastAPI's type hints for add_middleware are overly strict
    app.add_middleware(
        CORSMiddleware,  # type: ignore[arg-type]
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(health.router)
    app.include_router(custom_agents.router)

    return app
