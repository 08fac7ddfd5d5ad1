"""Health check endpoint router."""

import logging

from fastapi import APIRouter, Request

from custom_agents_server.auth import GITHUB_PROVIDER_ID
from custom_agents_server.models.health import HealthResponse
from custom_agents_server.services import CustomAgentsService
from custom_agents_server.version import __version__

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["health"])


@router.get("/health", response_model=HealthResponse)
async def health_check(request: Request) -> HealthResponse:
    """Health check endpoint.

    Returns the current health status and version of the server. If the
    custom agents service is initialized, also reports its base URL and
    whether a GitHub session is available.

    Args:
        request: The FastAPI request object.

    Returns:
        HealthResponse: Health status and version information.
    """
    custom_agents_url = None
    authenticated = None

    if hasattr(request.app.state, "custom_agents_service"):
        service: CustomAgentsService = request.app.state.custom_agents_service
        custom_agents_url = service.base_url

        try:
            sessions = await service.auth_store.get_sessions(GITHUB_PROVIDER_ID)
            authenticated = len(sessions) > 0
            logger.debug(f"GitHub session available: {authenticated}")
        except Exception as e:
            logger.warning(f"Authentication check failed: {e}")
            authenticated = False

    return HealthResponse(
        status="ok",
        version=__version__,
        custom_agents_url=custom_agents_url,
        authenticated=authenticated,
    )
