"""Custom agents router for listing the custom agents of a repository.

Both endpoints always answer 200: the service reports any failure to fetch
as an empty list.
"""

import logging

from fastapi import APIRouter, Depends, Query

from custom_agents_server.client import AgentTarget, QueryOptions
from custom_agents_server.dependencies import get_custom_agents_service
from custom_agents_server.models.custom_agents import CustomAgentListResponse
from custom_agents_server.services import CustomAgentsService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["custom-agents"])


def get_query_options(
    target: AgentTarget | None = Query(
        None, description="Restrict agents to a platform"
    ),
    exclude_invalid_config: bool | None = Query(
        None, description="Exclude agents with a configuration error"
    ),
    dedupe: bool | None = Query(None, description="Collapse duplicate agents"),
    include_sources: str | None = Query(
        None, description="Sources to include, passed through to the server"
    ),
) -> QueryOptions:
    """Collect the custom agents query options from the request."""
    return QueryOptions(
        target=target,
        exclude_invalid_config=exclude_invalid_config,
        dedupe=dedupe,
        include_sources=include_sources,
    )


@router.get("/custom-agents", response_model=CustomAgentListResponse)
async def list_custom_agents(
    options: QueryOptions = Depends(get_query_options),
    service: CustomAgentsService = Depends(get_custom_agents_service),
) -> CustomAgentListResponse:
    """List the custom agents of the current repository.

    Args:
        options: Query options (injected from query parameters).
        service: The custom agents service (injected).

    Returns:
        CustomAgentListResponse: The agents, empty if none could be fetched.
    """
    agents = await service.fetch_custom_agents(options)
    return CustomAgentListResponse(agents=agents, count=len(agents))


@router.get(
    "/custom-agents/{repo_owner}/{repo_name}",
    response_model=CustomAgentListResponse,
)
async def list_repo_custom_agents(
    repo_owner: str,
    repo_name: str,
    options: QueryOptions = Depends(get_query_options),
    service: CustomAgentsService = Depends(get_custom_agents_service),
) -> CustomAgentListResponse:
    """List the custom agents of a specific repository.

    Args:
        repo_owner: Owner of the repository.
        repo_name: Name of the repository.
        options: Query options (injected from query parameters).
        service: The custom agents service (injected).

    Returns:
        CustomAgentListResponse: The agents, empty if none could be fetched.
    """
    agents = await service.fetch_custom_agents_for_repo(repo_owner, repo_name, options)
    logger.debug(f"Returning {len(agents)} custom agents for {repo_owner}/{repo_name}")
    return CustomAgentListResponse(agents=agents, count=len(agents))
