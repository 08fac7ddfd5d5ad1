"""Custom agents service.

This module provides the CustomAgentsService which fetches the custom agents
configured for a repository. A fetch resolves the repository, builds an
authorized request, sends it through the HTTP transport and interprets the
response. Failures are never raised to the caller: they are logged and
reported as an empty list. Only cancellation propagates.
"""

import logging
from urllib.parse import quote, urlencode

from custom_agents_server.auth import GITHUB_PROVIDER_ID, AuthenticationStore
from custom_agents_server.cancellation import CancellationToken
from custom_agents_server.client import (
    AgentDescriptor,
    AuthorizedRequest,
    HttpTransport,
    QueryOptions,
    RepositoryRef,
    TransportResponse,
)
from custom_agents_server.services.outcomes import FetchFailure, FetchOutcome
from custom_agents_server.workspace import RepositoryResolver

logger = logging.getLogger(__name__)

DEFAULT_CUSTOM_AGENTS_URL = "https://api.githubcopilot.com/agents/swe/custom-agents"


class CustomAgentsService:
    """Service for fetching repository-scoped custom agents.

    All collaborators are injected, so the service holds no state besides
    the base URL and can be shared between concurrent fetches.

    Attributes:
        transport: HTTP transport used to reach the service
        auth_store: Source of GitHub authentication sessions
        resolver: Strategy that determines the current repository
        base_url: Base URL of the custom agents API
    """

    def __init__(
        self,
        transport: HttpTransport,
        auth_store: AuthenticationStore,
        resolver: RepositoryResolver,
        base_url: str | None = None,
    ) -> None:
        """Initialize the custom agents service.

        Args:
            transport: HTTP transport used to reach the service
            auth_store: Source of GitHub authentication sessions
            resolver: Strategy that determines the current repository
            base_url: Base URL override, defaults to the public endpoint
        """
        self.transport = transport
        self.auth_store = auth_store
        self.resolver = resolver
        self.base_url = (base_url or DEFAULT_CUSTOM_AGENTS_URL).rstrip("/")

    async def fetch_custom_agents(
        self,
        options: QueryOptions | None = None,
        token: CancellationToken | None = None,
    ) -> list[AgentDescriptor]:
        """Fetch the custom agents for the current repository.

        Args:
            options: Optional query options
            token: Optional cancellation token

        Returns:
            list[AgentDescriptor]: The agents, or an empty list when no
                repository can be resolved or the fetch fails
        """
        repository = await self.resolve_repository()
        if repository is None:
            return FetchOutcome.failed(
                FetchFailure.NO_REPOSITORY_CONTEXT,
                "No repository information found in workspace",
            ).to_result()

        return await self.fetch_custom_agents_for_repo(
            repository.owner, repository.name, options, token
        )

    async def fetch_custom_agents_for_repo(
        self,
        repo_owner: str,
        repo_name: str,
        options: QueryOptions | None = None,
        token: CancellationToken | None = None,
    ) -> list[AgentDescriptor]:
        """Fetch the custom agents for a specific repository.

        Args:
            repo_owner: Owner of the repository (e.g., "acme")
            repo_name: Name of the repository (e.g., "widgets")
            options: Optional query options
            token: Optional cancellation token

        Returns:
            list[AgentDescriptor]: The agents in server order, or an empty
                list if the fetch fails for any reason

        Raises:
            OperationCancelledError: If the token fires before the request settles
        """
        outcome = await self.fetch_outcome(repo_owner, repo_name, options, token)
        return outcome.to_result()

    async def fetch_outcome(
        self,
        repo_owner: str,
        repo_name: str,
        options: QueryOptions | None = None,
        token: CancellationToken | None = None,
    ) -> FetchOutcome:
        """Run a fetch and return its tagged outcome without flattening it."""
        try:
            request = await self.build_request(repo_owner, repo_name, options)
        except Exception as e:
            return FetchOutcome.failed(
                FetchFailure.UNAUTHENTICATED,
                f"Error reading authentication sessions: {e}",
            )

        if request is None:
            return FetchOutcome.failed(
                FetchFailure.UNAUTHENTICATED,
                "No GitHub authentication session found",
            )

        logger.debug(f"Fetching custom agents from {request.url}")

        try:
            response = await self.transport.request(request, token)
        except Exception as e:
            return FetchOutcome.failed(
                FetchFailure.TRANSPORT_FAILURE,
                f"Error fetching custom agents: {e!r}",
            )

        return self.interpret_response(response)

    async def resolve_repository(self) -> RepositoryRef | None:
        """Determine the repository for the current workspace.

        Returns:
            RepositoryRef | None: The repository, or None if it cannot be
                determined or the resolver fails
        """
        try:
            return await self.resolver.resolve()
        except Exception as e:
            logger.error(f"Error getting repository info: {e}")
            return None

    def build_url(
        self,
        repo_owner: str,
        repo_name: str,
        options: QueryOptions | None = None,
    ) -> str:
        """Build the custom agents URL for a repository.

        Query parameters are only added for options that are set, always in
        the order target, exclude_invalid_config, dedupe, include_sources.
        """
        owner = quote(repo_owner, safe="")
        name = quote(repo_name, safe="")
        url = f"{self.base_url}/{owner}/{name}"
        params = options.to_query_params() if options else []
        if params:
            url = f"{url}?{urlencode(params)}"
        return url

    async def build_request(
        self,
        repo_owner: str,
        repo_name: str,
        options: QueryOptions | None = None,
    ) -> AuthorizedRequest | None:
        """Build an authorized request for a repository's custom agents.

        The first GitHub session returned by the authentication store is used.

        Args:
            repo_owner: Owner of the repository
            repo_name: Name of the repository
            options: Optional query options

        Returns:
            AuthorizedRequest | None: The request, or None if there is no
                GitHub session
        """
        sessions = await self.auth_store.get_sessions(GITHUB_PROVIDER_ID)
        if not sessions:
            return None

        return AuthorizedRequest(
            url=self.build_url(repo_owner, repo_name, options),
            headers={
                "Authorization": f"Bearer {sessions[0].access_token}",
                "Accept": "application/json",
            },
        )

    def interpret_response(self, response: TransportResponse) -> FetchOutcome:
        """Validate a raw response and turn it into a fetch outcome.

        Args:
            response: Raw response from the transport

        Returns:
            FetchOutcome: Success with the agents verbatim, or the failure kind
        """
        if response.status_code != 200:
            return FetchOutcome.failed(
                FetchFailure.NON_SUCCESS_STATUS,
                f"Server responded with status {response.status_code}",
            )

        try:
            result = response.json()
        except (ValueError, RecursionError) as e:
            return FetchOutcome.failed(
                FetchFailure.MALFORMED_RESPONSE,
                f"Response body is not valid JSON: {e}",
            )

        agents = result.get("agents") if isinstance(result, dict) else None
        if not isinstance(agents, list):
            return FetchOutcome.failed(
                FetchFailure.MALFORMED_RESPONSE,
                "Invalid response format",
            )

        return FetchOutcome.success(agents)
