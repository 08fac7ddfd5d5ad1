"""custom-agents-server: fetch the custom agents configured for a repository.

This package provides the CustomAgentsService, which queries the custom
agents API on behalf of the current GitHub user, and a headless FastAPI
server exposing it over HTTP.
"""

from custom_agents_server.app import create_app
from custom_agents_server.cancellation import CancellationToken, OperationCancelledError
from custom_agents_server.client import AgentDescriptor, QueryOptions, RepositoryRef
from custom_agents_server.services import CustomAgentsService
from custom_agents_server.version import __version__

__all__ = [
    "AgentDescriptor",
    "CancellationToken",
    "CustomAgentsService",
    "OperationCancelledError",
    "QueryOptions",
    "RepositoryRef",
    "create_app",
    "__version__",
]
