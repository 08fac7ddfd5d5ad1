"""HTTP client layer for the custom agents service.

This package provides the transport used to reach the custom agents API and
the types describing agents, query options and requests.
"""

from custom_agents_server.client.transport import HttpTransport, HttpxTransport
from custom_agents_server.client.types import (
    AgentDescriptor,
    AgentTarget,
    AuthorizedRequest,
    QueryOptions,
    RepositoryRef,
    TransportResponse,
)

__all__ = [
    "AgentDescriptor",
    "AgentTarget",
    "AuthorizedRequest",
    "HttpTransport",
    "HttpxTransport",
    "QueryOptions",
    "RepositoryRef",
    "TransportResponse",
]
