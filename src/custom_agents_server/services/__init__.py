"""Business logic services for custom-agents-server.

This package contains the custom agents service and the outcome types used
to report why a fetch came back empty.
"""

from custom_agents_server.services.custom_agents import (
    DEFAULT_CUSTOM_AGENTS_URL,
    CustomAgentsService,
)
from custom_agents_server.services.outcomes import FetchFailure, FetchOutcome

__all__ = [
    "DEFAULT_CUSTOM_AGENTS_URL",
    "CustomAgentsService",
    "FetchFailure",
    "FetchOutcome",
]
