"""Tagged fetch outcomes and their reduction to the public result.

Every failure a fetch can run into is recorded as a FetchFailure so it can be
logged, while callers only ever see a list of agents (empty on failure).
"""

import logging
from dataclasses import dataclass, field
from enum import Enum

from custom_agents_server.client.types import AgentDescriptor

logger = logging.getLogger(__name__)


class FetchFailure(str, Enum):
    """Why a custom agents fetch produced no agents."""

    NO_REPOSITORY_CONTEXT = "no_repository_context"
    UNAUTHENTICATED = "unauthenticated"
    TRANSPORT_FAILURE = "transport_failure"
    NON_SUCCESS_STATUS = "non_success_status"
    MALFORMED_RESPONSE = "malformed_response"


# Failures that point at a broken request or server rather than missing setup
_ERROR_FAILURES = {FetchFailure.TRANSPORT_FAILURE, FetchFailure.NON_SUCCESS_STATUS}


@dataclass(frozen=True)
class FetchOutcome:
    """Result of a single fetch, before it is flattened for the caller.

    Attributes:
        agents: Agents returned by the server (empty on failure)
        failure: The failure kind, or None on success
        detail: Human-readable context for the failure
    """

    agents: list[AgentDescriptor] = field(default_factory=list)
    failure: FetchFailure | None = None
    detail: str | None = None

    @classmethod
    def success(cls, agents: list[AgentDescriptor]) -> "FetchOutcome":
        return cls(agents=agents)

    @classmethod
    def failed(cls, failure: FetchFailure, detail: str | None = None) -> "FetchOutcome":
        return cls(failure=failure, detail=detail)

    @property
    def ok(self) -> bool:
        return self.failure is None

    def to_result(self) -> list[AgentDescriptor]:
        """Log the outcome and reduce it to the list returned to callers."""
        if self.failure is None:
            logger.info(f"Fetched {len(self.agents)} custom agents")
            return self.agents

        message = f"Custom agents fetch failed ({self.failure.value})"
        if self.detail:
            message = f"{message}: {self.detail}"
        if self.failure in _ERROR_FAILURES:
            logger.error(message)
        else:
            logger.warning(message)
        return []
