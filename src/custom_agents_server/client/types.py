"""Type definitions for the custom agents API.

This module contains the dataclasses and typed dicts used for describing
custom agents, query options and the HTTP requests/responses exchanged with
the custom agents service.
"""

import json
from dataclasses import dataclass, field
from typing import Any, Literal, TypedDict

AgentTarget = Literal["github-copilot", "vscode"]


class _RequiredAgentFields(TypedDict):
    name: str
    repo_owner_id: int
    repo_owner: str
    repo_id: int
    repo_name: str
    display_name: str
    description: str
    tools: list[str]
    version: str


# "mcp-servers" is not a valid identifier, so the optional fields use the
# functional syntax.
_OptionalAgentFields = TypedDict(
    "_OptionalAgentFields",
    {
        "argument_hint": str,
        "metadata": dict[str, str | int | float],
        "mcp-servers": dict[str, Any],
        "target": str,
        "config_error": str,
    },
    total=False,
)


class AgentDescriptor(_RequiredAgentFields, _OptionalAgentFields):
    """A custom agent as returned by the custom agents service.

    Descriptors are passed through exactly as the server sends them, so the
    keys follow the wire format (snake_case, plus "mcp-servers").
    A set "config_error" means the agent is malformed server-side.
    """


@dataclass(frozen=True)
class QueryOptions:
    """Optional filters sent to the custom agents service.

    Any option left as None is not sent and the server default applies.

    Attributes:
        target: Restrict agents to a platform ("github-copilot" or "vscode")
        exclude_invalid_config: Ask the server to drop agents with a config_error
        dedupe: Collapse duplicate agents by identity
        include_sources: Opaque value passed through to the server
    """

    target: AgentTarget | None = None
    exclude_invalid_config: bool | None = None
    dedupe: bool | None = None
    include_sources: str | None = None

    def to_query_params(self) -> list[tuple[str, str]]:
        """Build the query parameters in their fixed wire order.

        Returns:
            list[tuple[str, str]]: Name/value pairs for the present options
        """
        params: list[tuple[str, str]] = []
        if self.target:
            params.append(("target", self.target))
        if self.exclude_invalid_config is not None:
            params.append(
                ("exclude_invalid_config", _format_bool(self.exclude_invalid_config))
            )
        if self.dedupe is not None:
            params.append(("dedupe", _format_bool(self.dedupe)))
        if self.include_sources:
            params.append(("include_sources", self.include_sources))
        return params


def _format_bool(value: bool) -> str:
    return "true" if value else "false"


@dataclass(frozen=True)
class RepositoryRef:
    """The (owner, name) pair a custom agents query is scoped to."""

    owner: str
    name: str

    def __str__(self) -> str:
        return f"{self.owner}/{self.name}"


@dataclass(frozen=True)
class AuthorizedRequest:
    """A fully built, authorized request to the custom agents service."""

    url: str
    headers: dict[str, str] = field(default_factory=dict)
    method: str = "GET"


@dataclass(frozen=True)
class TransportResponse:
    """Raw response returned by an HttpTransport.

    Attributes:
        status_code: HTTP status code
        body: Undecoded response body
    """

    status_code: int
    body: bytes = b""

    def json(self) -> Any:
        """Decode the body as JSON.

        Returns:
            Any: The decoded document, or None for an empty body

        Raises:
            ValueError: If the body is not valid JSON
        """
        if not self.body.strip():
            return None
        return json.loads(self.body)
