"""Repository context resolution.

The repository a fetch is scoped to comes from a pluggable RepositoryResolver.
Only a static resolver is provided; detecting the repository from the
workspace's git remotes can be added as another resolver without changing
the service.
"""

from typing import Protocol

from custom_agents_server.client.types import RepositoryRef

DEFAULT_REPO_OWNER = "microsoft"
DEFAULT_REPO_NAME = "vscode"


class RepositoryResolver(Protocol):
    """Strategy that determines the repository for the current workspace."""

    async def resolve(self) -> RepositoryRef | None: ...


class StaticRepositoryResolver:
    """Resolver that always returns the same repository."""

    def __init__(
        self,
        owner: str = DEFAULT_REPO_OWNER,
        name: str = DEFAULT_REPO_NAME,
    ) -> None:
        self.repository = RepositoryRef(owner=owner, name=name)

    async def resolve(self) -> RepositoryRef | None:
        return self.repository
