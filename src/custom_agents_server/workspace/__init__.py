"""Workspace collaborators: repository context resolution."""

from custom_agents_server.workspace.resolver import (
    RepositoryResolver,
    StaticRepositoryResolver,
)

__all__ = ["RepositoryResolver", "StaticRepositoryResolver"]
