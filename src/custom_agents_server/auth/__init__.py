"""Authentication collaborators for the custom agents service."""

from custom_agents_server.auth.sessions import (
    GITHUB_PROVIDER_ID,
    AuthenticationStore,
    AuthSession,
    StaticAuthenticationStore,
)

__all__ = [
    "GITHUB_PROVIDER_ID",
    "AuthSession",
    "AuthenticationStore",
    "StaticAuthenticationStore",
]
