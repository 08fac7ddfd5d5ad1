"""Authentication sessions used to authorize custom agent requests."""

import logging
from dataclasses import dataclass, field
from typing import Protocol, Sequence

logger = logging.getLogger(__name__)

GITHUB_PROVIDER_ID = "github"


@dataclass(frozen=True)
class AuthSession:
    """An authenticated session issued by an identity provider."""

    access_token: str = field(repr=False)
    account: str | None = None
    scopes: tuple[str, ...] = ()


class AuthenticationStore(Protocol):
    """Source of authentication sessions, keyed by provider id.

    An empty sequence means the user is not authenticated with the provider.
    """

    async def get_sessions(self, provider_id: str) -> Sequence[AuthSession]: ...


class StaticAuthenticationStore:
    """AuthenticationStore holding at most one GitHub token.

    Attributes:
        provider_id: The provider this store answers for
    """

    def __init__(
        self,
        access_token: str | None = None,
        account: str | None = None,
        provider_id: str = GITHUB_PROVIDER_ID,
    ) -> None:
        self.provider_id = provider_id
        self._session = (
            AuthSession(access_token=access_token, account=account)
            if access_token
            else None
        )

    async def get_sessions(self, provider_id: str) -> Sequence[AuthSession]:
        if provider_id != self.provider_id or self._session is None:
            logger.debug(f"No session available for provider: {provider_id}")
            return []
        return [self._session]
