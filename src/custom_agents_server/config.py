"""Configuration module for custom-agents-server using pydantic-settings."""

from pydantic import Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from custom_agents_server.services.custom_agents import DEFAULT_CUSTOM_AGENTS_URL
from custom_agents_server.workspace.resolver import (
    DEFAULT_REPO_NAME,
    DEFAULT_REPO_OWNER,
)


class CustomAgentsSettings(BaseSettings):
    """Main configuration settings for custom-agents-server.

    All settings can be overridden via environment variables with the
    CUSTOM_AGENTS_ prefix. For example, CUSTOM_AGENTS_URL will override the
    url setting.
    """

    # Server
    host: str = "127.0.0.1"
    port: int = 8000

    # Custom agents API
    url: str = DEFAULT_CUSTOM_AGENTS_URL
    request_timeout: float = 30.0

    # Authentication
    github_token: str | None = Field(default=None, repr=False)

    # Repository used when none is given explicitly
    repo_owner: str = DEFAULT_REPO_OWNER
    repo_name: str = DEFAULT_REPO_NAME

    # CORS
    cors_origins: list[str] = Field(default_factory=lambda: ["*"])

    # Logging
    log_level: str = "INFO"

    model_config = SettingsConfigDict(env_prefix="CUSTOM_AGENTS_")
