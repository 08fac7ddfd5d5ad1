"""CLI entry point for custom-agents-server.

This module provides the command-line interface for starting the server.
It can be invoked as `custom-agents-server` (via the script entry point) or
`python -m custom_agents_server`.
"""

import argparse
import logging
import os
import sys

import uvicorn

from custom_agents_server import __version__, create_app
from custom_agents_server.config import CustomAgentsSettings

APP_FACTORY = "custom_agents_server.app:create_app"


def main() -> None:
    """Main entry point for the custom-agents-server CLI.

    Parses command-line arguments and starts the uvicorn server with the
    FastAPI application.
    """
    parser = argparse.ArgumentParser(
        prog="custom-agents-server",
        description="Headless FastAPI server for fetching repository custom agents",
    )

    parser.add_argument(
        "--version",
        action="version",
        version=f"custom-agents-server {__version__}",
    )

    parser.add_argument(
        "--host",
        type=str,
        default=None,
        help="Host to bind the server to (default: 127.0.0.1, can be set via CUSTOM_AGENTS_HOST)",
    )

    parser.add_argument(
        "--port",
        type=int,
        default=None,
        help="Port to bind the server to (default: 8000, can be set via CUSTOM_AGENTS_PORT)",
    )

    parser.add_argument(
        "--url",
        type=str,
        default=None,
        help="Custom agents API base URL (can be set via CUSTOM_AGENTS_URL)",
    )

    parser.add_argument(
        "--log-level",
        type=str,
        default=None,
        choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
        help="Logging level (default: INFO, can be set via CUSTOM_AGENTS_LOG_LEVEL)",
    )

    parser.add_argument(
        "--reload",
        action="store_true",
        help="Enable auto-reload for development (uvicorn --reload)",
    )

    args = parser.parse_args()

    # Build settings, CLI args override environment variables
    settings_kwargs = {}
    if args.host is not None:
        settings_kwargs["host"] = args.host
    if args.port is not None:
        settings_kwargs["port"] = args.port
    if args.url is not None:
        settings_kwargs["url"] = args.url
    if args.log_level is not None:
        settings_kwargs["log_level"] = args.log_level

    settings = CustomAgentsSettings(**settings_kwargs)

    logging.basicConfig(level=settings.log_level)

    if args.reload:
        # The reloader imports the app factory in a fresh process, which
        # reads its settings from the environment.
        for key, value in settings_kwargs.items():
            os.environ[f"CUSTOM_AGENTS_{key.upper()}"] = str(value)

        uvicorn.run(
            APP_FACTORY,
            factory=True,
            host=settings.host,
            port=settings.port,
            log_level=settings.log_level.lower(),
            reload=True,
        )
        return

    app = create_app(settings=settings)

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    sys.exit(main())
