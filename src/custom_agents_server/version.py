"""Version of custom-agents-server."""

__version__ = "0.1.0"
