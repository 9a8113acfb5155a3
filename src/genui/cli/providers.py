"""Provider factory functions for CLI.

Centralizes creation of the agent client and connection settings from
environment variables. Hides configuration details from command
implementations.
"""

import os
from typing import Any

from ..agent import create_agent_client
from ..connection import DEFAULT_API_VERSION, DEFAULT_DEPLOYMENT_NAME


def get_connection_settings() -> dict[str, str]:
    """Read connection settings from environment variables.

    Returns:
        Raw settings; missing required values are empty strings so the
        settings dialog can point them out

    Environment variables:
        AZURE_OPENAI_ENDPOINT: Resource endpoint URL
        AZURE_OPENAI_API_KEY: API key
        AZURE_OPENAI_DEPLOYMENT: Deployment name (default: gpt-4o)
        AZURE_OPENAI_API_VERSION: API version (default: 2024-05-01-preview)
        GENUI_MCP_SERVERS: Comma separated MCP server URLs (optional)
    """
    return {
        "endpoint": os.getenv("AZURE_OPENAI_ENDPOINT", ""),
        "api_key": os.getenv("AZURE_OPENAI_API_KEY", ""),
        "deployment_name": os.getenv("AZURE_OPENAI_DEPLOYMENT", DEFAULT_DEPLOYMENT_NAME),
        "api_version": os.getenv("AZURE_OPENAI_API_VERSION", DEFAULT_API_VERSION),
        "mcp_servers": os.getenv("GENUI_MCP_SERVERS", ""),
    }


def get_log_level(default: str | None = None) -> str | None:
    """Log panel level from GENUI_LOG_LEVEL, or default."""
    return os.getenv("GENUI_LOG_LEVEL", default) or None


def get_agent_client() -> Any:
    """Create the agent client.

    Environment variables:
        GENUI_TEMPERATURE: Sampling temperature (default: 0.7)
    """
    temperature = float(os.getenv("GENUI_TEMPERATURE", "0.7"))
    return create_agent_client("azure", temperature=temperature)
