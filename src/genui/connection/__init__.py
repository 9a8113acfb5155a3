"""Agent endpoint configuration and connection lifecycle."""

from .models import (
    DEFAULT_API_VERSION,
    DEFAULT_DEPLOYMENT_NAME,
    AgentConnectionConfig,
    ConfigValidationError,
    ConnectionState,
)
from .session import ConnectionSession, validate_config

__all__ = [
    "DEFAULT_API_VERSION",
    "DEFAULT_DEPLOYMENT_NAME",
    "AgentConnectionConfig",
    "ConfigValidationError",
    "ConnectionSession",
    "ConnectionState",
    "validate_config",
]
