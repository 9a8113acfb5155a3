"""Data models for the agent endpoint connection."""

import re
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field, field_validator

DEFAULT_DEPLOYMENT_NAME = "gpt-4o"
DEFAULT_API_VERSION = "2024-05-01-preview"


class ConnectionState(str, Enum):
    """Lifecycle state of the agent connection."""

    DISCONNECTED = "disconnected"
    CONNECTING = "connecting"
    CONNECTED = "connected"
    ERROR = "error"


class ConfigValidationError(ValueError):
    """Raised when connection settings are missing or blank."""

    def __init__(self, fields: list[str]) -> None:
        super().__init__(f"Missing required connection settings: {', '.join(fields)}")
        self.fields = fields


class AgentConnectionConfig(BaseModel):
    """Settings needed to reach an Azure OpenAI deployment."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True)

    endpoint: str = Field(min_length=1, description="Azure OpenAI resource endpoint URL")
    api_key: str = Field(min_length=1, repr=False, description="API key for the resource")
    deployment_name: str = Field(min_length=1, description="Model deployment to call")
    api_version: str = Field(min_length=1, description="Azure OpenAI REST API version")
    mcp_servers: str = Field(
        default="",
        description="Optional MCP server URLs, separated by commas or newlines"
    )

    @field_validator("mcp_servers", mode="before")
    @classmethod
    def none_as_empty(cls, v: object) -> object:
        return "" if v is None else v

    @property
    def mcp_server_urls(self) -> list[str]:
        return [url.strip() for url in re.split(r"[,\n]", self.mcp_servers) if url.strip()]
