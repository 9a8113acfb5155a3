from .azure_openai import AzureOpenAIAgentClient
from .base import AgentClient, AgentClientError, AgentNotConnectedError, UIResponseParseError
from .factory import create_agent_client
from .parsing import parse_ui_response

__all__ = [
    "AgentClient",
    "AgentClientError",
    "AgentNotConnectedError",
    "AzureOpenAIAgentClient",
    "UIResponseParseError",
    "create_agent_client",
    "parse_ui_response",
]
