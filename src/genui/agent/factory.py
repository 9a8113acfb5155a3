from typing import Any

from .azure_openai import AzureOpenAIAgentClient
from .base import AgentClient


def create_agent_client(provider: str = "azure", **config: Any) -> AgentClient:
    """Create an agent client instance.

    This factory function hides the instantiation logic for different endpoints.

    Args:
        provider: Client type ('azure' or 'azure_openai')
        **config: Client-specific configuration
            For Azure OpenAI:
                - temperature: float (default: 0.7)
                - system_prompt: str | None

    Returns:
        Unconnected agent client; call connect() with an AgentConnectionConfig

    Raises:
        ValueError: If provider type is not supported
    """
    provider_lower = provider.lower()

    if provider_lower in ("azure", "azure_openai"):
        return AzureOpenAIAgentClient(**config)

    raise ValueError(
        f"Unsupported agent provider: {provider}. "
        f"Supported providers: 'azure'"
    )
