from collections.abc import Callable, Sequence
from typing import TYPE_CHECKING, Any

from openai import AsyncAzureOpenAI

from ..components import UIComponentNode
from .base import AgentClient, AgentNotConnectedError
from .parsing import parse_ui_response
from .prompts import get_system_prompt

if TYPE_CHECKING:
    from ..connection.models import AgentConnectionConfig
    from ..conversation.models import ContextEntry

# Conversation roles -> OpenAI message roles
_ROLE_MAP = {
    "user": "user",
    "model": "assistant",
}


def _history_to_messages(
    system_prompt: str,
    history: Sequence["ContextEntry"],
    prompt: str,
) -> list[dict[str, str]]:
    """Convert context entries to Chat Completions messages.

    Returns:
        System message, one message per history entry, then the new prompt
    """
    messages = [{"role": "system", "content": system_prompt}]
    for entry in history:
        messages.append({
            "role": _ROLE_MAP.get(entry.role, "user"),
            "content": entry.text,
        })
    messages.append({"role": "user", "content": prompt})
    return messages


def _mcp_tools(server_urls: list[str]) -> list[dict[str, Any]]:
    """Responses API tool entries, one per MCP server."""
    return [
        {
            "type": "mcp",
            "server_label": f"mcp_{i}",
            "server_url": url,
            "require_approval": "never",
        }
        for i, url in enumerate(server_urls, 1)
    ]


class AzureOpenAIAgentClient(AgentClient):
    """Agent client backed by an Azure OpenAI deployment.

    Hidden design decisions:
    - Azure client construction from an AgentConnectionConfig
    - Reachability probe on connect
    - Message format conversion (model turns become assistant messages)
    - API routing (Chat Completions in JSON mode, Responses API when MCP
      servers are configured)
    """

    def __init__(
        self,
        temperature: float = 0.7,
        system_prompt: str | None = None,
        client_factory: Callable[..., Any] = AsyncAzureOpenAI,
    ) -> None:
        """Initialize an unconnected client.

        Args:
            temperature: Sampling temperature for generation
            system_prompt: Overrides the packaged system prompt
            client_factory: Callable building the SDK client (AsyncAzureOpenAI)
        """
        self._temperature = temperature
        self._system_prompt = system_prompt
        self._client_factory = client_factory
        self._client: Any | None = None
        self._config: "AgentConnectionConfig | None" = None

    @property
    def is_connected(self) -> bool:
        return self._client is not None

    @property
    def deployment_name(self) -> str | None:
        return self._config.deployment_name if self._config else None

    async def connect(self, config: "AgentConnectionConfig") -> None:
        """Build the SDK client and probe the deployment with a tiny request.

        The previous client, if any, is closed first. On failure the client
        stays unconnected and the SDK error propagates.
        """
        await self.close()

        client = self._client_factory(
            azure_endpoint=config.endpoint,
            api_key=config.api_key,
            api_version=config.api_version,
        )
        try:
            await client.chat.completions.create(
                model=config.deployment_name,
                messages=[{"role": "user", "content": "ping"}],
                max_tokens=1,
            )
        except Exception:
            await client.close()
            raise

        self._client = client
        self._config = config

    async def generate_response(
        self,
        prompt: str,
        history: Sequence["ContextEntry"],
    ) -> UIComponentNode:
        if self._client is None or self._config is None:
            raise AgentNotConnectedError("Agent is not configured. Connect before sending messages.")

        system_prompt = self._system_prompt or get_system_prompt()
        messages = _history_to_messages(system_prompt, history, prompt)

        if self._config.mcp_server_urls:
            text = await self._responses_api_completion(messages)
        else:
            text = await self._chat_completion(messages)

        return parse_ui_response(text)

    async def _chat_completion(self, messages: list[dict[str, str]]) -> str:
        completion = await self._client.chat.completions.create(
            model=self._config.deployment_name,
            messages=messages,
            temperature=self._temperature,
            response_format={"type": "json_object"},
        )
        return completion.choices[0].message.content or ""

    async def _responses_api_completion(self, messages: list[dict[str, str]]) -> str:
        """Generate through the Responses API so the model can call MCP tools.

        The system message becomes the `instructions` parameter; the rest is
        passed as the input array.
        """
        instructions = messages[0]["content"]
        response = await self._client.responses.create(
            model=self._config.deployment_name,
            instructions=instructions,
            input=messages[1:],
            tools=_mcp_tools(self._config.mcp_server_urls),
            temperature=self._temperature,
        )
        return response.output_text or ""

    async def close(self) -> None:
        """Close the SDK client if one is open."""
        if self._client is not None:
            client = self._client
            self._client = None
            self._config = None
            await client.close()
