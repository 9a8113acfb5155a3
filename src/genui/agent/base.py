from abc import ABC, abstractmethod
from collections.abc import Sequence
from typing import TYPE_CHECKING, Any

from ..components import UIComponentNode

if TYPE_CHECKING:
    from ..connection.models import AgentConnectionConfig
    from ..conversation.models import ContextEntry


class AgentClientError(Exception):
    """Base class for errors raised by agent clients."""


class AgentNotConnectedError(AgentClientError):
    """Raised when generating a response before a successful connect."""


class UIResponseParseError(AgentClientError):
    """Raised when the model's output is not a valid UI tree."""

    def __init__(self, message: str, raw: str = "") -> None:
        super().__init__(message)
        self.raw = raw


class AgentClient(ABC):
    """Abstract base class for the agent endpoint.

    This module hides the design decision of which model endpoint renders
    the UI. Implementations must handle:
    - Client setup and authentication from an AgentConnectionConfig
    - Conversion of context entries to the endpoint's message format
    - Parsing the model's output into a UIComponentNode

    Supports async context manager protocol for proper resource cleanup:
        async with client:
            await client.connect(config)
            ui = await client.generate_response(prompt, history)
    """

    @abstractmethod
    async def connect(self, config: "AgentConnectionConfig") -> None:
        """Configure the client and verify the endpoint is reachable.

        Raises:
            Exception: Endpoint-specific errors when the connection fails
        """

    @abstractmethod
    async def generate_response(
        self,
        prompt: str,
        history: Sequence["ContextEntry"],
    ) -> UIComponentNode:
        """Generate the next UI tree.

        Args:
            prompt: Technical prompt for this turn
            history: Context entries for all earlier turns, oldest first

        Returns:
            The UI tree to render as the model's turn

        Raises:
            AgentNotConnectedError: If connect has not succeeded
            UIResponseParseError: If the model output is not a UI tree
            Exception: Endpoint-specific errors during generation
        """

    @abstractmethod
    async def close(self) -> None:
        """Close any open connections or resources."""

    @property
    def is_connected(self) -> bool:
        return False

    async def __aenter__(self) -> "AgentClient":
        return self

    async def __aexit__(self, exc_type: Any, exc_val: Any, exc_tb: Any) -> None:
        """Async context manager exit with automatic cleanup.

        Note: Suppresses "Event loop is closed" errors during cleanup.
        This is a known harmless race condition in httpx/anyio cleanup:
        https://github.com/encode/httpx/issues/914
        """
        try:
            await self.close()
        except RuntimeError as e:
            if "Event loop is closed" not in str(e):
                raise
