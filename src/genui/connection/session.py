"""Agent endpoint connection lifecycle.

ConnectionSession validates settings from the configuration surface,
connects the agent client and announces success in the conversation.
It does not gate sends: the client itself rejects requests while
unconfigured.
"""

import logging
from collections.abc import Mapping
from typing import TYPE_CHECKING, Any

from pydantic import ValidationError

from ..agent.base import AgentClient
from ..components import build_connected_banner
from ..state import Signal
from .models import AgentConnectionConfig, ConfigValidationError, ConnectionState

if TYPE_CHECKING:
    from ..conversation import ConversationSession

logger = logging.getLogger(__name__)


def validate_config(values: Mapping[str, Any] | AgentConnectionConfig) -> AgentConnectionConfig:
    """Build a config from raw settings.

    Raises:
        ConfigValidationError: Listing every missing or blank required field
    """
    if isinstance(values, AgentConnectionConfig):
        return values
    try:
        return AgentConnectionConfig.model_validate(dict(values))
    except ValidationError as e:
        fields: list[str] = []
        for error in e.errors():
            name = str(error["loc"][0]) if error["loc"] else ""
            if name and name not in fields:
                fields.append(name)
        raise ConfigValidationError(fields) from e


class ConnectionSession:
    """Owns the connection config and the connect/disconnect lifecycle."""

    def __init__(self, client: AgentClient, conversation: "ConversationSession | None" = None) -> None:
        self._client = client
        self._conversation = conversation
        self.state: Signal[ConnectionState] = Signal(ConnectionState.DISCONNECTED)
        self.is_connecting: Signal[bool] = Signal(False)
        self.invalid_fields: Signal[tuple[str, ...]] = Signal(())
        self._config: AgentConnectionConfig | None = None

    @property
    def config(self) -> AgentConnectionConfig | None:
        """Config of the last successful connect."""
        return self._config

    @property
    def is_connected(self) -> bool:
        return self.state.value is ConnectionState.CONNECTED

    async def connect(self, values: Mapping[str, Any] | AgentConnectionConfig) -> bool:
        """Validate settings and connect the agent client.

        Invalid settings never reach the client and leave the state unchanged.
        A failed connect moves to ERROR and adds nothing to the conversation.

        Returns:
            True if connected
        """
        try:
            config = validate_config(values)
        except ConfigValidationError as e:
            self.invalid_fields.set(tuple(e.fields))
            logger.warning("Connection settings rejected: %s", ", ".join(e.fields))
            return False

        self.invalid_fields.set(())
        self.is_connecting.set(True)
        self.state.set(ConnectionState.CONNECTING)
        logger.info("Connecting to %s (%s)", config.endpoint, config.deployment_name)

        try:
            await self._client.connect(config)
        except Exception:
            self.state.set(ConnectionState.ERROR)
            logger.exception("Connection failed")
            return False
        finally:
            self.is_connecting.set(False)

        self._config = config
        self.state.set(ConnectionState.CONNECTED)
        logger.info("Connected to %s", config.deployment_name)

        if self._conversation is not None:
            self._conversation.append_model_turn(build_connected_banner(config.deployment_name))
        return True

    async def disconnect(self) -> None:
        """Close the client and return to DISCONNECTED."""
        await self._client.close()
        self._config = None
        self.state.set(ConnectionState.DISCONNECTED)
        logger.info("Disconnected")
