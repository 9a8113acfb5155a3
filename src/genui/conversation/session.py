"""Conversation orchestration.

ConversationSession owns the history and the live form state for one
session. It turns typed text and UI actions into user turns, asks the agent
client for the next UI tree, and appends it as a model turn.
"""

import logging
from collections.abc import Callable
from enum import Enum

from ..actions import ActionDispatcher
from ..agent.base import AgentClient
from ..components import UIComponentNode, build_greeting
from ..forms import FieldChangeEvent, FormStateAggregator
from ..state import Signal
from .history import ConversationHistory
from .models import ModelTurn, UserTurn
from .serializer import HistorySerializer

logger = logging.getLogger(__name__)


class SessionState(str, Enum):
    """Send state of a conversation session."""

    IDLE = "idle"
    SENDING = "sending"


class ConversationSession:
    """Single-session conversation engine.

    At most one send is in flight at a time; a send issued while another is
    pending is rejected, not queued.
    """

    def __init__(
        self,
        client: AgentClient,
        serializer: HistorySerializer | None = None,
        greeting: bool = True,
        on_open_settings: Callable[[], None] | None = None,
    ) -> None:
        self._client = client
        self._serializer = serializer or HistorySerializer()
        self.history = ConversationHistory()
        self.forms = FormStateAggregator()
        self.dispatcher = ActionDispatcher(self.forms)
        self.state: Signal[SessionState] = Signal(SessionState.IDLE)
        self.user_input: Signal[str] = Signal("")
        self.on_open_settings = on_open_settings

        if greeting:
            self.append_model_turn(build_greeting())

    @property
    def client(self) -> AgentClient:
        return self._client

    @property
    def is_loading(self) -> bool:
        return self.state.value is SessionState.SENDING

    async def send_message(
        self,
        prompt_text: str | None = None,
        display_text: str | None = None,
    ) -> ModelTurn | None:
        """Send a prompt to the agent and append its reply.

        Args:
            prompt_text: Technical prompt for the model (defaults to the free-text input)
            display_text: Text shown in the user's bubble (defaults to the prompt)

        Returns:
            The appended model turn, or None when the send was rejected or failed
        """
        text_to_send = prompt_text or self.user_input.value
        text_to_display = display_text or text_to_send

        if not text_to_send.strip() or self.is_loading:
            return None

        # Context covers the turns that existed before this one
        context = self._serializer.serialize(self.history)

        self.history.append(UserTurn(content=text_to_display, prompt_content=text_to_send))
        self.user_input.set("")
        self.state.set(SessionState.SENDING)

        try:
            ui = await self._client.generate_response(text_to_send, context)
            return self.append_model_turn(ui)
        except Exception:
            logger.exception("Agent failed to generate a response")
            return None
        finally:
            self.state.set(SessionState.IDLE)

    def append_model_turn(self, ui: UIComponentNode) -> ModelTurn:
        """Append a model turn.

        The new tree replaces whatever form was on screen, so fields still
        held from the previous one are dropped.
        """
        turn = ModelTurn(ui=ui)
        self.forms.clear()
        self.history.append(turn)
        return turn

    def handle_form_change(self, event: FieldChangeEvent) -> None:
        self.forms.apply(event)

    async def handle_ui_action(self, action_id: str) -> ModelTurn | None:
        """Route an action emitted by the renderer.

        The settings action opens the configuration surface; every other
        action becomes a send with separate prompt and display text.
        """
        composed = self.dispatcher.dispatch(action_id)
        if composed is None:
            if self.on_open_settings is not None:
                self.on_open_settings()
            return None

        return await self.send_message(composed.prompt, composed.display)
