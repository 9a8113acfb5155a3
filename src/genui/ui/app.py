"""Main Textual TUI application.

Hosts a ConversationSession: paints its turns, feeds field changes and
actions from rendered surfaces back into it, and drives the connection
settings dialog.
"""

import asyncio
import contextlib
import logging
from collections.abc import Mapping
from typing import Any

from textual import on, work
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.widgets import Footer, Header

from ..agent import AgentClient, create_agent_client
from ..connection import (
    DEFAULT_API_VERSION,
    DEFAULT_DEPLOYMENT_NAME,
    ConnectionSession,
    ConnectionState,
)
from ..conversation import ChatTurn, ConversationSession, SessionState
from ..forms import FieldChangeEvent
from .config import LogLevel
from .log_handler import PanelLogHandler, install_panel_handler, remove_panel_handler
from .renderer import UISurface
from .screens import SettingsScreen
from .styles import APP_CSS
from .widgets import ChatInputBar, DebugPanel, TranscriptView

logger = logging.getLogger(__name__)


class GenUIApp(App):
    """Textual TUI for a generative UI conversation."""

    CSS = APP_CSS
    TITLE = "genui"

    BINDINGS = [
        Binding("ctrl+c", "quit", "Quit"),
        Binding("ctrl+s", "open_settings", "Settings"),
        Binding("ctrl+d", "toggle_debug", "Log"),
        Binding("ctrl+r", "copy_last_ui", "Copy UI JSON"),
    ]

    def __init__(
        self,
        client: AgentClient | None = None,
        log_level: str | None = None,
        initial_settings: Mapping[str, str] | None = None,
        auto_connect: bool = False,
    ) -> None:
        super().__init__()
        self._client = client or create_agent_client()
        self._log_level = log_level
        self._settings: dict[str, str] = {
            "deployment_name": DEFAULT_DEPLOYMENT_NAME,
            "api_version": DEFAULT_API_VERSION,
            **{k: v for k, v in (initial_settings or {}).items() if v},
        }
        self._auto_connect = auto_connect
        self._log_handler: PanelLogHandler | None = None
        self._unsubscribers: list[Any] = []

        self.session = ConversationSession(self._client, on_open_settings=self.action_open_settings)
        self.connection = ConnectionSession(self._client, self.session)

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)
        yield TranscriptView(id="chat-history")
        yield DebugPanel(id="debug-panel")
        yield ChatInputBar(id="chat-input-bar")
        yield Footer()

    def on_mount(self) -> None:
        self.theme = "catppuccin-mocha"

        log_panel = self.query_one("#debug-panel", DebugPanel)
        self._log_handler = install_panel_handler(log_panel, app=self)
        if self._log_level is not None:
            log_panel.log_level = LogLevel.from_string(self._log_level)
            log_panel.display = True
            logger.info("Log panel enabled at %s", self._log_level.upper())

        transcript = self.query_one("#chat-history", TranscriptView)
        self._unsubscribers = [
            self.session.history.subscribe(transcript.sync),
            self.session.history.subscribe(self._scroll_to_latest, deferred=True),
            self.session.state.subscribe(self._on_session_state),
            self.session.user_input.subscribe(self._on_user_input),
            self.connection.state.subscribe(self._on_connection_state),
        ]

        transcript.sync(self.session.history.turns)
        self._update_subtitle()

        if self._auto_connect:
            self._connect(dict(self._settings))

    def on_unmount(self) -> None:
        for unsubscribe in self._unsubscribers:
            unsubscribe()
        self._unsubscribers = []
        if self._log_handler is not None:
            remove_panel_handler(self._log_handler)
            self._log_handler = None

    # --- State observers ---

    def _scroll_to_latest(self, turns: tuple[ChatTurn, ...]) -> None:
        transcript = self.query_one("#chat-history", TranscriptView)
        self.call_after_refresh(transcript.scroll_end, animate=False)

    def _on_session_state(self, state: SessionState) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_busy(state is SessionState.SENDING)
        self._update_subtitle()

    def _on_user_input(self, value: str) -> None:
        self.query_one("#chat-input-bar", ChatInputBar).set_text(value)

    def _on_connection_state(self, state: ConnectionState) -> None:
        self._update_subtitle()

    def _update_subtitle(self) -> None:
        connection = self.connection.state.value.value
        deployment = self.connection.config.deployment_name if self.connection.config else "no agent"
        busy = " | thinking..." if self.session.is_loading else ""
        self.sub_title = f"{deployment} | {connection}{busy}"

    # --- Input from widgets ---

    def on_chat_input_bar_changed(self, event: ChatInputBar.Changed) -> None:
        self.session.user_input.set(event.value)

    def on_chat_input_bar_submitted(self, event: ChatInputBar.Submitted) -> None:
        self._send()

    @on(UISurface.FieldChanged)
    def _on_field_changed(self, event: UISurface.FieldChanged) -> None:
        if event.surface.frozen:
            logger.debug("Dropping change to %s from a replaced surface", event.field_id)
            return
        self.session.handle_form_change(
            FieldChangeEvent(id=event.field_id, value=event.value, is_valid=event.is_valid)
        )

    @on(UISurface.ActionTriggered)
    def _on_action_triggered(self, event: UISurface.ActionTriggered) -> None:
        logger.debug("Action %s from surface", event.action_id)
        self._handle_action(event.action_id)

    # --- Workers ---

    @work(group="send")
    async def _send(self) -> None:
        """Send the typed text. Rejected sends leave the text in place."""
        before = len(self.session.history)
        reply = await self.session.send_message()
        self._report_unanswered(reply is None and len(self.session.history) > before)

    @work(group="send")
    async def _handle_action(self, action_id: str) -> None:
        before = len(self.session.history)
        reply = await self.session.handle_ui_action(action_id)
        self._report_unanswered(reply is None and len(self.session.history) > before)

    def _report_unanswered(self, unanswered: bool) -> None:
        # The failed turn stays in the transcript without a reply
        if unanswered:
            self.notify("The agent did not answer. Check the log (Ctrl+D).", severity="error", timeout=5)

    @work(group="connect", exclusive=True)
    async def _connect(self, values: dict[str, str]) -> None:
        self._settings.update({k: v for k, v in values.items() if v is not None})
        connected = await self.connection.connect(values)
        if connected:
            self.notify("Agent connected", severity="information", timeout=3)
        elif self.connection.invalid_fields.value:
            self.notify("Some connection settings are missing", severity="warning", timeout=3)
            self.action_open_settings()
        elif self.connection.state.value is ConnectionState.ERROR:
            self.notify("Connection failed. Check the log (Ctrl+D).", severity="error", timeout=5)

    # --- Actions ---

    def action_open_settings(self) -> None:
        """Show the connection settings dialog."""
        screen = SettingsScreen(self._settings, self.connection.invalid_fields.value)
        self.push_screen(screen, callback=self._on_settings_dismissed)

    def _on_settings_dismissed(self, values: dict[str, str] | None) -> None:
        if values is not None:
            self._connect(values)

    def action_toggle_debug(self) -> None:
        """Toggle the log panel visibility."""
        log_panel = self.query_one("#debug-panel", DebugPanel)
        is_visible = log_panel.toggle()
        self.notify(f"Log panel {'shown' if is_visible else 'hidden'}", timeout=2)

    def action_copy_last_ui(self) -> None:
        """Copy the latest model turn's UI tree as canonical JSON."""
        for turn in reversed(self.session.history.turns):
            if turn.role == "model":
                self.copy_to_clipboard(turn.ui.to_canonical_json())
                self.notify("UI JSON copied")
                return
        self.notify("No UI to copy", severity="warning")


async def run_textual_tui(
    client: AgentClient | None = None,
    log_level: str | None = None,
    initial_settings: Mapping[str, str] | None = None,
    auto_connect: bool = False,
) -> None:
    """Run the Textual TUI.

    Args:
        client: Agent client (defaults to an Azure OpenAI client)
        log_level: Log level for panel (debug/info/warning/error), None to hide
        initial_settings: Prefilled connection settings
        auto_connect: Connect with initial_settings on startup
    """
    app = GenUIApp(
        client=client,
        log_level=log_level,
        initial_settings=initial_settings,
        auto_connect=auto_connect,
    )
    try:
        await app.run_async()
    except (KeyboardInterrupt, asyncio.CancelledError):
        pass
    finally:
        with contextlib.suppress(Exception):
            await app.connection.disconnect()
