"""Custom Textual widgets for the TUI.

Hides widget implementation details:
- Free-text prompt entry
- Transcript rendering (user bubbles and UI surfaces)
- Log rendering with level filtering
"""

from datetime import datetime

from rich.markup import escape
from textual.containers import Horizontal, Vertical, VerticalScroll
from textual.message import Message
from textual.widgets import Button, Input, RichLog, Static

from ..conversation import ChatTurn, UserTurn
from .config import LOG_TIMESTAMP_FORMAT, MESSAGE_TIMESTAMP_FORMAT, LogLevel
from .renderer import UISurface

_LEVEL_STYLES = {
    LogLevel.DEBUG: "dim white",
    LogLevel.INFO: "cyan",
    LogLevel.WARNING: "yellow",
    LogLevel.ERROR: "bold red",
}

# Logger component tag -> style
_COMPONENT_STYLES = {
    "conversation": "green",
    "connection": "bright_blue",
    "agent": "magenta",
    "actions": "yellow",
    "forms": "bright_green",
    "state": "bright_white",
    "ui": "cyan",
}


class ChatInputBar(Horizontal):
    """Prompt line with a Send button.

    Mirrors its text through Changed messages so the session's free-text
    input stays current; Submitted carries no text because the session
    resolves the prompt from that input.
    """

    class Changed(Message):
        """Posted whenever the typed text changes."""

        def __init__(self, value: str) -> None:
            super().__init__()
            self.value = value

    class Submitted(Message):
        """Posted when the user asks to send."""

    def compose(self):
        yield Input(placeholder="Describe the UI you need, or answer the last one", id="chat-input")
        yield Button("Send", id="send-btn", variant="success")

    def on_mount(self) -> None:
        self.query_one("#chat-input", Input).focus()

    def on_input_changed(self, event: Input.Changed) -> None:
        event.stop()
        self.post_message(self.Changed(event.value))

    def on_input_submitted(self, event: Input.Submitted) -> None:
        event.stop()
        self._submit()

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "send-btn":
            event.stop()
            self._submit()

    def _submit(self) -> None:
        if self.query_one("#chat-input", Input).value.strip():
            self.post_message(self.Submitted())

    def set_text(self, value: str) -> None:
        chat_input = self.query_one("#chat-input", Input)
        if chat_input.value != value:
            chat_input.value = value

    def set_busy(self, busy: bool) -> None:
        """Reflect an in-flight send on the Send button."""
        button = self.query_one("#send-btn", Button)
        button.disabled = busy
        button.label = "..." if busy else "Send"


class TranscriptView(VerticalScroll):
    """Scrollable conversation: user bubbles and rendered UI surfaces.

    Only ever appends. The newest surface is the only one whose fields
    report changes; older surfaces are frozen when a newer one mounts.
    """

    BORDER_TITLE = "Conversation"
    BORDER_SUBTITLE = "0 turns"

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._rendered = 0

    @property
    def rendered_count(self) -> int:
        return self._rendered

    def sync(self, turns: tuple[ChatTurn, ...]) -> None:
        """Mount any turns not rendered yet."""
        for turn in turns[self._rendered:]:
            self._render_turn(turn)
            self._rendered += 1
        self.border_subtitle = f"{self._rendered} turns"

    @property
    def surfaces(self) -> list[UISurface]:
        return list(self.query(UISurface))

    def latest_surface(self) -> UISurface | None:
        surfaces = self.surfaces
        return surfaces[-1] if surfaces else None

    def _render_turn(self, turn: ChatTurn) -> None:
        timestamp = turn.timestamp.strftime(MESSAGE_TIMESTAMP_FORMAT)
        if isinstance(turn, UserTurn):
            container = Vertical(classes="chat-message user-message")
            container.compose_add_child(Static(f"> You [{timestamp}]", classes="message-header"))
            container.compose_add_child(Static(turn.content, classes="message-content", markup=False))
            self.mount(container)
            return

        for surface in self.surfaces:
            if not surface.frozen:
                surface.freeze()

        container = Vertical(classes="chat-message model-message")
        container.compose_add_child(Static(f"< Agent [{timestamp}]", classes="message-header"))
        container.compose_add_child(UISurface(turn.ui, classes="ui-surface"))
        self.mount(container)


class DebugPanel(RichLog):
    """Level-filtered log panel fed by PanelLogHandler.

    Hidden until --log-level is given or Ctrl+D toggles it. Entries below
    the panel's level are dropped, not buffered.
    """

    BORDER_TITLE = "Log"

    def __init__(self, *args, log_level: int = LogLevel.DEBUG, **kwargs) -> None:
        super().__init__(*args, markup=True, highlight=False, wrap=True, **kwargs)
        self._log_level = log_level

    @property
    def log_level(self) -> int:
        return self._log_level

    @log_level.setter
    def log_level(self, level: int) -> None:
        self._log_level = level
        self._refresh_subtitle()

    def on_mount(self) -> None:
        self.display = False
        self._refresh_subtitle()

    def _refresh_subtitle(self) -> None:
        self.border_subtitle = f"{LogLevel.name(self._log_level)} and above" if self.display else "hidden"

    def add_entry(self, component: str, message: str, level: int = LogLevel.DEBUG) -> None:
        """Write one entry if it meets the panel's level.

        Args:
            component: Component tag (conversation, connection, agent, ...)
            message: Plain text; markup characters are escaped
            level: One of the LogLevel constants
        """
        if level < self._log_level:
            return
        stamp = datetime.now().strftime(LOG_TIMESTAMP_FORMAT)
        level_style = _LEVEL_STYLES.get(level, "white")
        component_style = _COMPONENT_STYLES.get(component, "white")
        self.write(
            f"[dim]{stamp}[/] [{level_style}]{LogLevel.name(level):<7}[/] "
            f"[{component_style}]\\[{component}][/] {escape(message)}"
        )

    def toggle(self) -> bool:
        """Show or hide the panel. Returns True if now visible."""
        self.display = not self.display
        self._refresh_subtitle()
        return self.display
