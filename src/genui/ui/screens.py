"""Modal screens for the TUI.

This module hides the design decisions about:
- Settings dialog appearance (CSS, layout)
- Which connection fields are collected and how secrets are masked
- How invalid settings are pointed out

Validation itself happens in ConnectionSession; this screen only collects
values and highlights the fields it is told are missing.
"""

from collections.abc import Mapping

from textual.app import ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.screen import ModalScreen
from textual.widgets import Button, Input, Label, Static

from .config import SETTINGS_FIELDS


class SettingsScreen(ModalScreen[dict[str, str] | None]):
    """Modal dialog collecting agent connection settings.

    Dismisses with the entered values, or None when cancelled.
    """

    CSS = """
    SettingsScreen {
        align: center middle;
        background: $background 70%;
    }

    #settings-dialog {
        width: 72;
        height: auto;
        max-height: 90%;
        border: tall $accent;
        background: $surface;
        padding: 1 2;
    }

    #settings-title {
        width: 100%;
        text-align: center;
        text-style: bold;
        color: $accent;
        padding: 0 0 1 0;
        border-bottom: solid $border;
        margin-bottom: 1;
    }

    .settings-label {
        color: $text-muted;
        margin-top: 1;
    }

    .settings-input.missing {
        border: tall $error;
    }

    #settings-error {
        color: $error;
        height: auto;
    }

    #settings-buttons {
        width: 100%;
        height: 3;
        align: center middle;
        margin-top: 1;
    }

    #settings-buttons Button {
        margin: 0 1;
        min-width: 12;
    }
    """

    BINDINGS = [
        Binding("escape", "cancel", "Cancel", show=False),
    ]

    def __init__(
        self,
        values: Mapping[str, str] | None = None,
        invalid_fields: tuple[str, ...] = (),
    ) -> None:
        super().__init__()
        self._values = dict(values or {})
        self._invalid = set(invalid_fields)

    def compose(self) -> ComposeResult:
        with Vertical(id="settings-dialog"):
            yield Static("Agent Connection", id="settings-title")
            for name, label, secret in SETTINGS_FIELDS:
                yield Label(label, classes="settings-label")
                classes = "settings-input missing" if name in self._invalid else "settings-input"
                yield Input(
                    value=self._values.get(name, ""),
                    password=secret,
                    id=f"setting-{name}",
                    classes=classes,
                )
            if self._invalid:
                missing = ", ".join(sorted(self._invalid))
                yield Static(f"Required: {missing}", id="settings-error")
            with Horizontal(id="settings-buttons"):
                yield Button("Connect", id="btn-connect", variant="primary")
                yield Button("Cancel", id="btn-cancel", variant="default")

    def collect(self) -> dict[str, str]:
        """Current values of all settings inputs."""
        return {
            name: self.query_one(f"#setting-{name}", Input).value
            for name, _, _ in SETTINGS_FIELDS
        }

    def on_input_changed(self, event: Input.Changed) -> None:
        event.input.remove_class("missing")

    def on_button_pressed(self, event: Button.Pressed) -> None:
        if event.button.id == "btn-connect":
            self.dismiss(self.collect())
        elif event.button.id == "btn-cancel":
            self.dismiss(None)

    def action_cancel(self) -> None:
        self.dismiss(None)
