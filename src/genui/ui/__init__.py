"""Terminal UI module for genui.

Provides a Textual-based host that renders generative UI turns.

Module structure (each module hides a design decision):
- renderer.py: Component tag -> widget mapping (UISurface)
- widgets.py: Transcript, input bar, log panel
- styles.py: CSS styling (layout decisions)
- screens.py: Connection settings dialog
- log_handler.py: logging -> log panel bridge
- config.py: Constants and log levels
- app.py: Application orchestration (user interaction flow)
"""

from .app import GenUIApp, run_textual_tui
from .config import LogLevel
from .renderer import UISurface
from .screens import SettingsScreen
from .widgets import ChatInputBar, DebugPanel, TranscriptView

__all__ = [
    "ChatInputBar",
    "DebugPanel",
    "GenUIApp",
    "LogLevel",
    "SettingsScreen",
    "TranscriptView",
    "UISurface",
    "run_textual_tui",
]
