"""Bridge from the logging module to the TUI log panel.

Core modules log through standard loggers; this handler forwards their
records to the DebugPanel, tagged with the component that emitted them.
"""

import logging
import threading
from typing import TYPE_CHECKING

from .config import LOG_MAX_MESSAGE_LENGTH, LogLevel

if TYPE_CHECKING:
    from textual.app import App

    from .widgets import DebugPanel


def component_for(logger_name: str) -> str:
    """Short component tag for a logger name.

    'genui.conversation.session' -> 'conversation'
    """
    parts = logger_name.split(".")
    if len(parts) > 1 and parts[0] == "genui":
        return parts[1]
    return parts[0] or "root"


class PanelLogHandler(logging.Handler):
    """logging.Handler that writes into a DebugPanel.

    Uses call_from_thread when a record arrives from a worker thread.
    """

    def __init__(self, panel: "DebugPanel", app: "App | None" = None, level: int = logging.DEBUG) -> None:
        super().__init__(level=level)
        self.panel = panel
        self.app = app

    def emit(self, record: logging.LogRecord) -> None:
        try:
            message = record.getMessage()
            if record.exc_info and record.exc_info[1] is not None:
                message = f"{message}: {record.exc_info[1]}"
            if len(message) > LOG_MAX_MESSAGE_LENGTH:
                message = message[:LOG_MAX_MESSAGE_LENGTH] + "..."
            component = component_for(record.name)
            level = LogLevel.clamp(record.levelno)

            if self.app is not None and self.app._thread_id != threading.get_ident():
                self.app.call_from_thread(self.panel.add_entry, component, message, level)
            else:
                self.panel.add_entry(component, message, level)
        except Exception:
            self.handleError(record)


def install_panel_handler(panel: "DebugPanel", app: "App | None" = None) -> PanelLogHandler:
    """Attach a PanelLogHandler to the package logger."""
    handler = PanelLogHandler(panel, app)
    package_logger = logging.getLogger("genui")
    package_logger.addHandler(handler)
    package_logger.setLevel(logging.DEBUG)
    return handler


def remove_panel_handler(handler: PanelLogHandler) -> None:
    logging.getLogger("genui").removeHandler(handler)
