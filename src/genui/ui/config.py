"""UI configuration constants.

Log levels, timestamp formats and the settings dialog layout.
"""

import logging


class LogLevel:
    """Log panel levels.

    Values are the logging module's own, so a record's levelno can be
    compared directly against the panel threshold.
    """

    DEBUG = logging.DEBUG
    INFO = logging.INFO
    WARNING = logging.WARNING
    ERROR = logging.ERROR

    _DESCENDING = (ERROR, WARNING, INFO, DEBUG)

    @classmethod
    def clamp(cls, level: int) -> int:
        """Map any stdlib level onto the four panel levels."""
        return next((step for step in cls._DESCENDING if level >= step), cls.DEBUG)

    @classmethod
    def name(cls, level: int) -> str:
        return logging.getLevelName(cls.clamp(level))

    @classmethod
    def from_string(cls, level_str: str) -> int:
        """Parse a level name such as 'info'. Unknown names give DEBUG."""
        level = logging.getLevelName(level_str.strip().upper())
        return cls.clamp(level) if isinstance(level, int) else cls.DEBUG


# Log panel configuration
LOG_TIMESTAMP_FORMAT = "%H:%M:%S"
LOG_MAX_MESSAGE_LENGTH = 500  # truncate longer messages

# Chat display configuration
MESSAGE_TIMESTAMP_FORMAT = "%H:%M:%S"

# Settings screen field order: (field name, label, is secret)
SETTINGS_FIELDS = (
    ("endpoint", "Endpoint", False),
    ("api_key", "API Key", True),
    ("deployment_name", "Deployment Name", False),
    ("api_version", "API Version", False),
    ("mcp_servers", "MCP Servers (comma separated, optional)", False),
)

# Button variants from the component vocabulary -> Textual button variants
BUTTON_VARIANTS = {
    "primary": "primary",
    "secondary": "default",
    "danger": "error",
    "error": "error",
    "success": "success",
    "warning": "warning",
}
