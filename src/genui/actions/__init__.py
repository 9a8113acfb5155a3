"""UI action dispatch and prompt composition."""

from .dispatcher import ActionDispatcher, ComposedPrompt, compose_action_prompt, invalid_fields
from .prompts import DEMO_PROMPTS, OPEN_SETTINGS_ACTION

__all__ = [
    "DEMO_PROMPTS",
    "OPEN_SETTINGS_ACTION",
    "ActionDispatcher",
    "ComposedPrompt",
    "compose_action_prompt",
    "invalid_fields",
]
