"""Turning UI actions into next-turn prompts.

An action id plus whatever form data is live becomes a (prompt, display)
pair: the prompt is the technical text the model receives, the display is
the short text shown in the user's bubble.
"""

import json
import logging
from collections.abc import Mapping

from pydantic import BaseModel, ConfigDict, Field

from ..forms import FieldState, FormStateAggregator
from .prompts import (
    ACTION_DISPLAY_TEMPLATE,
    ACTION_PROMPT_TEMPLATE,
    DEMO_PROMPTS,
    INVALID_FIELDS_MARKER,
    INVALID_FIELDS_WARNING,
    OPEN_SETTINGS_ACTION,
    SUBMITTED_DATA_HEADER,
    SUBMITTED_DATA_MARKER,
)

logger = logging.getLogger(__name__)


class ComposedPrompt(BaseModel):
    """Prompt and display text produced for one action."""

    model_config = ConfigDict(frozen=True)

    prompt: str = Field(description="Technical text sent to the model")
    display: str = Field(description="Friendly text shown in the conversation")


def invalid_fields(form_data: Mapping[str, FieldState]) -> list[str]:
    """Ids of fields reported invalid, in insertion order."""
    return [field_id for field_id, state in form_data.items() if not state.is_valid]


def compose_action_prompt(action_id: str, form_data: Mapping[str, FieldState]) -> ComposedPrompt:
    """Build the (prompt, display) pair for an action.

    With form data present the values are embedded as pretty-printed JSON
    and invalid fields are flagged. Without form data, known demo actions
    map to fixed prompts and anything else gets a generic prompt.

    Args:
        action_id: Action identifier emitted by the renderer
        form_data: Field states captured for this action

    Returns:
        ComposedPrompt ready for ConversationSession.send_message
    """
    prompt = ACTION_PROMPT_TEMPLATE.format(action_id=action_id)
    display = ACTION_DISPLAY_TEMPLATE.format(action_id=action_id)

    if not form_data:
        if action_id in DEMO_PROMPTS:
            prompt, display = DEMO_PROMPTS[action_id]
        return ComposedPrompt(prompt=prompt, display=display)

    values = {field_id: state.value for field_id, state in form_data.items()}
    prompt += f"\n\n{SUBMITTED_DATA_HEADER}\n{json.dumps(values, indent=2, ensure_ascii=False)}"
    display += SUBMITTED_DATA_MARKER

    invalid = invalid_fields(form_data)
    if invalid:
        prompt += "\n\n" + INVALID_FIELDS_WARNING.format(fields=", ".join(invalid))
        display += INVALID_FIELDS_MARKER

    return ComposedPrompt(prompt=prompt, display=display)


class ActionDispatcher:
    """Routes action ids, consuming the live form state on every dispatch."""

    def __init__(self, forms: FormStateAggregator) -> None:
        self._forms = forms

    @staticmethod
    def is_settings_action(action_id: str) -> bool:
        return action_id == OPEN_SETTINGS_ACTION

    def dispatch(self, action_id: str) -> ComposedPrompt | None:
        """Compose the prompt for an action.

        Returns None for the settings action, which opens the configuration
        surface instead of producing a prompt and leaves form state alone.
        Every other action clears the form state, whether or not it used it.
        """
        if self.is_settings_action(action_id):
            return None

        form_data = self._forms.read_and_clear()
        composed = compose_action_prompt(action_id, form_data)
        logger.debug(
            "Dispatched action %s with %d field(s), %d invalid",
            action_id, len(form_data), len(invalid_fields(form_data)),
        )
        return composed
