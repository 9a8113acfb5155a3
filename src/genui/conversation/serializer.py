"""Conversion of conversation history into agent context.

User turns contribute the technical prompt they sent, not their display
text. Model turns contribute the canonical JSON of the tree they rendered,
so the model keeps track of what is on screen across turns.
"""

from collections.abc import Iterable

from .models import ChatTurn, ContextEntry, ContextPart, UserTurn


class HistorySerializer:
    """Pure transform from turns to context entries, one entry per turn."""

    def serialize(self, turns: Iterable[ChatTurn]) -> list[ContextEntry]:
        return [self.serialize_turn(turn) for turn in turns]

    def serialize_turn(self, turn: ChatTurn) -> ContextEntry:
        if isinstance(turn, UserTurn):
            text = turn.technical_text
        else:
            text = turn.ui.to_canonical_json()
        return ContextEntry(role=turn.role, parts=[ContextPart(text=text)])


def serialize_history(turns: Iterable[ChatTurn]) -> list[ContextEntry]:
    """Serialize turns with the default serializer."""
    return HistorySerializer().serialize(turns)
