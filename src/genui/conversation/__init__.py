"""Conversation engine.

Module structure:
- models.py: Turn and context-entry data structures
- history.py: Append-only turn log
- serializer.py: History -> agent context
- session.py: Send/receive orchestration (single-flight)
"""

from .history import ConversationHistory
from .models import ChatTurn, ContextEntry, ContextPart, ModelTurn, UserTurn
from .serializer import HistorySerializer, serialize_history
from .session import ConversationSession, SessionState

__all__ = [
    "ChatTurn",
    "ContextEntry",
    "ContextPart",
    "ConversationHistory",
    "ConversationSession",
    "HistorySerializer",
    "ModelTurn",
    "SessionState",
    "UserTurn",
    "serialize_history",
]
