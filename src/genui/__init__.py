"""
genui: a conversation engine for agents that answer with generative UI.

The agent replies with declarative component trees instead of text. This
package keeps the conversation coherent across turns: it aggregates live
form input, turns UI actions into prompts, and serializes earlier UI back
into the model's context.
"""

__version__ = "0.1.0"

from .actions import ActionDispatcher, ComposedPrompt, compose_action_prompt
from .agent import AgentClient, AzureOpenAIAgentClient, create_agent_client
from .components import ComponentType, UIComponentNode
from .connection import AgentConnectionConfig, ConnectionSession, ConnectionState
from .conversation import (
    ConversationHistory,
    ConversationSession,
    HistorySerializer,
    ModelTurn,
    SessionState,
    UserTurn,
)
from .forms import FieldChangeEvent, FieldState, FormStateAggregator
from .state import Signal

__all__ = [
    "ActionDispatcher",
    "AgentClient",
    "AgentConnectionConfig",
    "AzureOpenAIAgentClient",
    "ComponentType",
    "ComposedPrompt",
    "ConnectionSession",
    "ConnectionState",
    "ConversationHistory",
    "ConversationSession",
    "FieldChangeEvent",
    "FieldState",
    "FormStateAggregator",
    "HistorySerializer",
    "ModelTurn",
    "SessionState",
    "Signal",
    "UIComponentNode",
    "UserTurn",
    "compose_action_prompt",
    "create_agent_client",
]
