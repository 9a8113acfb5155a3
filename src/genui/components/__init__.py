"""Generative UI component tree.

Module structure:
- models.py: UIComponentNode and the known ComponentType tags
- builders.py: Trees the engine renders on its own (greeting, connection banner)
"""

from .builders import OPEN_SETTINGS_ACTION, build_connected_banner, build_greeting
from .models import FIELD_TYPES, ComponentType, PropValue, UIComponentNode

__all__ = [
    "FIELD_TYPES",
    "OPEN_SETTINGS_ACTION",
    "ComponentType",
    "PropValue",
    "UIComponentNode",
    "build_connected_banner",
    "build_greeting",
]
