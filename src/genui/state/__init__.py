"""Reactive state primitives shared by the conversation engine."""

from .signal import Signal

__all__ = ["Signal"]
