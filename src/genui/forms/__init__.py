"""Live form state collected from rendered UI surfaces."""

from .aggregator import ActiveFormData, FormStateAggregator
from .models import FieldChangeEvent, FieldState

__all__ = [
    "ActiveFormData",
    "FieldChangeEvent",
    "FieldState",
    "FormStateAggregator",
]
