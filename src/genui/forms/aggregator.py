"""Aggregation of transient form input.

Fields in generative UI are rendered anew each turn under arbitrary ids.
The aggregator collects their latest states into one snapshot so an action
can submit them together, then empties itself so the values cannot attach
to a later, unrelated action.
"""

import threading
from collections.abc import Callable, Mapping
from types import MappingProxyType

from ..state import Signal
from .models import FieldChangeEvent, FieldState

ActiveFormData = Mapping[str, FieldState]

_EMPTY: ActiveFormData = MappingProxyType({})


class FormStateAggregator:
    """Copy-on-write map of field id -> FieldState.

    Every write replaces the snapshot instead of mutating it, so a snapshot
    handed out earlier never changes underneath its reader.
    """

    def __init__(self) -> None:
        self._lock = threading.RLock()
        self._data: Signal[ActiveFormData] = Signal(_EMPTY)

    @property
    def snapshot(self) -> ActiveFormData:
        """Current read-only view of all field states, in insertion order."""
        return self._data.value

    def on_field_change(self, id: str, value: str, is_valid: bool) -> None:
        """Record the latest state of one field, leaving the others untouched."""
        state = FieldState(id=id, value=value, is_valid=is_valid)
        with self._lock:
            current = self._data.value
            self._data.set(MappingProxyType({**current, id: state}))

    def apply(self, event: FieldChangeEvent) -> None:
        self.on_field_change(event.id, event.value, event.is_valid)

    def read_and_clear(self) -> ActiveFormData:
        """Return every field state and reset to empty in a single step."""
        with self._lock:
            current = self._data.value
            self._data.set(_EMPTY)
        return current

    def clear(self) -> None:
        """Drop all field states without reading them."""
        with self._lock:
            self._data.set(_EMPTY)

    def subscribe(self, callback: Callable[[ActiveFormData], None]) -> Callable[[], None]:
        return self._data.subscribe(callback)

    def __len__(self) -> int:
        return len(self._data.value)

    def __bool__(self) -> bool:
        return bool(self._data.value)

    def __contains__(self, field_id: object) -> bool:
        return field_id in self._data.value
