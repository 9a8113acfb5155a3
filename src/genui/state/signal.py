"""Reactive state cell.

Hides how state changes reach their observers. A write commits the new value
and notifies subscribers synchronously; subscribers that depend on layout
(scrolling, focus) can ask to be deferred to the next turn of the event loop.
"""

import asyncio
import logging
from collections.abc import Callable
from typing import Generic, TypeVar

T = TypeVar("T")

Subscriber = Callable[[T], None]
Unsubscribe = Callable[[], None]

logger = logging.getLogger(__name__)


class Signal(Generic[T]):
    """A value holder that notifies subscribers when the value changes.

    Usage:
        count = Signal(0)
        unsubscribe = count.subscribe(lambda v: print("count is", v))
        count.set(1)            # prints immediately
        count.update(lambda v: v + 1)
        unsubscribe()
    """

    def __init__(self, value: T) -> None:
        self._value = value
        self._subscribers: list[tuple[Subscriber, bool]] = []

    @property
    def value(self) -> T:
        """Current value."""
        return self._value

    def get(self) -> T:
        return self._value

    def set(self, value: T) -> None:
        """Commit a new value. Equal values do not notify."""
        if value == self._value:
            return
        self._value = value
        self._notify(value)

    def update(self, fn: Callable[[T], T]) -> None:
        """Commit the result of applying fn to the current value."""
        self.set(fn(self._value))

    def subscribe(self, callback: Subscriber, deferred: bool = False) -> Unsubscribe:
        """Register an observer.

        Args:
            callback: Called with the new value after each committed change
            deferred: Run on the next event loop iteration instead of inline

        Returns:
            A callable that removes the subscription
        """
        entry = (callback, deferred)
        self._subscribers.append(entry)

        def unsubscribe() -> None:
            if entry in self._subscribers:
                self._subscribers.remove(entry)

        return unsubscribe

    def _notify(self, value: T) -> None:
        # Snapshot so callbacks may unsubscribe while being notified
        for callback, deferred in list(self._subscribers):
            if deferred:
                _defer(callback, value)
            else:
                _call(callback, value)

    def __repr__(self) -> str:
        return f"Signal({self._value!r})"


def _defer(callback: Subscriber, value: object) -> None:
    """Queue callback onto the running loop, or run it now if there is none."""
    try:
        loop = asyncio.get_running_loop()
    except RuntimeError:
        logger.debug("No running event loop, running deferred subscriber inline")
        _call(callback, value)
        return
    loop.call_soon(_call, callback, value)


def _call(callback: Subscriber, value: object) -> None:
    """Run one subscriber. A failing subscriber never undoes the committed value."""
    try:
        callback(value)
    except Exception:
        logger.exception("Subscriber %r failed", callback)
