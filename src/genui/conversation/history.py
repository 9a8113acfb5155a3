"""Append-only log of conversation turns."""

from collections.abc import Callable, Iterator

from ..state import Signal
from .models import ChatTurn, ModelTurn, UserTurn


class ConversationHistory:
    """Ordered, append-only sequence of turns.

    Turns are frozen models and the sequence is only ever replaced by a
    longer tuple, so any tuple obtained from `turns` stays valid forever.
    """

    def __init__(self) -> None:
        self._turns: Signal[tuple[ChatTurn, ...]] = Signal(())

    @property
    def turns(self) -> tuple[ChatTurn, ...]:
        return self._turns.value

    def append(self, turn: ChatTurn) -> ChatTurn:
        """Append a turn and notify subscribers."""
        if not isinstance(turn, (UserTurn, ModelTurn)):
            raise TypeError(f"Expected UserTurn or ModelTurn, got {type(turn).__name__}")
        self._turns.update(lambda turns: (*turns, turn))
        return turn

    def subscribe(
        self,
        callback: Callable[[tuple[ChatTurn, ...]], None],
        deferred: bool = False,
    ) -> Callable[[], None]:
        """Observe appends. The callback receives the full tuple of turns."""
        return self._turns.subscribe(callback, deferred=deferred)

    @property
    def last(self) -> ChatTurn | None:
        turns = self._turns.value
        return turns[-1] if turns else None

    def count(self, role: str) -> int:
        return sum(1 for turn in self._turns.value if turn.role == role)

    def __len__(self) -> int:
        return len(self._turns.value)

    def __iter__(self) -> Iterator[ChatTurn]:
        return iter(self._turns.value)

    def __getitem__(self, index: int) -> ChatTurn:
        return self._turns.value[index]
