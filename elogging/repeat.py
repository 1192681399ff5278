"""Collapse runs of identical messages into periodic repeat indicators.

Each logger owns one :class:`RepeatSuppressor`. While a message keeps
repeating, only the occurrences whose repeat count is a power of three
(1, 3, 9, 27, ...) are written, each replaced by an indicator naming the
count. A different message ends the run and is written as-is.

Examples
--------
>>> s = RepeatSuppressor()
>>> s.filter("(INFO) tick")
'(INFO) tick'
>>> s.filter("(INFO) tick")
'(INFO) tick (repeated 1 times)'
>>> s.filter("(INFO) tick") is None
True

"""

from __future__ import annotations

import threading
import typing as typ

Final = typ.Final

TOO_MANY_THRESHOLD: Final[int] = 9
TOO_MANY_NOTE: Final[str] = " - repeated too many times"


def is_power_of_three(value: int) -> bool:
    """Return ``True`` when ``value`` is ``3 ** k`` for some ``k >= 0``."""
    if value < 1:
        return False
    while value % 3 == 0:
        value //= 3
    return value == 1


def repeat_indicator(message: str, count: int) -> str:
    """Return the indicator written in place of a repeated ``message``."""
    text = f"{message} (repeated {count} times)"
    if count > TOO_MANY_THRESHOLD:
        text += TOO_MANY_NOTE
    return text


class RepeatSuppressor:
    """Per-logger memory of the last message and its repeat count."""

    def __init__(self) -> None:
        self._last_message: str | None = None
        self._repeat_count = 0
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Return the re-entrant lock guarding the run.

        Hold it across :meth:`filter` and the write that follows so that
        indicators reach the output in count order.
        """
        return self._lock

    @property
    def last_message(self) -> str | None:
        """Return the message that started the current run."""
        return self._last_message

    @property
    def repeat_count(self) -> int:
        """Return how many times the last message has repeated."""
        return self._repeat_count

    def filter(self, message: str) -> str | None:
        """Return the text to write for ``message`` or ``None`` to drop it."""
        with self._lock:
            if message != self._last_message:
                self._last_message = message
                self._repeat_count = 0
                return message
            self._repeat_count += 1
            count = self._repeat_count
        if is_power_of_three(count):
            return repeat_indicator(message, count)
        return None

    def reset(self) -> None:
        """Forget the current run."""
        with self._lock:
            self._last_message = None
            self._repeat_count = 0


__all__ = [
    "TOO_MANY_NOTE",
    "TOO_MANY_THRESHOLD",
    "RepeatSuppressor",
    "is_power_of_three",
    "repeat_indicator",
]
