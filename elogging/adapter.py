"""Adapter bridging elogging output to stdlib ``logging.Handler`` objects.

Loggers write finished text lines to a stream. :class:`StdlibHandlerAdapter`
is such a stream: every composed line written to it becomes one
``logging.LogRecord``, even when the message body spans several lines.
Records go through the wrapped handler, so stdlib formatters, filters and
handler levels apply as usual.

The record level is recovered from the ``(LABEL)`` tag elogging puts in
front of each message. Print-family lines and untagged lines are recorded
at ``INFO``.

Examples
--------
>>> import io, logging
>>> stream = io.StringIO()
>>> adapter = StdlibHandlerAdapter(logging.StreamHandler(stream))
>>> from elogging import ELogger
>>> log = ELogger("svc", "trace", adapter)

"""

from __future__ import annotations

import logging
import re
import threading
import typing as typ
import warnings

Final = typ.Final

TRACE_LEVEL_NUM: Final[int] = 5
VERBOSE_LEVEL_NUM: Final[int] = 15
logging.addLevelName(TRACE_LEVEL_NUM, "TRACE")
logging.addLevelName(VERBOSE_LEVEL_NUM, "VERBOSE")

_TAG_TO_STDLIB_LEVEL: Final[dict[str, int]] = {
    "ERROR": logging.ERROR,
    "WARN": logging.WARNING,
    "INFO": logging.INFO,
    "VERBOSE": VERBOSE_LEVEL_NUM,
    "TRACE": TRACE_LEVEL_NUM,
    "Print": logging.INFO,
    "Printf": logging.INFO,
    "Println": logging.INFO,
}

_TAG_RE: Final[re.Pattern[str]] = re.compile(
    r"\((ERROR|WARN|INFO|VERBOSE|TRACE|Print|Printf|Println)\) "
)


def stdlib_levelno(line: str) -> int:
    """Derive the stdlib numeric level from an elogging line.

    The first ``(LABEL)`` tag in ``line`` decides; lines without a tag map to
    ``logging.INFO``.
    """
    match = _TAG_RE.search(line)
    if match is None:
        return logging.INFO
    return _TAG_TO_STDLIB_LEVEL[match.group(1)]


class StdlibHandlerAdapter:
    """Text stream that forwards each written line to a stdlib handler.

    Parameters
    ----------
    handler
        A ``logging.Handler`` (or subclass) instance.
    name
        Logger name recorded on every ``LogRecord``.

    Raises
    ------
    TypeError
        If *handler* is not an instance of ``logging.Handler``.

    """

    def __init__(self, handler: logging.Handler, name: str = "elogging") -> None:
        if not isinstance(handler, logging.Handler):
            msg = f"expected a logging.Handler instance, got {type(handler).__name__}"
            raise TypeError(msg)
        self._handler = handler
        self._name = name
        self._pending = ""
        self._lock = threading.Lock()
        self._closed = False

    @property
    def handler(self) -> logging.Handler:
        """Return the wrapped handler."""
        return self._handler

    # -- stream protocol --------------------------------------------------

    def write(self, text: str) -> int:
        """Buffer ``text`` and dispatch it once a write ends a line.

        Loggers hand over one composed line per call, so everything buffered
        up to a trailing newline becomes a single record. Newlines inside a
        message body therefore stay in that record and keep its level.
        Returns the number of characters accepted. Writes after
        :meth:`close` are dropped with a ``RuntimeWarning``.
        """
        if self._closed:
            warnings.warn(
                "StdlibHandlerAdapter.write() called after close(); "
                "the text is dropped",
                RuntimeWarning,
                stacklevel=2,
            )
            return 0
        with self._lock:
            data = self._pending + text
            if not data.endswith("\n"):
                self._pending = data
                return len(text)
            self._pending = ""
        self._dispatch(data[:-1])
        return len(text)

    def flush(self) -> None:
        """Dispatch any partial line and flush the wrapped handler."""
        with self._lock:
            pending, self._pending = self._pending, ""
        if pending:
            self._dispatch(pending)
        self._handler.flush()

    def close(self) -> None:
        """Flush and close the wrapped handler."""
        if self._closed:
            return
        self.flush()
        self._closed = True
        self._handler.close()

    @staticmethod
    def isatty() -> bool:
        return False

    # -- dispatch ---------------------------------------------------------

    def _dispatch(self, line: str) -> None:
        record = _make_log_record(self._name, line)
        # ``Handler.handle`` skips the level check ``Logger`` normally does.
        if record.levelno >= self._handler.level:
            self._handler.handle(record)


def _make_log_record(name: str, line: str) -> logging.LogRecord:
    """Build a ``logging.LogRecord`` for one elogging ``line``."""
    level = stdlib_levelno(line)
    record = logging.LogRecord(
        name=name,
        level=level,
        pathname="<elogging>",
        lineno=0,
        msg=line,
        args=(),
        exc_info=None,
    )
    record.levelname = logging.getLevelName(level)
    return record


__all__ = [
    "TRACE_LEVEL_NUM",
    "VERBOSE_LEVEL_NUM",
    "StdlibHandlerAdapter",
    "stdlib_levelno",
]
