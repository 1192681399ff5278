"""Scoped, leveled logger.

An :class:`ELogger` owns a scope name, a current :class:`~elogging.levels.Level`
and a :class:`~elogging.writer.LineWriter`. Leveled calls (``error`` through
``trace``) are written when the call level is within the logger's own level,
or within the context's global override level. Print-family calls ignore
levels entirely and only respect the context's active switch.

Every emission method returns the text handed to the writer, or ``None``
when the call was filtered or suppressed. The text is the message body
behind a ``(LABEL)`` tag, for example ``"(WARN) disk almost full"``.

Examples
--------
>>> import io
>>> buf = io.StringIO()
>>> log = ELogger("svc", "warn", buf)
>>> log.set_flags(0)
>>> log.error("boom")
'(ERROR) boom'
>>> log.info("hidden") is None
True
>>> buf.getvalue()
'svc (ERROR) boom\\n'

Notes
-----
After :meth:`ELogger.dispose` every emission method is a no-op returning
``None``; the logger stays safe to call but never writes again.

"""

from __future__ import annotations

import collections.abc as cabc
import logging
import threading
import typing as typ
import uuid

from .behaviour import Behaviour
from .levels import LEVEL_COUNT, Level, LevelArg, parse_level
from .repeat import RepeatSuppressor
from .writer import Flag, LineWriter

if typ.TYPE_CHECKING:
    from .context import LoggingContext

Iterable = cabc.Iterable
TextIO = typ.TextIO
Final = typ.Final

# Frames between ``LineWriter.output`` and the application call site for
# the public emission methods: _emit -> _log/_print -> public method -> caller.
_CALLDEPTH: Final[int] = 4

_diag = logging.getLogger("elogging")


def _new_id() -> str:
    return uuid.uuid4().hex


def sprint(args: Iterable[object]) -> str:
    """Concatenate ``args``, spacing adjacent operands that are not strings."""
    parts: list[str] = []
    prev_is_str = True
    for arg in args:
        is_str = isinstance(arg, str)
        if parts and not is_str and not prev_is_str:
            parts.append(" ")
        parts.append(str(arg))
        prev_is_str = is_str
    return "".join(parts)


def sprintln(args: Iterable[object]) -> str:
    """Join ``args`` with single spaces."""
    return " ".join(str(arg) for arg in args)


def sprintf(template: str, args: tuple[object, ...]) -> str:
    """Apply ``%``-style formatting when arguments are given.

    Without arguments the template is returned untouched, as
    ``logging.LogRecord.getMessage`` does: ``"100%"`` stays valid and
    ``"100%%"`` is not collapsed to ``"100%"``.
    """
    return template % args if args else template


class ELogger:
    """A named logger with its own level, output and formatting flags.

    Parameters
    ----------
    scope : str, default ""
        Display name written in front of each message. Scope names need not
        be unique.
    level : str or Level, default ""
        Initial level. An empty string means ``"info"``; unrecognised names
        resolve to ``Level.DISABLED``.
    output : TextIO, optional
        Destination stream. ``None`` uses the context's default output.
    context : LoggingContext, optional
        Owning context. ``None`` uses :func:`elogging.get_context`.
    flags : int, optional
        Metadata flags for the writer. ``None`` uses the context's default
        flags at construction time.

    """

    def __init__(
        self,
        scope: str = "",
        level: LevelArg = "",
        output: TextIO | None = None,
        *,
        context: LoggingContext | None = None,
        flags: int | None = None,
    ) -> None:
        if context is None:
            from .context import get_context

            context = get_context()
        if level == "":
            level = Level.INFO
        if output is None:
            output = context.default_output
        if flags is None:
            flags = context.default_flags
        self._context = context
        self._scope = scope
        self._level = parse_level(level)
        self._writer: LineWriter | None = LineWriter(output, scope, flags)
        self._repeats = RepeatSuppressor()
        self._lock = threading.Lock()
        self._id = _new_id()
        self._attach()

    def _attach(self) -> None:
        self._context.registry.register(self, self._scope)
        _diag.debug("registered logger %s", self)

    def __repr__(self) -> str:
        return f"[{self._id}:{self._scope}:({self._level})]"

    # -- identity and state ---------------------------------------------

    @property
    def scope(self) -> str:
        """Return the scope name."""
        return self._scope

    @property
    def id(self) -> str:
        """Return the registry id."""
        return self._id

    @property
    def level(self) -> Level:
        """Return the current level."""
        return self._level

    @property
    def context(self) -> LoggingContext:
        """Return the owning context."""
        return self._context

    @property
    def disposed(self) -> bool:
        """Return ``True`` once :meth:`dispose` has run."""
        return self._writer is None

    @property
    def output(self) -> TextIO | None:
        """Return the destination stream, or ``None`` after disposal."""
        writer = self._writer
        return None if writer is None else writer.writer

    @property
    def repeats(self) -> RepeatSuppressor:
        """Return the repeat-suppression memory of this logger."""
        return self._repeats

    def get_level(self) -> str:
        """Return the current level name, e.g. ``"Info"``."""
        return str(self._level)

    def set_level(self, level: LevelArg) -> None:
        """Change the current level; unknown names disable the logger."""
        self._level = parse_level(level)

    def cycle_level_up(self) -> None:
        """Advance one level, wrapping from ``TRACE`` to ``DISABLED``."""
        with self._lock:
            self._level = Level((self._level + 1) % LEVEL_COUNT)

    def cycle_level_down(self) -> None:
        """Retreat one level, wrapping from ``DISABLED`` to ``TRACE``."""
        with self._lock:
            self._level = Level((self._level - 1) % LEVEL_COUNT)

    @property
    def flags(self) -> Flag:
        """Return the writer's metadata flags."""
        return self.get_flags()

    def get_flags(self) -> Flag:
        """Return the writer's metadata flags (``0`` after disposal)."""
        writer = self._writer
        return Flag(0) if writer is None else writer.flags

    def set_flags(self, flags: int) -> None:
        """Replace the writer's metadata flags."""
        writer = self._writer
        if writer is not None:
            writer.set_flags(flags)

    def modify_params(
        self,
        scope: str | None = None,
        level: LevelArg | None = None,
        output: TextIO | None = None,
    ) -> None:
        """Change any subset of scope, level and output in place.

        A new id is generated on every call. Changing the scope updates the
        registry entry and the writer prefix. Does nothing after disposal.
        """
        with self._lock:
            writer = self._writer
            if writer is None:
                return
            if scope is not None and scope != self._scope:
                self._scope = scope
                writer.set_prefix(scope)
                self._context.registry.rename(self, scope)
            if level is not None:
                self._level = parse_level(level)
            if output is not None:
                writer.set_output(output)
            self._id = _new_id()

    def dispose(self) -> None:
        """Deregister this logger and stop all further output.

        The logger is left at ``Level.DISABLED`` without a writer. Calling
        emission methods afterwards is allowed and does nothing.
        """
        with self._lock:
            if self._writer is None:
                return
            self._context.registry.deregister(self)
            self._level = Level.DISABLED
            self._writer = None
            self._repeats.reset()
        _diag.debug("disposed logger %s", self)

    # -- filtering -------------------------------------------------------

    def is_enabled_for(self, level: LevelArg) -> bool:
        """Return whether a call at ``level`` would currently be written."""
        lvl = parse_level(level)
        ctx = self._context
        if not ctx.active or lvl is Level.DISABLED:
            return False
        if lvl <= self._level:
            return True
        glob = ctx.global_level
        return glob > Level.DISABLED and lvl <= glob

    # -- leveled emission ------------------------------------------------

    def log(self, level: LevelArg, *args: object) -> str | None:
        """Write ``args`` at ``level``."""
        return self._log(parse_level(level), None, args)

    def logf(self, level: LevelArg, template: str, *args: object) -> str | None:
        """Write ``template % args`` at ``level``.

        With no ``args`` the template is written as-is; see :func:`sprintf`.
        """
        return self._log(parse_level(level), template, args)

    def log_if(
        self,
        condition: object,
        if_true: LevelArg,
        if_false: LevelArg,
        *args: object,
    ) -> str | None:
        """Write ``args`` at ``if_true`` when ``condition`` holds, else ``if_false``."""
        level = if_true if condition else if_false
        return self._log(parse_level(level), None, args)

    def log_iff(
        self,
        condition: object,
        if_true: LevelArg,
        if_false: LevelArg,
        template: str,
        *args: object,
    ) -> str | None:
        """Formatted form of :meth:`log_if`."""
        level = if_true if condition else if_false
        return self._log(parse_level(level), template, args)

    def error(self, *args: object) -> str | None:
        return self._log(Level.ERROR, None, args)

    def errorf(self, template: str, *args: object) -> str | None:
        return self._log(Level.ERROR, template, args)

    def warn(self, *args: object) -> str | None:
        return self._log(Level.WARNING, None, args)

    def warnf(self, template: str, *args: object) -> str | None:
        return self._log(Level.WARNING, template, args)

    warning = warn

    def info(self, *args: object) -> str | None:
        return self._log(Level.INFO, None, args)

    def infof(self, template: str, *args: object) -> str | None:
        return self._log(Level.INFO, template, args)

    def verbose(self, *args: object) -> str | None:
        return self._log(Level.VERBOSE, None, args)

    def verbosef(self, template: str, *args: object) -> str | None:
        return self._log(Level.VERBOSE, template, args)

    def trace(self, *args: object) -> str | None:
        return self._log(Level.TRACE, None, args)

    def tracef(self, template: str, *args: object) -> str | None:
        return self._log(Level.TRACE, template, args)

    # -- unleveled emission ----------------------------------------------

    def print(self, *args: object) -> str | None:
        """Write ``args`` regardless of level, tagged ``(Print)``."""
        return self._print("Print", sprint(args))

    def printf(self, template: str, *args: object) -> str | None:
        """Write ``template % args`` regardless of level, tagged ``(Printf)``.

        With no ``args`` the template is written as-is, ``%%`` included.
        """
        return self._print("Printf", sprintf(template, args))

    def println(self, *args: object) -> str | None:
        """Write space-separated ``args`` regardless of level, tagged ``(Println)``."""
        return self._print("Println", sprintln(args))

    # -- internals -------------------------------------------------------

    def _log(
        self,
        level: Level,
        template: str | None,
        args: tuple[object, ...],
        depth: int = _CALLDEPTH,
    ) -> str | None:
        if not self.is_enabled_for(level):
            return None
        body = sprint(args) if template is None else sprintf(template, args)
        return self._emit(f"({level.label}) {body}", depth)

    def _print(self, tag: str, text: str, depth: int = _CALLDEPTH) -> str | None:
        if not self._context.active:
            return None
        return self._emit(f"({tag}) {text}", depth)

    def _emit(self, text: str, depth: int) -> str | None:
        writer = self._writer
        if writer is None:
            return None
        if not self._context.behaviour & Behaviour.SUPPRESS_REPEATS:
            writer.output(depth, text)
            return text
        with self._repeats.lock:
            filtered = self._repeats.filter(text)
            if filtered is None:
                return None
            writer.output(depth, filtered)
        return filtered

    def _write_raw(self, text: str, depth: int) -> str | None:
        writer = self._writer
        if writer is None:
            return None
        writer.output(depth, text)
        return text


__all__ = ["ELogger", "sprint", "sprintf", "sprintln"]
