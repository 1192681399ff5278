"""The implicit default logger.

Every :class:`~elogging.context.LoggingContext` owns one
:class:`DefaultLogger`: scope ``""``, level ``TRACE``, writing to
``sys.stderr`` with the standard date/time flags. It is not registered, so it
never shows up in logger listings.

Its print family depends on :attr:`Behaviour.MIMIC_STDLOG`. When set, lines
are written exactly like the bare line writer would (no active check, no tag,
no repeat suppression). When clear, they behave like any scoped logger's
print family.

``fatal*`` and ``panic*`` always write and then raise (``SystemExit(1)`` and
:class:`LogPanic` respectively). They ignore the active switch, levels and
repeat suppression so that last-resort diagnostics are never swallowed.
"""

from __future__ import annotations

import typing as typ

from .behaviour import Behaviour
from .levels import Level
from .logger import _CALLDEPTH, ELogger, sprint, sprintf, sprintln
from .writer import STD_FLAGS

if typ.TYPE_CHECKING:
    from .context import LoggingContext

NoReturn = typ.NoReturn


class LogPanic(RuntimeError):
    """Raised by the ``panic`` family after the message has been written."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class DefaultLogger(ELogger):
    """Unregistered TRACE-level logger backing the module-level helpers."""

    def __init__(self, context: LoggingContext) -> None:
        super().__init__("", Level.TRACE, None, context=context, flags=STD_FLAGS)
        # Ignore the context default output; always follow the live stderr.
        if self._writer is not None:
            self._writer.set_output(None)

    def _attach(self) -> None:
        return

    @property
    def mimics_stdlog(self) -> bool:
        """Return whether the print family bypasses all elogging behaviour."""
        return bool(self._context.behaviour & Behaviour.MIMIC_STDLOG)

    def print(self, *args: object) -> str | None:
        return self._default_print("Print", sprint(args))

    def printf(self, template: str, *args: object) -> str | None:
        return self._default_print("Printf", sprintf(template, args))

    def println(self, *args: object) -> str | None:
        return self._default_print("Println", sprintln(args))

    def fatal(self, *args: object) -> NoReturn:
        """Write ``args`` and raise ``SystemExit(1)``."""
        self._fatal(sprint(args))

    def fatalf(self, template: str, *args: object) -> NoReturn:
        """Write ``template % args`` and raise ``SystemExit(1)``."""
        self._fatal(sprintf(template, args))

    def fatalln(self, *args: object) -> NoReturn:
        """Write space-separated ``args`` and raise ``SystemExit(1)``."""
        self._fatal(sprintln(args))

    def panic(self, *args: object) -> NoReturn:
        """Write ``args`` and raise :class:`LogPanic`."""
        self._panic(sprint(args))

    def panicf(self, template: str, *args: object) -> NoReturn:
        """Write ``template % args`` and raise :class:`LogPanic`."""
        self._panic(sprintf(template, args))

    def panicln(self, *args: object) -> NoReturn:
        """Write space-separated ``args`` and raise :class:`LogPanic`."""
        self._panic(sprintln(args))

    def _default_print(
        self, tag: str, text: str, depth: int = _CALLDEPTH
    ) -> str | None:
        if self.mimics_stdlog:
            return self._write_raw(text, depth)
        return self._print(tag, text, depth + 1)

    def _fatal(self, text: str, depth: int = _CALLDEPTH) -> NoReturn:
        self._write_raw(text, depth)
        raise SystemExit(1)

    def _panic(self, text: str, depth: int = _CALLDEPTH) -> NoReturn:
        self._write_raw(text, depth)
        raise LogPanic(text)


__all__ = ["DefaultLogger", "LogPanic"]
