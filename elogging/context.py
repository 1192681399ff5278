"""Process-wide logging controls.

A :class:`LoggingContext` bundles the state shared by a family of loggers:
the registry of live scoped loggers, the active switch, the global level
override, defaults applied to newly created loggers, the behaviour flags and
the default logger.

Loggers receive their context at construction. Most programs use the
module-level singleton through :func:`get_context` and the forwarding
functions below; tests and embedders can build private contexts, or call
:func:`reset_context` to start from a clean slate.

Notes
-----
``active`` and ``global_level`` are read without locking on every emission
call. Both are single attribute reads, so callers always see either the old
or the new value.

"""

from __future__ import annotations

import logging
import threading
import typing as typ

from .behaviour import Behaviour
from .default import DefaultLogger
from .levels import Level, LevelArg, parse_level
from .logger import ELogger, sprint, sprintf, sprintln
from .registry import Registry
from .writer import Flag

TextIO = typ.TextIO
Final = typ.Final
NoReturn = typ.NoReturn

DEFAULT_FLAGS: Final[Flag] = (
    Flag.DATE | Flag.MICROSECONDS | Flag.LONGFILE | Flag.UTC | Flag.MSGPREFIX
)

_diag = logging.getLogger("elogging")


class LoggingContext:
    """Shared controls and registry for a family of loggers.

    Parameters
    ----------
    default_flags : int, default ``DEFAULT_FLAGS``
        Writer flags given to loggers created without explicit flags.
    default_output : TextIO, optional
        Stream given to loggers created without an output. ``None`` means
        the current ``sys.stderr`` at write time.
    behaviour : int, default 0
        Initial :class:`Behaviour` bitmask.

    """

    def __init__(
        self,
        *,
        default_flags: int = DEFAULT_FLAGS,
        default_output: TextIO | None = None,
        behaviour: int = 0,
    ) -> None:
        self.registry = Registry()
        self._active = True
        self._global_level = Level.DISABLED
        self._default_flags = Flag(default_flags)
        self._default_output = default_output
        self._behaviour = Behaviour(behaviour)
        self._default_logger = DefaultLogger(self)

    # -- switches --------------------------------------------------------

    @property
    def active(self) -> bool:
        """Return the master output switch."""
        return self._active

    def set_active(self, active: bool) -> None:
        """Enable or silence every logger of this context."""
        self._active = bool(active)

    def logs_on(self) -> None:
        """Resume output; loggers keep the levels they had."""
        self._active = True

    def logs_off(self) -> None:
        """Silence all output, including print-family calls."""
        self._active = False

    @property
    def global_level(self) -> Level:
        """Return the global override level (``DISABLED`` when unset)."""
        return self._global_level

    def set_global_level(self, level: LevelArg) -> None:
        """Widen every logger's visibility up to ``level``.

        The override can only make more calls visible. ``DISABLED`` (or any
        unrecognised name) removes it.
        """
        self._global_level = parse_level(level)

    @property
    def behaviour(self) -> Behaviour:
        """Return the active behaviour flags."""
        return self._behaviour

    def set_behaviour(self, behaviour: int) -> None:
        """Replace the behaviour flags."""
        self._behaviour = Behaviour(behaviour)

    def enable(self, behaviour: Behaviour) -> None:
        """Turn on ``behaviour`` in addition to the active flags."""
        self._behaviour |= behaviour

    def disable(self, behaviour: Behaviour) -> None:
        """Turn off ``behaviour``."""
        self._behaviour &= ~behaviour

    # -- defaults for new loggers ----------------------------------------

    @property
    def default_flags(self) -> Flag:
        """Return the flags given to newly created loggers."""
        return self._default_flags

    def set_default_flags(self, flags: int) -> None:
        """Set flags for loggers created from now on."""
        self._default_flags = Flag(flags)

    @property
    def default_output(self) -> TextIO | None:
        """Return the output given to newly created loggers."""
        return self._default_output

    def set_default_output(self, output: TextIO | None) -> None:
        """Set the output for loggers created from now on."""
        self._default_output = output

    @property
    def default_logger(self) -> DefaultLogger:
        """Return the implicit default logger."""
        return self._default_logger

    # -- logger lifecycle ------------------------------------------------

    def new_logger(
        self, scope: str, level: LevelArg = "", output: TextIO | None = None
    ) -> ELogger:
        """Create and register a logger bound to this context."""
        return ELogger(scope, level, output, context=self)

    def new_logger_defaults(self, scope: str) -> ELogger:
        """Create an ``info`` logger writing to the default output."""
        return ELogger(scope, Level.INFO, None, context=self)

    def dispose_all(self) -> int:
        """Dispose every registered logger and return how many there were."""
        loggers = self.registry.list_all()
        for logger in loggers:
            logger.dispose()
        _diag.debug("disposed %d loggers", len(loggers))
        return len(loggers)

    # -- registry queries ------------------------------------------------

    def list_loggers(self) -> list[ELogger]:
        """Return live loggers sorted by scope name."""
        return self.registry.list_all()

    def list_scopes_and_levels(self) -> tuple[list[str], list[str], list[str]]:
        """Return parallel ``(scopes, ids, levels)`` lists."""
        return self.registry.list_summary()

    def get_logger_by_id(self, logger_id: str) -> ELogger | None:
        """Return the logger with ``logger_id`` or ``None``."""
        return self.registry.find_by_id(logger_id)

    def get_logger_by_scope(self, scope: str) -> ELogger | None:
        """Return the first logger named ``scope`` or ``None``."""
        return self.registry.find_first_by_scope(scope)

    def set_scope_level_by_id(self, logger_id: str, level: LevelArg) -> bool:
        """Set the level of the logger with ``logger_id``.

        Returns ``False`` when no such logger exists.
        """
        logger = self.registry.find_by_id(logger_id)
        if logger is None:
            return False
        logger.set_level(level)
        return True

    def set_scope_level_by_scope(self, scope: str, level: LevelArg) -> bool:
        """Set the level of the first logger named ``scope``."""
        logger = self.registry.find_first_by_scope(scope)
        if logger is None:
            return False
        logger.set_level(level)
        return True


_context: LoggingContext | None = None
_context_lock = threading.Lock()


def get_context() -> LoggingContext:
    """Return the process-wide context, creating it on first use."""
    global _context  # noqa: PLW0603 - lazily initialised singleton
    ctx = _context
    if ctx is not None:
        return ctx
    with _context_lock:
        if _context is None:
            _context = LoggingContext()
        return _context


def reset_context() -> LoggingContext:
    """Install and return a fresh process-wide context.

    Loggers created before the reset keep their old context and disappear
    from the new registry.
    """
    global _context  # noqa: PLW0603 - lazily initialised singleton
    with _context_lock:
        _context = LoggingContext()
        return _context


# -- module-level forwarding -------------------------------------------------


def new_logger(
    scope: str, level: LevelArg = "", output: TextIO | None = None
) -> ELogger:
    """Create a logger in the process-wide context."""
    return get_context().new_logger(scope, level, output)


def new_logger_defaults(scope: str) -> ELogger:
    """Create an ``info`` logger in the process-wide context."""
    return get_context().new_logger_defaults(scope)


def set_active(active: bool) -> None:
    get_context().set_active(active)


def logs_on() -> None:
    get_context().logs_on()


def logs_off() -> None:
    get_context().logs_off()


def set_global_level(level: LevelArg) -> None:
    get_context().set_global_level(level)


def set_default_output(output: TextIO | None) -> None:
    get_context().set_default_output(output)


def set_default_flags(flags: int) -> None:
    get_context().set_default_flags(flags)


def default_flags() -> Flag:
    return get_context().default_flags


def set_behaviour(behaviour: int) -> None:
    get_context().set_behaviour(behaviour)


def list_loggers() -> list[ELogger]:
    return get_context().list_loggers()


def list_scopes_and_levels() -> tuple[list[str], list[str], list[str]]:
    return get_context().list_scopes_and_levels()


def get_logger_by_id(logger_id: str) -> ELogger | None:
    return get_context().get_logger_by_id(logger_id)


def get_logger_by_scope(scope: str) -> ELogger | None:
    return get_context().get_logger_by_scope(scope)


def set_scope_level_by_id(logger_id: str, level: LevelArg) -> bool:
    return get_context().set_scope_level_by_id(logger_id, level)


def set_scope_level_by_scope(scope: str, level: LevelArg) -> bool:
    return get_context().set_scope_level_by_scope(scope, level)


def default_logger() -> DefaultLogger:
    """Return the process-wide default logger."""
    return get_context().default_logger


# The helpers below call the default logger's internals directly so that
# call-site metadata points at the caller rather than at this module.


def print_(*args: object) -> str | None:
    """Print through the default logger (named to avoid the builtin)."""
    return default_logger()._default_print("Print", sprint(args))  # noqa: SLF001


def printf(template: str, *args: object) -> str | None:
    return default_logger()._default_print("Printf", sprintf(template, args))  # noqa: SLF001


def println(*args: object) -> str | None:
    return default_logger()._default_print("Println", sprintln(args))  # noqa: SLF001


def fatal(*args: object) -> NoReturn:
    default_logger()._fatal(sprint(args))  # noqa: SLF001


def fatalf(template: str, *args: object) -> NoReturn:
    default_logger()._fatal(sprintf(template, args))  # noqa: SLF001


def fatalln(*args: object) -> NoReturn:
    default_logger()._fatal(sprintln(args))  # noqa: SLF001


def panic(*args: object) -> NoReturn:
    default_logger()._panic(sprint(args))  # noqa: SLF001


def panicf(template: str, *args: object) -> NoReturn:
    default_logger()._panic(sprintf(template, args))  # noqa: SLF001


def panicln(*args: object) -> NoReturn:
    default_logger()._panic(sprintln(args))  # noqa: SLF001


__all__ = [
    "DEFAULT_FLAGS",
    "LoggingContext",
    "default_flags",
    "default_logger",
    "fatal",
    "fatalf",
    "fatalln",
    "get_context",
    "get_logger_by_id",
    "get_logger_by_scope",
    "list_loggers",
    "list_scopes_and_levels",
    "logs_off",
    "logs_on",
    "new_logger",
    "new_logger_defaults",
    "panic",
    "panicf",
    "panicln",
    "print_",
    "printf",
    "println",
    "reset_context",
    "set_active",
    "set_behaviour",
    "set_default_flags",
    "set_default_output",
    "set_global_level",
    "set_scope_level_by_id",
    "set_scope_level_by_scope",
]
