"""elogging package.

Scoped, leveled logging on top of a plain line writer. Create any number of
named loggers with independent levels, outputs and metadata flags, or use the
module-level helpers backed by the implicit default logger.

Examples
--------
>>> import io
>>> from elogging import new_logger
>>> buf = io.StringIO()
>>> log = new_logger("svc", "warn", buf)
>>> log.error("boom")
'(ERROR) boom'
>>> log.info("hidden") is None
True

"""

from __future__ import annotations

from ._compat import getLogger, get_logger
from .adapter import StdlibHandlerAdapter
from .behaviour import Behaviour
from .config import BasicConfig, basicConfig, dictConfig
from .context import (
    DEFAULT_FLAGS,
    LoggingContext,
    default_flags,
    default_logger,
    fatal,
    fatalf,
    fatalln,
    get_context,
    get_logger_by_id,
    get_logger_by_scope,
    list_loggers,
    list_scopes_and_levels,
    logs_off,
    logs_on,
    new_logger,
    new_logger_defaults,
    panic,
    panicf,
    panicln,
    print_,
    printf,
    println,
    reset_context,
    set_active,
    set_behaviour,
    set_default_flags,
    set_default_output,
    set_global_level,
    set_scope_level_by_id,
    set_scope_level_by_scope,
)
from .default import DefaultLogger, LogPanic
from .levels import Level, normalize_level, parse_level
from .logger import ELogger
from .registry import Registry
from .repeat import RepeatSuppressor, is_power_of_three
from .writer import NO_FLAGS, STD_FLAGS, Flag, LineWriter

__all__ = [
    "DEFAULT_FLAGS",
    "NO_FLAGS",
    "STD_FLAGS",
    "BasicConfig",
    "Behaviour",
    "DefaultLogger",
    "ELogger",
    "Flag",
    "Level",
    "LineWriter",
    "LogPanic",
    "LoggingContext",
    "Registry",
    "RepeatSuppressor",
    "StdlibHandlerAdapter",
    "basicConfig",
    "default_flags",
    "default_logger",
    "dictConfig",
    "fatal",
    "fatalf",
    "fatalln",
    "getLogger",
    "get_context",
    "get_logger",
    "get_logger_by_id",
    "get_logger_by_scope",
    "is_power_of_three",
    "list_loggers",
    "list_scopes_and_levels",
    "logs_off",
    "logs_on",
    "new_logger",
    "new_logger_defaults",
    "normalize_level",
    "panic",
    "panicf",
    "panicln",
    "parse_level",
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
