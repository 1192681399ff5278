"""Severity levels and level-name parsing.

Levels are ordered from ``DISABLED`` (no leveled output) up to ``TRACE``
(everything). A logger set to a level emits that level and every level
below it.

Parsing never fails: any string that is not a recognised spelling resolves
to :attr:`Level.DISABLED`, so a typo in a level name silences a logger rather
than raising inside the host program.

Examples
--------
>>> parse_level("WARN") is Level.WARNING
True
>>> parse_level("bogus") is Level.DISABLED
True
>>> normalize_level("err")
'ERROR'

"""

from __future__ import annotations

import enum
import typing as typ

Final = typ.Final


class Level(enum.IntEnum):
    """Ordered severity levels."""

    DISABLED = 0
    ERROR = 1
    WARNING = 2
    INFO = 3
    VERBOSE = 4
    TRACE = 5

    def __str__(self) -> str:
        return self.name.title()

    @property
    def label(self) -> str:
        """Return the fixed uppercase label used in emitted headers."""
        return _LABELS[self]


LEVEL_COUNT: Final[int] = len(Level)

LevelArg = str | Level

_ALIASES: Final[dict[str, Level]] = {
    "err": Level.ERROR,
    "error": Level.ERROR,
    "wrn": Level.WARNING,
    "warn": Level.WARNING,
    "warning": Level.WARNING,
    "inf": Level.INFO,
    "info": Level.INFO,
    "vrb": Level.VERBOSE,
    "verbose": Level.VERBOSE,
    "trc": Level.TRACE,
    "trace": Level.TRACE,
}

_LABELS: Final[dict[Level, str]] = {
    Level.DISABLED: "DISABLE",
    Level.ERROR: "ERROR",
    Level.WARNING: "WARN",
    Level.INFO: "INFO",
    Level.VERBOSE: "VERBOSE",
    Level.TRACE: "TRACE",
}


def parse_level(value: LevelArg) -> Level:
    """Resolve ``value`` to a :class:`Level`.

    Parameters
    ----------
    value : str or Level
        A level name (case-insensitive, short or long spelling) or a
        :class:`Level`, which is returned unchanged.

    Returns
    -------
    Level
        The matching level, or ``Level.DISABLED`` when ``value`` is not a
        recognised name.

    """
    if isinstance(value, Level):
        return value
    return _ALIASES.get(value.lower(), Level.DISABLED)


def normalize_level(value: LevelArg) -> str:
    """Return the uppercase header label for ``value``."""
    return _LABELS[parse_level(value)]


__all__ = ["LEVEL_COUNT", "Level", "LevelArg", "normalize_level", "parse_level"]
