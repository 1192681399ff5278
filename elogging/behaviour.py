"""Process-wide behaviour switches layered on top of level filtering."""

from __future__ import annotations

import enum


class Behaviour(enum.IntFlag):
    """Optional behaviours toggled on a :class:`~elogging.context.LoggingContext`.

    ``SUPPRESS_REPEATS``
        Collapse runs of identical messages per logger into repeat
        indicators written at power-of-three counts.
    ``MIMIC_STDLOG``
        Make the default logger's print family behave like the bare line
        writer: no active check, no tag, no repeat suppression.
    """

    SUPPRESS_REPEATS = 1
    MIMIC_STDLOG = 2


__all__ = ["Behaviour"]
