"""Line writer used as the output primitive of every logger.

:class:`LineWriter` takes a fully composed message, prefixes it with the
metadata selected by its :class:`Flag` bitmask, and writes it to a text
stream as a single line. The header layout is::

    [prefix ]YYYY/MM/DD HH:MM:SS.ffffff path/to/file.py:42: [prefix ]message

where the prefix moves next to the message when :attr:`Flag.MSGPREFIX` is
set.

Writes are serialised per writer so concurrent callers never interleave
partial lines. When no stream is configured the writer resolves
``sys.stderr`` at write time, which keeps it pointed at whatever the host
(or a test harness) has installed there.
"""

from __future__ import annotations

import datetime as dt
import enum
import os
import sys
import threading
import typing as typ

TextIO = typ.TextIO
Final = typ.Final


class Flag(enum.IntFlag):
    """Metadata fields written in front of each line."""

    DATE = 1
    TIME = 2
    MICROSECONDS = 4
    LONGFILE = 8
    SHORTFILE = 16
    UTC = 32
    MSGPREFIX = 64


STD_FLAGS: Final[Flag] = Flag.DATE | Flag.TIME
NO_FLAGS: Final[Flag] = Flag(0)

_UNKNOWN_FILE: Final[str] = "???"


class LineWriter:
    """Write composed lines with optional date, time and call-site metadata.

    Parameters
    ----------
    output : TextIO, optional
        Destination stream. ``None`` writes to the current ``sys.stderr``.
    prefix : str, default ""
        Text written before the message (or before the header, see
        :attr:`Flag.MSGPREFIX`). A non-empty prefix is followed by a space.
    flags : int, default ``STD_FLAGS``
        Bitmask of :class:`Flag` values.

    """

    def __init__(
        self,
        output: TextIO | None = None,
        prefix: str = "",
        flags: int = STD_FLAGS,
    ) -> None:
        self._out = output
        self._prefix = prefix
        self._flags = Flag(flags)
        self._lock = threading.Lock()

    @property
    def flags(self) -> Flag:
        """Return the active metadata flags."""
        return self._flags

    def set_flags(self, flags: int) -> None:
        """Replace the metadata flags."""
        self._flags = Flag(flags)

    @property
    def prefix(self) -> str:
        """Return the prefix string."""
        return self._prefix

    def set_prefix(self, prefix: str) -> None:
        """Replace the prefix string."""
        self._prefix = prefix

    @property
    def writer(self) -> TextIO:
        """Return the stream lines are currently written to."""
        return self._out if self._out is not None else sys.stderr

    def set_output(self, output: TextIO | None) -> None:
        """Redirect output; ``None`` restores the ``sys.stderr`` default."""
        self._out = output

    def output(self, calldepth: int, text: str) -> str:
        """Compose and write a single line.

        Parameters
        ----------
        calldepth : int
            Number of frames between this method and the call site that
            file/line metadata should point at. ``1`` names the direct
            caller of :meth:`output`.
        text : str
            The message body. A trailing newline is added when missing.

        Returns
        -------
        str
            The exact line written, including its newline.

        """
        now = dt.datetime.now(dt.UTC if self._flags & Flag.UTC else None)
        site = None
        if self._flags & (Flag.SHORTFILE | Flag.LONGFILE):
            site = _call_site(calldepth)
        line = self._format_line(now, site, text)
        with self._lock:
            stream = self.writer
            stream.write(line)
            flush = getattr(stream, "flush", None)
            if callable(flush):
                flush()
        return line

    def _format_line(
        self, now: dt.datetime, site: tuple[str, int] | None, text: str
    ) -> str:
        flags = self._flags
        parts: list[str] = []
        prefix = f"{self._prefix} " if self._prefix else ""
        if not flags & Flag.MSGPREFIX:
            parts.append(prefix)
        if flags & Flag.DATE:
            parts.append(now.strftime("%Y/%m/%d "))
        if flags & (Flag.TIME | Flag.MICROSECONDS):
            parts.append(now.strftime("%H:%M:%S"))
            if flags & Flag.MICROSECONDS:
                parts.append(f".{now.microsecond:06d}")
            parts.append(" ")
        if site is not None:
            filename, lineno = site
            if flags & Flag.SHORTFILE:
                filename = os.path.basename(filename)
            parts.append(f"{filename}:{lineno}: ")
        if flags & Flag.MSGPREFIX:
            parts.append(prefix)
        parts.append(text)
        if not text.endswith("\n"):
            parts.append("\n")
        return "".join(parts)


def _call_site(depth: int) -> tuple[str, int]:
    """Return ``(filename, lineno)`` for the frame ``depth`` levels up."""
    try:
        frame = sys._getframe(depth + 1)  # noqa: SLF001 - cheap frame lookup
    except ValueError:
        return _UNKNOWN_FILE, 0
    return frame.f_code.co_filename, frame.f_lineno


__all__ = ["NO_FLAGS", "STD_FLAGS", "Flag", "LineWriter"]
