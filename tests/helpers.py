"""Shared helpers for the test suite."""

from __future__ import annotations

import typing as typ

if typ.TYPE_CHECKING:
    import io


def buffer_lines(buffer: io.StringIO) -> list[str]:
    """Return the lines written to ``buffer`` without trailing newlines.

    Parameters
    ----------
    buffer : io.StringIO
        Stream a logger has been writing to.

    Returns
    -------
    list[str]
        One entry per written line, in order.

    Examples
    --------
    >>> import io
    >>> buffer_lines(io.StringIO("a\\nb\\n"))
    ['a', 'b']

    """
    return buffer.getvalue().splitlines()
