"""Stdlib-style lookup helpers for drop-in ``logging`` API parity.

Purpose
-------
Offer ``get_logger`` / ``getLogger`` so callers used to
``logging.getLogger(name)`` can fetch a scoped logger by name and have it
created on first use.

Notes
-----
Scope names are not unique. When several loggers share ``name`` the one
registered first is returned, matching
:meth:`elogging.registry.Registry.find_first_by_scope`.

Examples
--------
>>> from elogging import getLogger
>>> getLogger("myapp.auth") is getLogger("myapp.auth")
True

"""

from __future__ import annotations

from .context import get_context
from .logger import ELogger


def get_logger(name: str) -> ELogger:
    """Return the first logger named ``name``, creating an ``info`` one if absent."""
    ctx = get_context()
    with ctx.registry.lock:
        logger = ctx.get_logger_by_scope(name)
        if logger is None:
            logger = ctx.new_logger_defaults(name)
    return logger


getLogger = get_logger  # noqa: N816 - camelCase alias for stdlib compat

__all__ = ["getLogger", "get_logger"]
