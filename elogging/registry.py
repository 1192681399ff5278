"""Registry of live scoped loggers.

A :class:`Registry` maps every live :class:`~elogging.logger.ELogger` to its
scope name. Loggers add and remove themselves as part of their lifecycle;
callers only query it.

Scope names are not required to be unique. Name-based lookups return the
first logger registered under a name, so when several loggers share a scope
only the oldest one is reachable by name. Lookups by id are unambiguous.
"""

from __future__ import annotations

import threading
import typing as typ

if typ.TYPE_CHECKING:
    from .logger import ELogger


class Registry:
    """Thread-safe collection of live loggers keyed by instance."""

    def __init__(self) -> None:
        self._entries: dict[ELogger, str] = {}
        self._lock = threading.RLock()

    @property
    def lock(self) -> threading.RLock:
        """Return the re-entrant lock guarding the registry.

        Hold it to make a lookup and a subsequent registration atomic.
        """
        return self._lock

    def __len__(self) -> int:
        with self._lock:
            return len(self._entries)

    def __contains__(self, logger: object) -> bool:
        with self._lock:
            return logger in self._entries

    def register(self, logger: ELogger, scope: str) -> None:
        """Add ``logger`` under ``scope``."""
        with self._lock:
            self._entries[logger] = scope

    def deregister(self, logger: ELogger) -> bool:
        """Remove ``logger``; return ``False`` when it was not registered."""
        with self._lock:
            return self._entries.pop(logger, None) is not None

    def rename(self, logger: ELogger, scope: str) -> None:
        """Record a new scope name for an already registered ``logger``.

        Registration order is preserved so that name lookups stay stable
        across renames.
        """
        with self._lock:
            if logger in self._entries:
                self._entries[logger] = scope

    def find_by_id(self, logger_id: str) -> ELogger | None:
        """Return the logger whose id is ``logger_id`` or ``None``."""
        with self._lock:
            for logger in self._entries:
                if logger.id == logger_id:
                    return logger
        return None

    def find_first_by_scope(self, scope: str) -> ELogger | None:
        """Return the earliest registered logger named ``scope`` or ``None``."""
        with self._lock:
            for logger, name in self._entries.items():
                if name == scope:
                    return logger
        return None

    def list_all(self) -> list[ELogger]:
        """Return all live loggers sorted by scope name, then id."""
        with self._lock:
            items = list(self._entries.items())
        items.sort(key=lambda item: (item[1], item[0].id))
        return [logger for logger, _ in items]

    def list_summary(self) -> tuple[list[str], list[str], list[str]]:
        """Return parallel ``(scopes, ids, levels)`` lists.

        The order matches :meth:`list_all`; ``levels`` holds level names as
        returned by :meth:`ELogger.get_level`.
        """
        scopes: list[str] = []
        ids: list[str] = []
        levels: list[str] = []
        for logger in self.list_all():
            scopes.append(logger.scope)
            ids.append(logger.id)
            levels.append(logger.get_level())
        return scopes, ids, levels


__all__ = ["Registry"]
