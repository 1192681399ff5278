#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "elogging @ {path = \"..\"}",
# ]
# ///
"""Demonstrate ``basicConfig``, scoped levels and repeat suppression."""

from __future__ import annotations

import elogging
from elogging import Flag, basicConfig


def main() -> None:
    """Configure the process-wide context and log from two scopes.

    The ``db`` logger only writes warnings and errors while ``api`` is at
    ``verbose``. With ``suppress_repeats=True`` the ten identical warnings
    collapse into the first line plus indicators at 1, 3 and 9 repeats.
    """
    basicConfig(flags=Flag.TIME | Flag.SHORTFILE, suppress_repeats=True)
    db = elogging.new_logger("db", "warn")
    api = elogging.new_logger("api", "verbose")

    db.info("info suppressed by level")
    api.verbosef("request handled in %d ms", 12)
    for _ in range(10):
        db.warn("connection pool exhausted")

    elogging.println("scopes:", *elogging.list_scopes_and_levels()[0])


if __name__ == "__main__":
    main()
