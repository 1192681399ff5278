#!/usr/bin/env python3
# /// script
# requires-python = ">=3.12"
# dependencies = [
#     "elogging @ {path = \"..\"}",
# ]
# ///
"""Demonstrate per-thread scoped loggers sharing one log file."""

from __future__ import annotations

from pathlib import Path
from random import randint
from threading import Thread
from typing import TextIO

import elogging


def worker(thread_id: int, log_file: TextIO) -> None:
    """Log a random range of integers from a logger of our own."""
    logger = elogging.new_logger(f"worker-{thread_id}", "info", log_file)
    start = randint(0, 1000)
    stop = start + randint(10, 100)
    for value in range(start, stop):
        logger.infof("produced %d", value)
    logger.dispose()


def main() -> None:
    """Spawn worker threads that each own and dispose a logger."""
    log_path = Path(__file__).with_suffix(".log")
    with log_path.open("w", encoding="utf-8") as log_file:
        threads = [Thread(target=worker, args=(i, log_file)) for i in range(16)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

    elogging.println("loggers left registered:", len(elogging.list_loggers()))


if __name__ == "__main__":
    main()
