from __future__ import annotations

import io
import warnings
from collections.abc import Callable, Generator

import pytest

import elogging
from elogging import NO_FLAGS, ELogger

warnings.filterwarnings(
    "ignore",
    message="'maxsplit' is passed as positional argument",
    category=DeprecationWarning,
    module=r"gherkin\.gherkin_line",
)
# The warning originates in the vendored Gherkin parser, so filter it out until
# the dependency releases a fix rather than letting our test suite go noisy.

LoggerFactory = Callable[..., tuple[ELogger, io.StringIO]]


@pytest.fixture
def logger_factory() -> LoggerFactory:
    """Return a factory creating a flag-less logger writing to a buffer.

    The factory accepts ``scope`` and ``level`` and returns the logger with
    its ``io.StringIO`` buffer. Metadata flags are cleared so emitted lines
    are deterministic: ``"<scope> (<LABEL>) <message>"``.
    """

    def factory(scope: str = "svc", level: str = "info") -> tuple[ELogger, io.StringIO]:
        buffer = io.StringIO()
        logger = elogging.new_logger(scope, level, buffer)
        logger.set_flags(NO_FLAGS)
        return logger, buffer

    return factory


@pytest.fixture(autouse=True)
def _clean_logging_context() -> Generator[None, None, None]:
    """Install a fresh process-wide context before and after each test."""
    elogging.reset_context()
    try:
        yield
    finally:
        elogging.reset_context()
