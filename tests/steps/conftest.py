"""Shared BDD steps reused across feature modules."""

from __future__ import annotations

import dataclasses
import io

from pytest_bdd import given, parsers, then, when

import elogging
from elogging import ELogger
from tests.helpers import buffer_lines


@dataclasses.dataclass
class BufferedLogger:
    """A logger under test together with the buffer it writes to."""

    logger: ELogger
    buffer: io.StringIO


@given("the logging context is reset")
def reset_logging() -> None:
    """Reset global logging state for scenario isolation."""
    elogging.reset_context()


@given(
    parsers.parse('a logger "{scope}" at level "{level}" writing to a buffer'),
    target_fixture="buffered",
)
def buffered_logger(scope: str, level: str) -> BufferedLogger:
    """Create a flag-less logger writing to a fresh buffer."""
    buffer = io.StringIO()
    logger = elogging.new_logger(scope, level, buffer)
    logger.set_flags(0)
    return BufferedLogger(logger, buffer)


@when(parsers.parse('I log "{message}" at "{level}"'))
def log_once(buffered: BufferedLogger, message: str, level: str) -> None:
    buffered.logger.log(level, message)


@when(parsers.parse('I set the level of "{scope}" to "{level}"'))
def set_level_by_scope(scope: str, level: str) -> None:
    assert elogging.set_scope_level_by_scope(scope, level)


@then(parsers.parse('logger "{scope}" reports level "{level}"'))
def logger_reports_level(scope: str, level: str) -> None:
    logger = elogging.get_logger_by_scope(scope)
    assert logger is not None
    assert logger.get_level() == level


@then(parsers.parse('the buffer contains "{text}"'))
def buffer_contains(buffered: BufferedLogger, text: str) -> None:
    assert text in buffered.buffer.getvalue()


@then(parsers.parse('the buffer does not contain "{text}"'))
def buffer_does_not_contain(buffered: BufferedLogger, text: str) -> None:
    assert text not in buffered.buffer.getvalue()


@then(parsers.parse("the buffer has {count:d} lines"))
@then(parsers.parse("the buffer has {count:d} line"))
def buffer_line_count(buffered: BufferedLogger, count: int) -> None:
    assert len(buffer_lines(buffered.buffer)) == count


@then(parsers.parse('buffer line {index:d} is "{text}"'))
def buffer_line_is(buffered: BufferedLogger, index: int, text: str) -> None:
    """Assert the ``index``-th written line (1-based) equals ``text``."""
    assert buffer_lines(buffered.buffer)[index - 1] == text
