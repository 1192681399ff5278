"""Tests for :class:`elogging.StdlibHandlerAdapter`."""

from __future__ import annotations

import io
import logging

import pytest

import elogging
from elogging import StdlibHandlerAdapter
from elogging.adapter import TRACE_LEVEL_NUM, VERBOSE_LEVEL_NUM, stdlib_levelno


class CollectingHandler(logging.Handler):
    """Store every handled record for later inspection."""

    def __init__(self) -> None:
        super().__init__()
        self.records: list[logging.LogRecord] = []
        self.flushed = 0
        self.closed = False

    def emit(self, record: logging.LogRecord) -> None:
        self.records.append(record)

    def flush(self) -> None:
        self.flushed += 1

    def close(self) -> None:
        self.closed = True
        super().close()


@pytest.fixture
def collector() -> CollectingHandler:
    return CollectingHandler()


@pytest.mark.parametrize(
    ("line", "levelno"),
    [
        ("svc (ERROR) boom", logging.ERROR),
        ("svc (WARN) careful", logging.WARNING),
        ("svc (INFO) hi", logging.INFO),
        ("svc (VERBOSE) detail", VERBOSE_LEVEL_NUM),
        ("svc (TRACE) deep", TRACE_LEVEL_NUM),
        ("svc (Printf) raw", logging.INFO),
        ("no tag here", logging.INFO),
    ],
)
def test_stdlib_levelno_reads_the_tag(line: str, levelno: int) -> None:
    assert stdlib_levelno(line) == levelno


def test_custom_level_names_are_registered() -> None:
    assert logging.getLevelName(TRACE_LEVEL_NUM) == "TRACE"
    assert logging.getLevelName(VERBOSE_LEVEL_NUM) == "VERBOSE"


def test_rejects_non_handler() -> None:
    with pytest.raises(TypeError, match="expected a logging.Handler instance, got str"):
        StdlibHandlerAdapter("not a handler")  # type: ignore[arg-type]


def test_logger_lines_become_records(collector: CollectingHandler) -> None:
    adapter = StdlibHandlerAdapter(collector, name="bridge")
    logger = elogging.new_logger("svc", "trace", adapter)
    logger.set_flags(0)

    logger.error("boom")
    logger.verbose("detail")
    logger.println("plain")

    assert [(r.name, r.levelname, r.getMessage()) for r in collector.records] == [
        ("bridge", "ERROR", "svc (ERROR) boom"),
        ("bridge", "VERBOSE", "svc (VERBOSE) detail"),
        ("bridge", "INFO", "svc (Println) plain"),
    ]
    assert collector.records[0].pathname == "<elogging>"
    assert collector.flushed == 3


def test_handler_level_filters_records(collector: CollectingHandler) -> None:
    collector.setLevel(logging.WARNING)
    logger = elogging.new_logger("svc", "trace", StdlibHandlerAdapter(collector))
    logger.set_flags(0)
    logger.info("dropped")
    logger.warn("kept")
    assert [r.getMessage() for r in collector.records] == ["svc (WARN) kept"]


def test_stdlib_formatter_applies() -> None:
    stream = io.StringIO()
    handler = logging.StreamHandler(stream)
    handler.setFormatter(logging.Formatter("%(levelname)s|%(message)s"))
    logger = elogging.new_logger("svc", "info", StdlibHandlerAdapter(handler))
    logger.set_flags(0)
    logger.warn("disk")
    assert stream.getvalue() == "WARNING|svc (WARN) disk\n"


def test_partial_writes_wait_for_newline_or_flush(collector: CollectingHandler) -> None:
    adapter = StdlibHandlerAdapter(collector)
    assert adapter.write("svc (WARN) first ") == len("svc (WARN) first ")
    assert collector.records == []
    adapter.write("half\n")
    adapter.write("tail")
    adapter.flush()
    assert [r.getMessage() for r in collector.records] == [
        "svc (WARN) first half",
        "tail",
    ]


def test_multiline_body_stays_one_record(collector: CollectingHandler) -> None:
    collector.setLevel(logging.ERROR)
    logger = elogging.new_logger("svc", "info", StdlibHandlerAdapter(collector))
    logger.set_flags(0)
    logger.error("first\nsecond")
    assert [(r.levelno, r.getMessage()) for r in collector.records] == [
        (logging.ERROR, "svc (ERROR) first\nsecond"),
    ]


def test_write_after_close_warns_and_drops(collector: CollectingHandler) -> None:
    adapter = StdlibHandlerAdapter(collector)
    adapter.write("pending")
    adapter.close()
    assert collector.closed
    assert [r.getMessage() for r in collector.records] == ["pending"]

    with pytest.warns(RuntimeWarning, match="after close"):
        assert adapter.write("late\n") == 0
    assert len(collector.records) == 1
    adapter.close()


def test_adapter_is_not_a_tty(collector: CollectingHandler) -> None:
    adapter = StdlibHandlerAdapter(collector)
    assert adapter.isatty() is False
    assert adapter.handler is collector
