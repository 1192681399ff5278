"""Tests for the active switch, global level override and behaviour flags."""

from __future__ import annotations

import typing as typ

import pytest

import elogging
from elogging import Behaviour, Level, LoggingContext

if typ.TYPE_CHECKING:
    from tests.conftest import LoggerFactory


@pytest.mark.parametrize("level", ["error", "warn", "info", "verbose", "trace"])
def test_logs_off_silences_every_level(logger_factory: LoggerFactory, level: str) -> None:
    logger, buffer = logger_factory("svc", "trace")
    elogging.logs_off()
    assert logger.log(level, "x") is None
    assert logger.print("x") is None
    assert logger.printf("%s", "x") is None
    assert logger.println("x") is None
    assert buffer.getvalue() == ""


def test_logs_on_restores_previous_levels(logger_factory: LoggerFactory) -> None:
    logger, buffer = logger_factory("svc", "warn")
    elogging.set_active(False)
    logger.error("dropped")
    elogging.logs_on()
    logger.error("kept")
    logger.info("filtered")
    assert buffer.getvalue() == "svc (ERROR) kept\n"
    assert logger.level is Level.WARNING


def test_global_override_widens_visibility(logger_factory: LoggerFactory) -> None:
    logger, _ = logger_factory("svc", "error")
    elogging.set_global_level("trace")
    assert logger.info("wide") == "(INFO) wide"
    assert logger.is_enabled_for("trace")


def test_disabled_override_never_narrows(logger_factory: LoggerFactory) -> None:
    logger, _ = logger_factory("svc", "trace")
    elogging.set_global_level("disabled")
    assert logger.info("own level") == "(INFO) own level"


def test_lower_override_never_narrows(logger_factory: LoggerFactory) -> None:
    logger, _ = logger_factory("svc", "trace")
    elogging.set_global_level("error")
    assert logger.verbose("own level") == "(VERBOSE) own level"


def test_override_applies_to_disabled_loggers(logger_factory: LoggerFactory) -> None:
    logger, _ = logger_factory("svc", "disabled")
    elogging.set_global_level("warn")
    assert logger.warn("w") == "(WARN) w"
    assert logger.info("i") is None


def test_kill_switch_beats_global_override(logger_factory: LoggerFactory) -> None:
    logger, _ = logger_factory("svc", "error")
    elogging.set_global_level("trace")
    elogging.logs_off()
    assert logger.error("x") is None


def test_context_defaults() -> None:
    ctx = LoggingContext()
    assert ctx.active is True
    assert ctx.global_level is Level.DISABLED
    assert ctx.default_flags == elogging.DEFAULT_FLAGS
    assert ctx.default_output is None
    assert ctx.behaviour == Behaviour(0)


def test_behaviour_enable_disable_and_replace() -> None:
    ctx = LoggingContext()
    ctx.enable(Behaviour.SUPPRESS_REPEATS)
    ctx.enable(Behaviour.MIMIC_STDLOG)
    assert ctx.behaviour == Behaviour.SUPPRESS_REPEATS | Behaviour.MIMIC_STDLOG
    ctx.disable(Behaviour.SUPPRESS_REPEATS)
    assert ctx.behaviour == Behaviour.MIMIC_STDLOG
    ctx.set_behaviour(0)
    assert ctx.behaviour == Behaviour(0)


def test_module_helpers_forward_to_singleton() -> None:
    elogging.set_behaviour(Behaviour.SUPPRESS_REPEATS)
    elogging.set_default_flags(0)
    ctx = elogging.get_context()
    assert ctx.behaviour == Behaviour.SUPPRESS_REPEATS
    assert elogging.default_flags() == 0
    logger = elogging.new_logger("svc")
    assert elogging.set_scope_level_by_id(logger.id, "trace")
    assert elogging.set_scope_level_by_scope("svc", "error")
    assert logger.level is Level.ERROR


def test_contexts_are_isolated(logger_factory: LoggerFactory) -> None:
    logger, _ = logger_factory("svc", "error")
    other = LoggingContext()
    other.logs_off()
    other.set_global_level("trace")
    assert logger.error("still on") == "(ERROR) still on"
    assert logger.info("no override here") is None
