"""BDD steps for repeated-message suppression scenarios."""

from __future__ import annotations

import typing as typ
from pathlib import Path

from pytest_bdd import given, parsers, scenarios, when

import elogging
from elogging import Behaviour

if typ.TYPE_CHECKING:
    from tests.steps.conftest import BufferedLogger

FEATURES = Path(__file__).resolve().parents[1] / "features"

scenarios(str(FEATURES / "repeat_suppression.feature"))


@given("repeat suppression is enabled")
def enable_suppression() -> None:
    elogging.get_context().enable(Behaviour.SUPPRESS_REPEATS)


@when(parsers.parse('I log "{message}" at "{level}" {count:d} times'))
def log_repeatedly(
    buffered: BufferedLogger, message: str, level: str, count: int
) -> None:
    for _ in range(count):
        buffered.logger.log(level, message)
