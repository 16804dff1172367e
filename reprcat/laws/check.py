"""Running properties.

Each property runs as its own hypothesis test: samples are drawn from the
property's strategies, the law is evaluated, and the first failure is
shrunk and returned as a ``LawViolation``. Checks share no state, so they
may run concurrently.
"""

from __future__ import annotations

import logging
from collections.abc import Sequence
from dataclasses import dataclass
from enum import Enum
from typing import Any

from hypothesis import given, seed
from hypothesis import strategies as st
from hypothesis.errors import HypothesisException

from ..either import Err, Ok, Result
from .config import CheckConfig
from .ruleset import IsEq, Property, QualifiedProperty, RuleSet

logger = logging.getLogger(__name__)


class LawViolation(AssertionError):
    """A counterexample: the inputs on which a law failed.

    ``lhs``/``rhs`` hold the reprs of both sides when the law is an
    equation; ``cause`` holds the exception when evaluating the law raised.
    """

    def __init__(
        self,
        property_name: str,
        inputs: Sequence[Any],
        *,
        lhs: str | None = None,
        rhs: str | None = None,
        cause: BaseException | None = None,
    ) -> None:
        self.property_name = property_name
        self.inputs = tuple(repr(x) for x in inputs)
        self.lhs = lhs
        self.rhs = rhs
        self.cause = cause
        super().__init__(self._describe())

    def _describe(self) -> str:
        lines = [f"'{self.property_name}' falsified by inputs ({', '.join(self.inputs)})"]
        if self.cause is not None:
            lines.append(f"  raised {type(self.cause).__name__}: {self.cause}")
        if self.lhs is not None or self.rhs is not None:
            lines.append(f"  lhs = {self.lhs}")
            lines.append(f"  rhs = {self.rhs}")
        return "\n".join(lines)


def evaluate(prop: Property, samples: Sequence[Any]) -> None:
    """Evaluate ``prop`` on one tuple of samples; raise ``LawViolation`` if it fails."""
    try:
        outcome = prop.law(*samples)
        held = prop.judge(outcome)
    except Exception as exc:
        raise LawViolation(prop.name, samples, cause=exc) from exc
    if held:
        return
    match outcome:
        case IsEq(lhs, rhs):
            raise LawViolation(prop.name, samples, lhs=repr(lhs), rhs=repr(rhs))
        case _:
            raise LawViolation(prop.name, samples)


def check_property(prop: Property, config: CheckConfig) -> Result[int, LawViolation]:
    """Run one property. ``Ok`` carries the number of examples evaluated.

    A law that fails only intermittently, or a strategy hypothesis refuses
    to run (a failed health check), is reported as ``Err`` too; in the
    latter case the violation has no inputs and ``cause`` is the
    hypothesis error.
    """
    runs = 0

    def run(samples: tuple[Any, ...]) -> None:
        nonlocal runs
        runs += 1
        evaluate(prop, samples)

    test = config.hypothesis_settings()(given(st.tuples(*prop.strategies))(run))
    if config.seed is not None:
        test = seed(config.seed)(test)

    try:
        test()
    except LawViolation as violation:
        return _falsified(violation)
    # FlakyFailure is an ExceptionGroup, so this must precede HypothesisException.
    except BaseExceptionGroup as group:
        found = _first_violation(group)
        return _falsified(found or LawViolation(prop.name, (), cause=group))
    except HypothesisException as exc:
        return _falsified(LawViolation(prop.name, (), cause=exc))
    logger.debug("'%s' held on %d examples", prop.name, runs)
    return Ok(runs)


def _falsified(violation: LawViolation) -> Result[int, LawViolation]:
    logger.warning("Law violated: %s", violation)
    return Err(violation)


def _first_violation(group: BaseExceptionGroup) -> LawViolation | None:
    for exc in group.exceptions:
        match exc:
            case LawViolation():
                return exc
            case BaseExceptionGroup():
                found = _first_violation(exc)
                if found is not None:
                    return found
    return None


# ---------------------------------------------------------------------------
# Suite reports
# ---------------------------------------------------------------------------


class Status(Enum):
    PASSED = "passed"
    FALSIFIED = "falsified"


@dataclass(frozen=True)
class PropertyReport:
    suite: str
    name: str
    status: Status
    examples: int
    violation: LawViolation | None = None

    @property
    def passed(self) -> bool:
        return self.status == Status.PASSED


@dataclass(frozen=True)
class SuiteReport:
    suite_name: str
    config: CheckConfig
    reports: tuple[PropertyReport, ...]

    @property
    def passed(self) -> tuple[PropertyReport, ...]:
        return tuple(r for r in self.reports if r.passed)

    @property
    def failures(self) -> tuple[PropertyReport, ...]:
        return tuple(r for r in self.reports if not r.passed)

    @property
    def ok(self) -> bool:
        return len(self.failures) == 0


def check_qualified(q: QualifiedProperty, config: CheckConfig) -> PropertyReport:
    match check_property(q.prop, config):
        case Ok(examples):
            return PropertyReport(q.suite, q.name, Status.PASSED, examples)
        case Err(violation):
            return PropertyReport(q.suite, q.name, Status.FALSIFIED, 0, violation)
    raise AssertionError("unreachable")


def check_suite(ruleset: RuleSet, config: CheckConfig | None = None) -> SuiteReport:
    """Check every effective property of ``ruleset``, parents included."""
    config = config or CheckConfig()
    props = ruleset.all_properties()
    logger.info("Checking '%s': %d properties", ruleset.name, len(props))
    reports = tuple(check_qualified(q, config) for q in props)
    failed = sum(1 for r in reports if not r.passed)
    if failed:
        logger.warning("'%s': %d of %d properties falsified", ruleset.name, failed, len(reports))
    return SuiteReport(ruleset.name, config, reports)
