# src/propsuite/engine/checker.py
"""Run a Property under Hypothesis and classify the outcome.

check_with_result() is the only entry point. It always returns exactly one of
the four CheckResult variants; the single exception that escapes is
hypothesis.errors.InvalidArgument, which means the property itself is
malformed (a bad strategy, a signature mismatch) rather than checked.

EngineArgs mapping:
    max_success       -> settings.max_examples
    chatty            -> whether reported lines are printed; they are always
                         captured into the result
    max_size          -> size handed to Sized strategy factories
    replay            -> hypothesis.seed()
    max_discard_ratio -> GaveUp once discards exceed ratio * max_success
    max_shrinks       -> after that many shrink steps, unseen inputs are
                         rejected so the shrinker settles on the best
                         counterexample found so far
"""

from __future__ import annotations

import inspect
import traceback
from collections.abc import Callable
from dataclasses import dataclass, field
from typing import Any

import structlog
from hypothesis import HealthCheck, Phase, given, reject, settings
from hypothesis import Verbosity as HypothesisVerbosity
from hypothesis import seed as hypothesis_seed
from hypothesis.errors import FailedHealthCheck, InvalidArgument, Unsatisfiable, UnsatisfiedAssumption
from hypothesis.reporting import with_reporter

from propsuite.contracts.engine import (
    CheckResult,
    EngineArgs,
    Failure,
    GaveUp,
    NoExpectedFailure,
    Success,
)
from propsuite.engine.property import Property, Testable, as_property

logger = structlog.get_logger(__name__)

_SEARCH_PHASES: tuple[Phase, ...] = (Phase.explicit, Phase.reuse, Phase.generate, Phase.target)


class PropertyFalsified(AssertionError):
    """Raised in place of a predicate that returned False."""


@dataclass
class _RunCounters:
    """Per-run bookkeeping, owned by a single check_with_result() call."""

    passed: int = 0
    discarded: int = 0
    shrinks: int = 0
    failing_inputs: set[str] = field(default_factory=set)

    def record_failure(self, key: str) -> None:
        if self.failing_inputs and key not in self.failing_inputs:
            self.shrinks += 1
        self.failing_inputs.add(key)


def _hypothesis_settings(engine_args: EngineArgs, prop: Property) -> settings:
    # Never below normal: the falsifying example is only attached to the
    # exception at normal verbosity or above
    if prop.verbose_shrinking:
        verbosity = HypothesisVerbosity.debug
    elif prop.verbose:
        verbosity = HypothesisVerbosity.verbose
    else:
        verbosity = HypothesisVerbosity.normal

    phases = _SEARCH_PHASES if prop.no_shrinking else (*_SEARCH_PHASES, Phase.shrink)

    return settings(
        max_examples=engine_args.max_success,
        verbosity=verbosity,
        phases=phases,
        database=None,
        deadline=None,
        report_multiple_bugs=False,
        suppress_health_check=[HealthCheck.too_slow],
    )


def _instrument(prop: Property, engine_args: EngineArgs, counters: _RunCounters) -> Callable[..., None]:
    """Wrap the predicate so the run can be counted and the shrinker bounded."""

    def run_case(**kwargs: Any) -> None:
        key = repr(kwargs)
        if counters.failing_inputs and counters.shrinks >= engine_args.max_shrinks and key not in counters.failing_inputs:
            reject()

        found_failure = bool(counters.failing_inputs)
        try:
            outcome = prop.predicate(**kwargs)
        except UnsatisfiedAssumption:
            if not found_failure:
                counters.discarded += 1
            raise
        except Exception:
            counters.record_failure(key)
            raise

        if outcome is False:
            counters.record_failure(key)
            raise PropertyFalsified(f"{prop.name} returned False")
        if not found_failure:
            counters.passed += 1

    # given() matches strategies against the signature, not **kwargs
    run_case.__signature__ = inspect.Signature(  # type: ignore[attr-defined]
        [inspect.Parameter(name, inspect.Parameter.KEYWORD_ONLY) for name in prop.strategies]
    )
    run_case.__name__ = getattr(prop.predicate, "__name__", "property")
    return run_case


def _execute(engine_args: EngineArgs, prop: Property, counters: _RunCounters) -> None:
    run_case = _instrument(prop, engine_args, counters)
    if not prop.strategies:
        # Nothing to generate: a constant property is checked exactly once
        run_case()
        return

    hypothesis_settings = _hypothesis_settings(engine_args, prop)
    test = hypothesis_settings(given(**prop.strategies_for(engine_args.max_size))(run_case))
    if engine_args.replay is not None:
        test = hypothesis_seed(engine_args.replay)(test)
    test()


def check_with_result(engine_args: EngineArgs, testable: Testable) -> CheckResult:
    """Check a property and report how the run ended.

    Blocks for the whole search, including shrinking.

    Args:
        engine_args: Native run parameters.
        testable: A Property, a bool, or a zero-argument callable.

    Returns:
        Success, GaveUp, Failure or NoExpectedFailure.

    Raises:
        InvalidArgument: If Hypothesis rejects the property definition.
    """
    prop = as_property(testable)
    counters = _RunCounters()
    lines: list[str] = []
    log = logger.bind(property=prop.name)

    def report(value: object) -> None:
        text = str(value)
        lines.append(text)
        if engine_args.chatty:
            print(text)

    log.debug(
        "property_check_started",
        max_success=engine_args.max_success,
        max_size=engine_args.max_size,
        expect_failure=prop.expect_failure,
    )

    result: CheckResult
    try:
        with with_reporter(report):
            _execute(engine_args, prop, counters)
    except (Unsatisfiable, FailedHealthCheck, UnsatisfiedAssumption) as exc:
        result = GaveUp(
            num_tests=counters.passed,
            num_discarded=counters.discarded,
            reason=_render_exception(exc),
            output="\n".join(lines),
        )
    except InvalidArgument:
        raise
    except Exception as exc:
        failure = Failure(
            num_tests=counters.passed,
            num_discarded=counters.discarded,
            num_shrinks=counters.shrinks,
            reason=_render_exception(exc),
            exception_type=type(exc).__name__,
            output="\n".join(lines),
        )
        if prop.expect_failure:
            result = Success(num_tests=counters.passed, num_discarded=counters.discarded, output=failure.reason)
        else:
            result = failure
    else:
        discard_budget = engine_args.max_discard_ratio * engine_args.max_success
        if counters.discarded > discard_budget:
            result = GaveUp(
                num_tests=counters.passed,
                num_discarded=counters.discarded,
                reason=f"{counters.discarded} discarded cases exceed the budget of {discard_budget}",
                output="\n".join(lines),
            )
        elif prop.expect_failure:
            result = NoExpectedFailure(
                num_tests=counters.passed,
                num_discarded=counters.discarded,
                output="\n".join(lines),
            )
        else:
            result = Success(
                num_tests=counters.passed,
                num_discarded=counters.discarded,
                output="\n".join(lines),
            )

    log.debug(
        "property_check_finished",
        outcome=type(result).__name__,
        num_tests=result.num_tests,
        num_discarded=result.num_discarded,
    )
    return result


def _render_exception(exc: BaseException) -> str:
    """Render an exception with its notes (Hypothesis attaches the falsifying example there)."""
    return "".join(traceback.format_exception_only(exc)).strip()
