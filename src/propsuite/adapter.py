# src/propsuite/adapter.py
"""Turn properties into runner test instances.

The runner sees a TestInstance; the instance closes over exactly one
PropertyArgs snapshot. set_option() never mutates that snapshot; it builds a
replacement instance around the updated arguments, keeping the name, tags,
property and advertised option defaults.

Outcome mapping (engine result -> runner verdict):

    Success           -> Pass
    GaveUp            -> Error  (discard limits, not the property, were the problem)
    Failure           -> Fail
    NoExpectedFailure -> Fail

The engine result is rendered into the verdict message, since the runner only
carries free text.
"""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

import structlog

from propsuite.contracts.config import PropertyArgs, std_property_args
from propsuite.contracts.engine import Failure, GaveUp, NoExpectedFailure, Success
from propsuite.contracts.enums import Verbosity
from propsuite.contracts.suite import Error, Fail, Pass, Result, TestGroup, TestInstance, group
from propsuite.core.options import describe_options, set_option
from propsuite.engine.checker import check_with_result
from propsuite.engine.property import Property, Testable, as_property

logger = structlog.get_logger(__name__)

PropT = TypeVar("PropT")


@dataclass(frozen=True, slots=True)
class PropertyTest(Generic[PropT]):
    """Property test declaration with metadata.

    Attributes:
        name: Test name reported to the runner.
        tags: Tags reported to the runner.
        property: The property to check. For get_property_test_using(), a
            function from PropertyArgs to the property.
    """

    name: str
    tags: Sequence[str]
    property: PropT


def apply_modifiers(args: PropertyArgs, testable: Testable) -> Property:
    """Apply the modifiers selected by ``args`` to a property.

    Each modifier sets its own Property field, so the result does not depend
    on the order they are applied in.
    """
    prop = as_property(testable)
    return replace(
        prop,
        verbose=prop.verbose or args.verbosity is Verbosity.VERBOSE,
        verbose_shrinking=prop.verbose_shrinking or args.verbose_shrinking,
        no_shrinking=prop.no_shrinking or args.no_shrinking,
        size_scale=prop.size_scale * args.size_scale,
    )


def run_property(args: PropertyArgs, testable: Testable) -> Result:
    """Check a property once and translate the engine result into a verdict."""
    result = check_with_result(args.to_engine_args(), apply_modifiers(args, testable))
    detail = f"\n{result!r}"

    match result:
        case Success():
            return Pass()
        case GaveUp():
            return Error("GaveUp: the property checker gave up" + detail)
        case Failure():
            return Fail("Failure: a property failed" + detail)
        case NoExpectedFailure():
            return Fail("NoExpectedFailure: a property that should have failed did not" + detail)


def get_property_test_using(
    test: PropertyTest[Callable[[PropertyArgs], Testable]],
    *,
    args: PropertyArgs | None = None,
) -> TestInstance:
    """Build a test instance whose property receives the arguments it runs with.

    Args:
        test: A property test whose ``property`` takes PropertyArgs.
        args: Starting arguments; defaults to std_property_args().

    Returns:
        A TestInstance advertising the option defaults of ``args``.
    """
    original_args = args if args is not None else std_property_args()
    options = tuple(describe_options(original_args))
    tags = tuple(test.tags)
    log = logger.bind(test=test.name)

    def with_args(current: PropertyArgs) -> TestInstance:
        def run() -> Result:
            verdict = run_property(current, test.property(current))
            log.debug("property_test_finished", verdict=type(verdict).__name__)
            return verdict

        def update(name: str, value: str) -> TestInstance:
            return with_args(set_option(name, value, current))

        return TestInstance(name=test.name, tags=tags, options=options, run=run, set_option=update)

    return with_args(original_args)


def get_property_test(test: PropertyTest[Testable], *, args: PropertyArgs | None = None) -> TestInstance:
    """Build a test instance from a property that ignores its arguments."""
    prop = test.property
    return get_property_test_using(
        PropertyTest(name=test.name, tags=test.tags, property=lambda _args: prop),
        args=args,
    )


def get_property_tests(tests: Sequence[PropertyTest[Testable]], *, args: PropertyArgs | None = None) -> list[TestInstance]:
    """Build one test instance per property test."""
    return [get_property_test(test, args=args) for test in tests]


def property_test_group(name: str, tests: Sequence[PropertyTest[Testable]], *, args: PropertyArgs | None = None) -> TestGroup:
    """Build a named group of property tests that may run in parallel."""
    return group(name, get_property_tests(tests, args=args))
