# src/propsuite/contracts/suite.py
"""Structured test-runner protocol.

A runner sees a tree of tests. Leaves are TestInstance values: named, tagged,
self-describing (their option schema) and runnable. Setting an option never
mutates an instance; it returns a replacement instance. Groups only carry a
name and a flag telling the runner whether members may run concurrently.

Option values always travel as strings; each OptionDescr tells the runner what
kind of string the option expects.
"""

from __future__ import annotations

from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass

# =============================================================================
# Option schema
# =============================================================================


@dataclass(frozen=True, slots=True)
class OptionBool:
    """Option accepting a boolean ("True"/"False")."""


@dataclass(frozen=True, slots=True)
class OptionEnum:
    """Option accepting one of a fixed set of strings."""

    choices: tuple[str, ...]


@dataclass(frozen=True, slots=True)
class OptionNumber:
    """Numeric option.

    Attributes:
        is_int: Whether only integers are accepted.
        bounds: Inclusive (lower, upper) bounds as strings; None means unbounded.
    """

    is_int: bool
    bounds: tuple[str | None, str | None]


OptionType = OptionBool | OptionEnum | OptionNumber


@dataclass(frozen=True, slots=True)
class OptionDescr:
    """Self-description of one option a test instance accepts."""

    name: str
    description: str
    option_type: OptionType
    default: str | None


# =============================================================================
# Verdicts
# =============================================================================


@dataclass(frozen=True, slots=True)
class Pass:
    """The test passed."""


@dataclass(frozen=True, slots=True)
class Fail:
    """The test ran and demonstrated a violation."""

    message: str


@dataclass(frozen=True, slots=True)
class Error:
    """The test could not reach a verdict on its subject."""

    message: str


Result = Pass | Fail | Error


# =============================================================================
# Test tree
# =============================================================================


@dataclass(frozen=True)
class TestInstance:
    """A runnable leaf of the test tree.

    Attributes:
        name: Test name shown by the runner.
        tags: Free-form tags the runner may filter on.
        options: Options this instance accepts, with their defaults.
        run: Executes the test once and returns its verdict.
        set_option: Returns a replacement instance with one option changed.
            Raises SetOptionError for unknown names or malformed values.
    """

    __test__ = False  # keep pytest from collecting this class

    name: str
    tags: tuple[str, ...]
    options: tuple[OptionDescr, ...]
    run: Callable[[], Result]
    set_option: Callable[[str, str], TestInstance]


@dataclass(frozen=True)
class TestGroup:
    """A named group of tests.

    Attributes:
        concurrently: Whether the runner may execute members in parallel.
    """

    __test__ = False

    name: str
    concurrently: bool
    tests: tuple[Test, ...]


Test = TestInstance | TestGroup


def group(name: str, tests: Sequence[Test]) -> TestGroup:
    """Group tests that have no ordering or shared-state dependency."""
    return TestGroup(name=name, concurrently=True, tests=tuple(tests))


def iter_instances(test: Test, path: tuple[str, ...] = ()) -> Iterator[tuple[tuple[str, ...], TestInstance]]:
    """Walk a test tree depth-first.

    Yields:
        (group path, instance) pairs, where the group path names every
        enclosing group from the outermost inward.
    """
    match test:
        case TestInstance():
            yield path, test
        case TestGroup():
            for member in test.tests:
                yield from iter_instances(member, (*path, test.name))
