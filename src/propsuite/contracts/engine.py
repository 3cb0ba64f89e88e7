# src/propsuite/contracts/engine.py
"""Property engine contracts.

These types describe the engine side of the bridge: the run parameters the
checker natively understands (EngineArgs) and the four result variants it
reports back. The adapter never inspects Hypothesis directly; it only sees
these values.
"""

from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import Final


@dataclass(frozen=True, slots=True)
class EngineArgs:
    """Native run parameters of the property checker.

    Attributes:
        replay: Seed to replay a previous run, or None for fresh randomness.
        max_success: Passing cases required before the property succeeds.
        max_discard_ratio: Discarded cases allowed per required passing case
            before the checker gives up.
        max_size: Size handed to sized strategies.
        chatty: Whether the checker prints anything at all.
        max_shrinks: Successful shrink steps allowed after a failure.
    """

    replay: int | None
    max_success: int
    max_discard_ratio: int
    max_size: int
    chatty: bool
    max_shrinks: int


STD_ARGS: Final[EngineArgs] = EngineArgs(
    replay=None,
    max_success=100,
    max_discard_ratio=10,
    max_size=100,
    chatty=True,
    max_shrinks=sys.maxsize,
)


# =============================================================================
# Check results
# =============================================================================


@dataclass(frozen=True, slots=True)
class Success:
    """Every generated case passed."""

    num_tests: int
    num_discarded: int
    output: str = ""


@dataclass(frozen=True, slots=True)
class GaveUp:
    """Too many cases were discarded (or a health check failed) before enough passed."""

    num_tests: int
    num_discarded: int
    reason: str
    output: str = ""


@dataclass(frozen=True, slots=True)
class Failure:
    """A counterexample was found.

    Attributes:
        num_tests: Passing cases before the first failure.
        num_discarded: Cases rejected by assumptions.
        num_shrinks: Successful shrink steps taken.
        reason: Rendered exception, including the falsifying example.
        exception_type: Class name of the exception the property raised.
    """

    num_tests: int
    num_discarded: int
    num_shrinks: int
    reason: str
    exception_type: str
    output: str = ""


@dataclass(frozen=True, slots=True)
class NoExpectedFailure:
    """A property marked as expected to fail passed every case."""

    num_tests: int
    num_discarded: int
    output: str = ""


CheckResult = Success | GaveUp | Failure | NoExpectedFailure
