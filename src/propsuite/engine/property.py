# src/propsuite/engine/property.py
"""Checkable properties.

A Property pairs a predicate with the Hypothesis strategies that feed its
keyword arguments. The predicate fails by raising (typically AssertionError)
or by returning False; any other return value is a pass. hypothesis.assume()
inside the predicate discards the current case.

Modifiers are property -> property transforms. Each one touches a separate
field, so they commute:

    prop = no_shrinking(verbose(reverse_involutive))
    prop = verbose(no_shrinking(reverse_involutive))  # same property

Usage:
    @for_all(xs=st.lists(st.integers()))
    def reverse_involutive(xs: list[int]) -> bool:
        return list(reversed(list(reversed(xs)))) == xs

    @for_all(xs=sized(lambda n: st.lists(st.integers(), max_size=n)))
    def sort_idempotent(xs: list[int]) -> bool:
        return sorted(sorted(xs)) == sorted(xs)
"""

from __future__ import annotations

from collections.abc import Callable, Mapping
from dataclasses import dataclass, field, replace
from typing import Any, TypeAlias

from hypothesis.strategies import SearchStrategy


@dataclass(frozen=True, slots=True)
class Sized:
    """Strategy factory that receives the run's size.

    The size is EngineArgs.max_size multiplied by the property's size_scale.
    """

    factory: Callable[[int], SearchStrategy[Any]]


def sized(factory: Callable[[int], SearchStrategy[Any]]) -> Sized:
    """Mark a strategy factory as size-dependent."""
    return Sized(factory)


StrategyLike: TypeAlias = SearchStrategy[Any] | Sized


@dataclass(frozen=True, slots=True)
class Property:
    """A predicate over generated keyword arguments, plus run modifiers.

    Attributes:
        predicate: Called with one keyword argument per strategy.
        strategies: Keyword name -> strategy (or Sized factory).
        verbose: Report every checked case.
        verbose_shrinking: Report every shrink step as well.
        no_shrinking: Skip the shrink phase.
        size_scale: Multiplier applied to the run's size.
        expect_failure: The property is expected to fail; passing is the error.
    """

    predicate: Callable[..., object]
    strategies: Mapping[str, StrategyLike] = field(default_factory=dict)
    verbose: bool = False
    verbose_shrinking: bool = False
    no_shrinking: bool = False
    size_scale: int = 1
    expect_failure: bool = False

    @property
    def name(self) -> str:
        """Name of the predicate, for logs."""
        return getattr(self.predicate, "__qualname__", repr(self.predicate))

    def strategies_for(self, max_size: int) -> dict[str, SearchStrategy[Any]]:
        """Resolve sized factories against ``max_size`` scaled by size_scale."""
        size = max_size * self.size_scale
        return {
            name: strategy.factory(size) if isinstance(strategy, Sized) else strategy
            for name, strategy in self.strategies.items()
        }


Testable: TypeAlias = Property | bool | Callable[[], object]


def for_all(**strategies: StrategyLike) -> Callable[[Callable[..., object]], Property]:
    """Decorator turning a predicate into a Property over ``strategies``."""

    def decorate(predicate: Callable[..., object]) -> Property:
        return Property(predicate=predicate, strategies=dict(strategies))

    return decorate


def as_property(testable: Testable) -> Property:
    """Coerce anything checkable into a Property.

    A bool becomes a constant property; a zero-argument callable becomes a
    property checked once, without generated input.

    Raises:
        TypeError: If ``testable`` is none of the above.
    """
    match testable:
        case Property():
            return testable
        case bool():
            outcome = testable
            return Property(predicate=lambda: outcome)
        case _ if callable(testable):
            return Property(predicate=testable)
    raise TypeError(f"Cannot check a value of type {type(testable).__name__}")


# =============================================================================
# Modifiers
# =============================================================================


def verbose(testable: Testable) -> Property:
    """Report every checked case."""
    return replace(as_property(testable), verbose=True)


def verbose_shrinking(testable: Testable) -> Property:
    """Report every checked case and every shrink step."""
    return replace(as_property(testable), verbose_shrinking=True)


def no_shrinking(testable: Testable) -> Property:
    """Report the first counterexample found, unshrunk."""
    return replace(as_property(testable), no_shrinking=True)


def map_size(testable: Testable, factor: int) -> Property:
    """Multiply the size seen by sized strategies by ``factor``."""
    prop = as_property(testable)
    return replace(prop, size_scale=prop.size_scale * factor)


def expect_failure(testable: Testable) -> Property:
    """Invert the verdict: finding a counterexample is success."""
    return replace(as_property(testable), expect_failure=True)
