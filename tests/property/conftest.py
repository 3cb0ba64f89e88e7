# tests/property/conftest.py
"""Shared Hypothesis strategies for property-based tests.

Usage:
    from tests.property.conftest import property_args, verbosities

    @given(args=property_args())
    def test_setter_is_pure(args: PropertyArgs) -> None:
        ...
"""

from __future__ import annotations

from hypothesis import strategies as st

from propsuite.contracts.config import PropertyArgs
from propsuite.contracts.engine import EngineArgs
from propsuite.contracts.enums import Verbosity

# Positive integers as the option parser accepts them
positive_ints = st.integers(min_value=1, max_value=10**9)

verbosities = st.sampled_from(list(Verbosity))

# Strings pydantic reads as booleans, mixed case included
bool_strings = st.sampled_from(["True", "False", "true", "false", "1", "0", "yes", "no", "on", "off"])


def property_args() -> st.SearchStrategy[PropertyArgs]:
    """Arbitrary valid PropertyArgs."""
    return st.builds(
        PropertyArgs,
        verbosity=verbosities,
        verbose_shrinking=st.booleans(),
        max_discard_ratio=positive_ints,
        no_shrinking=st.booleans(),
        max_shrinks=positive_ints,
        max_success=positive_ints,
        max_size=positive_ints,
        size_scale=positive_ints,
    )


def engine_args() -> st.SearchStrategy[EngineArgs]:
    """Arbitrary valid EngineArgs."""
    return st.builds(
        EngineArgs,
        replay=st.none() | st.integers(min_value=0, max_value=2**32 - 1),
        max_success=positive_ints,
        max_discard_ratio=positive_ints,
        max_size=positive_ints,
        chatty=st.booleans(),
        max_shrinks=positive_ints,
    )
