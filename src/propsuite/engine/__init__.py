"""Hypothesis-backed property engine.

- property: the Property value, for_all() and the property modifiers
- checker: check_with_result(), which runs a Property under EngineArgs
"""

from propsuite.engine.checker import check_with_result
from propsuite.engine.property import (
    Property,
    Sized,
    Testable,
    as_property,
    expect_failure,
    for_all,
    map_size,
    no_shrinking,
    sized,
    verbose,
    verbose_shrinking,
)

__all__ = [
    "Property",
    "Sized",
    "Testable",
    "as_property",
    "check_with_result",
    "expect_failure",
    "for_all",
    "map_size",
    "no_shrinking",
    "sized",
    "verbose",
    "verbose_shrinking",
]
