"""
propsuite: Hypothesis properties as detailed, configurable test units.

Wraps property-based checks so that a structured test runner can discover
them by name and tag, tune them through a string-keyed option schema, and
read back a Pass/Fail/Error verdict.
"""

__version__ = "0.1.0"

from propsuite.adapter import (
    PropertyTest,
    get_property_test,
    get_property_test_using,
    get_property_tests,
    property_test_group,
)
from propsuite.contracts.config import PropertyArgs, std_property_args
from propsuite.contracts.enums import Verbosity
from propsuite.engine.property import for_all, sized

__all__ = [
    "PropertyArgs",
    "PropertyTest",
    "Verbosity",
    "__version__",
    "for_all",
    "get_property_test",
    "get_property_test_using",
    "get_property_tests",
    "property_test_group",
    "sized",
    "std_property_args",
]
