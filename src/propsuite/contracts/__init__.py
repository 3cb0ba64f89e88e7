"""Shared contracts for propsuite.

Leaf module: nothing here imports from propsuite.core, propsuite.engine or
the adapter, so both sides of the bridge can depend on it.
"""

from propsuite.contracts.config import PropertyArgs, std_property_args
from propsuite.contracts.engine import (
    STD_ARGS,
    CheckResult,
    EngineArgs,
    Failure,
    GaveUp,
    NoExpectedFailure,
    Success,
)
from propsuite.contracts.enums import Verbosity
from propsuite.contracts.errors import OptionParseError, SetOptionError, UnknownOptionError
from propsuite.contracts.suite import (
    Error,
    Fail,
    OptionBool,
    OptionDescr,
    OptionEnum,
    OptionNumber,
    OptionType,
    Pass,
    Result,
    Test,
    TestGroup,
    TestInstance,
    group,
    iter_instances,
)

__all__ = [
    "STD_ARGS",
    "CheckResult",
    "EngineArgs",
    "Error",
    "Fail",
    "Failure",
    "GaveUp",
    "NoExpectedFailure",
    "OptionBool",
    "OptionDescr",
    "OptionEnum",
    "OptionNumber",
    "OptionParseError",
    "OptionType",
    "Pass",
    "PropertyArgs",
    "Result",
    "SetOptionError",
    "Success",
    "Test",
    "TestGroup",
    "TestInstance",
    "UnknownOptionError",
    "Verbosity",
    "group",
    "iter_instances",
    "std_property_args",
]
