# src/propsuite/core/options.py
"""String-keyed option table for property tests.

Every option a property test accepts is declared once, in OPTIONS. Each entry
carries everything both directions need:

- the schema side (description, option type, how to render the current value
  as a default string) used by describe_options();
- the setter side (a pydantic TypeAdapter that parses the raw string, and a
  function deriving the updated PropertyArgs) used by set_option().

Adding an option is a single edit to OPTIONS. Option names are case-sensitive
and must be unique; a duplicate crashes at import time.

Integer options are parsed as pydantic PositiveInt, so a value below 1 is a
parse error here rather than a ValueError from PropertyArgs.
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Any, Final, Literal

import structlog
from pydantic import PositiveInt, TypeAdapter, ValidationError

from propsuite.contracts.config import PropertyArgs
from propsuite.contracts.enums import Verbosity
from propsuite.contracts.errors import OptionParseError, UnknownOptionError
from propsuite.contracts.suite import OptionBool, OptionDescr, OptionEnum, OptionNumber, OptionType
from propsuite.core.verbosity import switch_verbosity

logger = structlog.get_logger(__name__)

VERBOSE_SHRINKING_LABEL: Final = "VerboseShrinking"
VERBOSITY_CHOICES: Final[tuple[str, ...]] = (*(level.label for level in Verbosity), VERBOSE_SHRINKING_LABEL)

POSITIVE_INT_TYPE: Final = OptionNumber(is_int=True, bounds=("1", None))

_BOOL: Final[TypeAdapter[Any]] = TypeAdapter(bool)
_POSITIVE_INT: Final[TypeAdapter[Any]] = TypeAdapter(PositiveInt)
_VERBOSITY_LABEL: Final[TypeAdapter[Any]] = TypeAdapter(Literal["Silent", "Chatty", "Verbose", "VerboseShrinking"])

ArgsTransform = Callable[[PropertyArgs], PropertyArgs]


@dataclass(frozen=True, slots=True)
class OptionSpec:
    """One row of the option table.

    Attributes:
        name: Option name as the runner spells it.
        description: Human-readable description for the schema.
        option_type: Schema type advertised to the runner.
        parser: Converts the raw string into the native value.
        apply: Derives new arguments from old arguments and the parsed value.
        current: Reads the value this option currently stands for; its str()
            is the advertised default.
    """

    name: str
    description: str
    option_type: OptionType
    parser: TypeAdapter[Any]
    apply: Callable[[PropertyArgs, Any], PropertyArgs]
    current: Callable[[PropertyArgs], object]


def _set_silent(args: PropertyArgs, value: bool) -> PropertyArgs:
    if value:
        return replace(args, verbosity=Verbosity.SILENT)
    return replace(args, verbosity=max(Verbosity.CHATTY, args.verbosity))


def _switch(level: Verbosity) -> Callable[[PropertyArgs, bool], PropertyArgs]:
    def apply(args: PropertyArgs, value: bool) -> PropertyArgs:
        return replace(args, verbosity=switch_verbosity(level, value, args.verbosity))

    return apply


def _set_verbosity(args: PropertyArgs, label: str) -> PropertyArgs:
    # VerboseShrinking is a display variant: full verbosity plus shrink tracing
    if label == VERBOSE_SHRINKING_LABEL:
        return replace(args, verbosity=Verbosity.VERBOSE, verbose_shrinking=True)
    return replace(args, verbosity=Verbosity.from_label(label))


def _verbosity_label(args: PropertyArgs) -> str:
    if args.verbosity is Verbosity.VERBOSE and args.verbose_shrinking:
        return VERBOSE_SHRINKING_LABEL
    return args.verbosity.label


def _field(name: str) -> Callable[[PropertyArgs, Any], PropertyArgs]:
    def apply(args: PropertyArgs, value: Any) -> PropertyArgs:
        return replace(args, **{name: value})

    return apply


OPTIONS: Final[tuple[OptionSpec, ...]] = (
    OptionSpec(
        name="silent",
        description="Suppress property checker output",
        option_type=OptionBool(),
        parser=_BOOL,
        apply=_set_silent,
        current=lambda args: args.verbosity is Verbosity.SILENT,
    ),
    OptionSpec(
        name="chatty",
        description="Print property checker output",
        option_type=OptionBool(),
        parser=_BOOL,
        apply=_switch(Verbosity.CHATTY),
        current=lambda args: args.verbosity >= Verbosity.CHATTY,
    ),
    OptionSpec(
        name="verbose",
        description="Print checked values",
        option_type=OptionBool(),
        parser=_BOOL,
        apply=_switch(Verbosity.VERBOSE),
        current=lambda args: args.verbosity >= Verbosity.VERBOSE,
    ),
    OptionSpec(
        name="verboseShrinking",
        description="Print all checked and shrunk values",
        option_type=OptionBool(),
        parser=_BOOL,
        apply=_field("verbose_shrinking"),
        current=lambda args: args.verbose_shrinking,
    ),
    OptionSpec(
        name="verbosity",
        description="Verbosity level",
        option_type=OptionEnum(choices=VERBOSITY_CHOICES),
        parser=_VERBOSITY_LABEL,
        apply=_set_verbosity,
        current=_verbosity_label,
    ),
    OptionSpec(
        name="maxDiscardRatio",
        description="Maximum number of discarded tests per successful test before giving up",
        option_type=POSITIVE_INT_TYPE,
        parser=_POSITIVE_INT,
        apply=_field("max_discard_ratio"),
        current=lambda args: args.max_discard_ratio,
    ),
    OptionSpec(
        name="noShrinking",
        description="Disable shrinking",
        option_type=OptionBool(),
        parser=_BOOL,
        apply=_field("no_shrinking"),
        current=lambda args: args.no_shrinking,
    ),
    OptionSpec(
        name="shrinking",
        description="Enable shrinking",
        option_type=OptionBool(),
        parser=_BOOL,
        apply=lambda args, value: replace(args, no_shrinking=not value),
        current=lambda args: not args.no_shrinking,
    ),
    OptionSpec(
        name="maxShrinks",
        description="Maximum number of shrinks before giving up on finding a smaller counterexample",
        option_type=POSITIVE_INT_TYPE,
        parser=_POSITIVE_INT,
        apply=_field("max_shrinks"),
        current=lambda args: args.max_shrinks,
    ),
    OptionSpec(
        name="maxSuccess",
        description="Maximum number of successful tests before succeeding",
        option_type=POSITIVE_INT_TYPE,
        parser=_POSITIVE_INT,
        apply=_field("max_success"),
        current=lambda args: args.max_success,
    ),
    OptionSpec(
        name="maxSize",
        description="Size to use for the biggest test cases",
        option_type=POSITIVE_INT_TYPE,
        parser=_POSITIVE_INT,
        apply=_field("max_size"),
        current=lambda args: args.max_size,
    ),
    OptionSpec(
        name="sizeScale",
        description="Scale all sizes by a number",
        option_type=POSITIVE_INT_TYPE,
        parser=_POSITIVE_INT,
        apply=_field("size_scale"),
        current=lambda args: args.size_scale,
    ),
)


def _index(options: tuple[OptionSpec, ...]) -> dict[str, OptionSpec]:
    index: dict[str, OptionSpec] = {}
    for spec in options:
        if spec.name in index:
            raise RuntimeError(f"Duplicate option name {spec.name!r} in option table")
        index[spec.name] = spec
    return index


_OPTIONS_BY_NAME: Final[dict[str, OptionSpec]] = _index(OPTIONS)

OPTION_NAMES: Final[tuple[str, ...]] = tuple(_OPTIONS_BY_NAME)


def option_setter(name: str, raw_value: str) -> ArgsTransform:
    """Resolve an option assignment into an arguments transform.

    Args:
        name: Option name (case-sensitive).
        raw_value: Value as the runner passed it.

    Returns:
        A function deriving updated PropertyArgs; it never mutates its input.

    Raises:
        UnknownOptionError: If ``name`` is not a known option.
        OptionParseError: If ``raw_value`` does not parse as the option's type.
    """
    try:
        spec = _OPTIONS_BY_NAME[name]
    except KeyError:
        raise UnknownOptionError(name) from None

    try:
        value = spec.parser.validate_python(raw_value)
    except ValidationError as exc:
        raise OptionParseError(name, raw_value) from exc

    def transform(args: PropertyArgs) -> PropertyArgs:
        return spec.apply(args, value)

    return transform


def set_option(name: str, raw_value: str, args: PropertyArgs) -> PropertyArgs:
    """Return a copy of ``args`` with one option set from its string form.

    Raises:
        UnknownOptionError: If ``name`` is not a known option.
        OptionParseError: If ``raw_value`` does not parse as the option's type.
    """
    updated = option_setter(name, raw_value)(args)
    logger.debug("option_set", option=name, value=raw_value)
    return updated


def describe_options(args: PropertyArgs) -> list[OptionDescr]:
    """Build the option schema, with defaults read off ``args``."""
    return [
        OptionDescr(
            name=spec.name,
            description=spec.description,
            option_type=spec.option_type,
            default=str(spec.current(args)),
        )
        for spec in OPTIONS
    ]


def parse_assignment(assignment: str) -> tuple[str, str]:
    """Split a NAME=VALUE option assignment, as typed on a command line.

    Raises:
        ValueError: If there is no '=' or the name is empty.
    """
    name, sep, value = assignment.partition("=")
    if not sep or not name.strip():
        raise ValueError(f"Option assignment must look like NAME=VALUE, got {assignment!r}")
    return name.strip(), value.strip()
