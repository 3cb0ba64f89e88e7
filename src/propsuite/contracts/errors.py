"""Option-setting errors.

Both errors surface to the runner identically (a rejected option), but keep
separate types so callers and logs can tell a typo in the option name from a
malformed value.
"""


class SetOptionError(ValueError):
    """Base for every rejection raised while setting an option by name."""

    def __init__(self, option: str, message: str) -> None:
        self.option = option
        super().__init__(message)


class UnknownOptionError(SetOptionError):
    """Raised when an option name is not in the option table."""

    def __init__(self, option: str) -> None:
        super().__init__(option, f"Unknown option {option!r}")


class OptionParseError(SetOptionError):
    """Raised when a recognized option receives a value of the wrong type.

    Attributes:
        option: The option name (recognized).
        raw_value: The string that could not be converted.
    """

    def __init__(self, option: str, raw_value: str) -> None:
        self.raw_value = raw_value
        super().__init__(option, f"Parse error: cannot read {raw_value!r} for option {option!r}")
