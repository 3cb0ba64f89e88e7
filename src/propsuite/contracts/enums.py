# src/propsuite/contracts/enums.py
"""Enumerations shared across the option and engine boundaries."""

from enum import IntEnum


class Verbosity(IntEnum):
    """How much diagnostic output a property run produces.

    Totally ordered: SILENT < CHATTY < VERBOSE.

    Values:
        SILENT: The checker prints nothing (engine ``chatty=False``).
        CHATTY: Basic statistics and counterexamples (engine ``chatty=True``).
        VERBOSE: Every checked case is printed (verbose modifier applied).

    Options address members by label ("Silent", "Chatty", "Verbose"),
    never by their integer value.
    """

    SILENT = 0
    CHATTY = 1
    VERBOSE = 2

    @property
    def label(self) -> str:
        """Option-facing spelling of this level."""
        return self.name.capitalize()

    @classmethod
    def from_label(cls, label: str) -> "Verbosity":
        """Look up a level by its option label.

        Raises:
            ValueError: If the label does not name a level.
        """
        for member in cls:
            if member.label == label:
                return member
        raise ValueError(f"Unknown verbosity label {label!r}. Expected one of {[m.label for m in cls]}")
