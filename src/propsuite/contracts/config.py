# src/propsuite/contracts/config.py
"""Runtime configuration for a single property test.

PropertyArgs is the immutable record a test unit closes over. Every option
set through the runner derives a new record with dataclasses.replace(); no
record is ever mutated after construction.

Field Origins:
- Engine fields (max_discard_ratio, max_shrinks, max_success, max_size):
  copied from EngineArgs.
- verbosity: derived from EngineArgs.chatty (CHATTY or SILENT).
- Modifier fields (verbose_shrinking, no_shrinking, size_scale): not
  expressible in EngineArgs, default to off/identity.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from propsuite.contracts.engine import STD_ARGS, EngineArgs
from propsuite.contracts.enums import Verbosity

if TYPE_CHECKING:
    from propsuite.core.config import PropertySettings

_POSITIVE_FIELDS = ("max_discard_ratio", "max_shrinks", "max_success", "max_size", "size_scale")


@dataclass(frozen=True, slots=True)
class PropertyArgs:
    """Arguments altering property test behaviour.

    Attributes:
        verbosity: Output level, see Verbosity.
        verbose_shrinking: Report every shrink step.
        max_discard_ratio: Discarded cases per passing case before giving up.
        no_shrinking: Disable shrinking entirely.
        max_shrinks: Shrink steps allowed after a failure.
        max_success: Passing cases required before the property succeeds.
        max_size: Size of the biggest generated cases.
        size_scale: Multiplier applied to every generated size.
    """

    verbosity: Verbosity
    verbose_shrinking: bool
    max_discard_ratio: int
    no_shrinking: bool
    max_shrinks: int
    max_success: int
    max_size: int
    size_scale: int

    def __post_init__(self) -> None:
        """Validate integer bounds."""
        for name in _POSITIVE_FIELDS:
            value = getattr(self, name)
            if value < 1:
                raise ValueError(f"{name} must be >= 1, got {value}")

    @classmethod
    def from_engine_args(cls, engine_args: EngineArgs) -> PropertyArgs:
        """Build arguments from the engine's native parameters.

        Fields the engine does not express default to off/identity.
        """
        return cls(
            verbosity=Verbosity.CHATTY if engine_args.chatty else Verbosity.SILENT,
            verbose_shrinking=False,
            max_discard_ratio=engine_args.max_discard_ratio,
            no_shrinking=False,
            max_shrinks=engine_args.max_shrinks,
            max_success=engine_args.max_success,
            max_size=engine_args.max_size,
            size_scale=1,
        )

    @classmethod
    def from_settings(cls, settings: PropertySettings) -> PropertyArgs:
        """Factory from a validated PropertySettings model.

        Settings fields carry the runtime field names, so the mapping is direct.

        Args:
            settings: Validated Pydantic settings model

        Returns:
            PropertyArgs with mapped values
        """
        return cls(
            verbosity=settings.verbosity,
            verbose_shrinking=settings.verbose_shrinking,
            max_discard_ratio=settings.max_discard_ratio,
            no_shrinking=settings.no_shrinking,
            max_shrinks=settings.max_shrinks,
            max_success=settings.max_success,
            max_size=settings.max_size,
            size_scale=settings.size_scale,
        )

    def to_engine_args(self) -> EngineArgs:
        """Recover the engine parameters.

        Verbosity collapses to the chatty flag and replay state is always
        dropped, so every run draws fresh randomness.
        """
        return EngineArgs(
            replay=None,
            max_success=self.max_success,
            max_discard_ratio=self.max_discard_ratio,
            max_size=self.max_size,
            chatty=self.verbosity >= Verbosity.CHATTY,
            max_shrinks=self.max_shrinks,
        )


def std_property_args() -> PropertyArgs:
    """Default arguments for property tests, derived from the engine defaults."""
    return PropertyArgs.from_engine_args(STD_ARGS)
