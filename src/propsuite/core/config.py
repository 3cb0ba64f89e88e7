# src/propsuite/core/config.py
"""
Settings schema and loading for property tests.

Uses Pydantic for validation and Dynaconf for multi-source loading.
Settings are frozen (immutable) after construction and map one-to-one onto
PropertyArgs via PropertyArgs.from_settings().

Example YAML:
    verbosity: Verbose
    max_success: 500
    no_shrinking: true
"""

from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, PositiveInt, field_validator

from propsuite.contracts.engine import STD_ARGS
from propsuite.contracts.enums import Verbosity


class PropertySettings(BaseModel):
    """User-facing defaults for every property test in a run."""

    model_config = {"frozen": True, "extra": "forbid"}

    verbosity: Verbosity = Field(
        default=Verbosity.CHATTY if STD_ARGS.chatty else Verbosity.SILENT,
        description="Verbosity level: Silent, Chatty or Verbose",
    )
    verbose_shrinking: bool = Field(
        default=False,
        description="Print all checked and shrunk values",
    )
    max_discard_ratio: PositiveInt = Field(
        default=STD_ARGS.max_discard_ratio,
        description="Maximum number of discarded tests per successful test before giving up",
    )
    no_shrinking: bool = Field(
        default=False,
        description="Disable shrinking",
    )
    max_shrinks: PositiveInt = Field(
        default=STD_ARGS.max_shrinks,
        description="Maximum number of shrinks before giving up on a smaller counterexample",
    )
    max_success: PositiveInt = Field(
        default=STD_ARGS.max_success,
        description="Maximum number of successful tests before succeeding",
    )
    max_size: PositiveInt = Field(
        default=STD_ARGS.max_size,
        description="Size to use for the biggest test cases",
    )
    size_scale: PositiveInt = Field(
        default=1,
        description="Scale all sizes by a number",
    )

    @field_validator("verbosity", mode="before")
    @classmethod
    def verbosity_from_label(cls, value: Any) -> Any:
        """Accept option labels ("Silent", "Chatty", "Verbose") as well as members."""
        if isinstance(value, str):
            return Verbosity.from_label(value)
        return value


def load_settings(config_path: Path) -> PropertySettings:
    """Load settings from YAML file with environment variable overrides.

    Uses Dynaconf for multi-source loading with precedence:
    1. Environment variables (PROPSUITE_*) - highest priority
    2. Config file (YAML)
    3. Defaults from Pydantic schema - lowest priority

    Args:
        config_path: Path to YAML configuration file

    Returns:
        Validated PropertySettings instance

    Raises:
        ValidationError: If configuration fails Pydantic validation
        FileNotFoundError: If config file doesn't exist
    """
    from dynaconf import Dynaconf

    # Explicit check for file existence (Dynaconf silently accepts missing files)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    dynaconf_settings = Dynaconf(
        envvar_prefix="PROPSUITE",
        settings_files=[str(config_path)],
        environments=False,
        load_dotenv=False,
    )

    # Dynaconf returns uppercase keys; convert to lowercase for Pydantic
    internal_keys = {"LOAD_DOTENV", "ENVIRONMENTS", "SETTINGS_FILES"}
    raw_config = {k.lower(): v for k, v in dynaconf_settings.as_dict().items() if k not in internal_keys}

    return PropertySettings(**raw_config)


# Settings field -> option name, for replaying settings through set_option()
SETTINGS_OPTION_NAMES: dict[str, str] = {
    "verbosity": "verbosity",
    "verbose_shrinking": "verboseShrinking",
    "max_discard_ratio": "maxDiscardRatio",
    "no_shrinking": "noShrinking",
    "max_shrinks": "maxShrinks",
    "max_success": "maxSuccess",
    "max_size": "maxSize",
    "size_scale": "sizeScale",
}


def settings_to_options(settings: PropertySettings) -> list[tuple[str, str]]:
    """Express the explicitly set fields as (option name, value) assignments.

    Fields left at their defaults are skipped, so replaying the assignments on
    a test instance only overrides what the settings file actually says.
    """
    assignments: list[tuple[str, str]] = []
    for field_name in PropertySettings.model_fields:
        if field_name not in settings.model_fields_set:
            continue
        value = getattr(settings, field_name)
        raw = value.label if isinstance(value, Verbosity) else str(value)
        assignments.append((SETTINGS_OPTION_NAMES[field_name], raw))
    return assignments
