# tests/conftest.py
"""Shared test fixtures and Hypothesis configuration.

Hypothesis Configuration:
- "ci" profile: Fast tests for CI (100 examples) - default
- "nightly" profile: Thorough tests (1000 examples)
- "debug" profile: Minimal tests with verbose output (10 examples)

Set profile via environment variable:
    HYPOTHESIS_PROFILE=nightly pytest tests/property/

These profiles govern the suite's own @given tests. Properties checked
through propsuite build their own settings from PropertyArgs and are not
affected by the loaded profile.
"""

import logging
import os
from collections.abc import Iterator
from dataclasses import replace

import pytest
import structlog
from hypothesis import Phase, Verbosity, settings

from propsuite.contracts.config import PropertyArgs, std_property_args
from propsuite.contracts.engine import STD_ARGS, EngineArgs
from propsuite.contracts.enums import Verbosity as PropertyVerbosity

# =============================================================================
# Hypothesis Configuration
# =============================================================================

settings.register_profile(
    "ci",
    max_examples=100,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "nightly",
    max_examples=1000,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.register_profile(
    "debug",
    max_examples=10,
    verbosity=Verbosity.verbose,
    phases=[Phase.explicit, Phase.reuse, Phase.generate, Phase.shrink],
    deadline=None,
)

settings.load_profile(os.getenv("HYPOTHESIS_PROFILE", "ci"))


# =============================================================================
# Argument fixtures
# =============================================================================


@pytest.fixture
def std_args() -> PropertyArgs:
    """Default property arguments."""
    return std_property_args()


@pytest.fixture
def quick_args() -> PropertyArgs:
    """Silent, small runs for tests that actually check properties."""
    return replace(std_property_args(), verbosity=PropertyVerbosity.SILENT, max_success=25, max_size=20)


@pytest.fixture
def quick_engine_args() -> EngineArgs:
    """Silent, small engine runs."""
    return replace(STD_ARGS, chatty=False, max_success=25, max_size=20)


# =============================================================================
# Logging
# =============================================================================


@pytest.fixture(autouse=True)
def _quiet_structlog() -> Iterator[None]:
    """Unconfigured structlog prints every event to stdout; keep debug events out of captured output."""
    structlog.configure(wrapper_class=structlog.make_filtering_bound_logger(logging.WARNING))
    yield
    structlog.reset_defaults()
