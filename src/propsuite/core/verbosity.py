# src/propsuite/core/verbosity.py
"""Verbosity lattice.

Three boolean options ("silent", "chatty", "verbose") all write the same
verbosity field. switch_verbosity() reconciles them so that toggles compose
deterministically whatever order the runner applies them in:

- enabling a level raises verbosity to at least that level;
- disabling a level forces verbosity strictly below it.
"""

from propsuite.contracts.enums import Verbosity


def predecessor(level: Verbosity) -> Verbosity:
    """Step one level down the ordering, saturating at SILENT."""
    if level is Verbosity.SILENT:
        return Verbosity.SILENT
    return Verbosity(level - 1)


def switch_verbosity(target: Verbosity, enabled: bool, current: Verbosity) -> Verbosity:
    """Merge a boolean toggle for ``target`` into the current verbosity.

    Args:
        target: The level the toggle controls.
        enabled: Whether the toggle was switched on.
        current: Verbosity before the toggle.

    Returns:
        max(current, target) when enabled, otherwise
        min(current, predecessor(target)).
    """
    if enabled:
        return max(current, target)
    return min(current, predecessor(target))
