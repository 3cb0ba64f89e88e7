# src/propsuite/pytest_plugin.py
"""Pytest integration: collect property test trees as pytest items.

Enable with ``-p propsuite.pytest_plugin`` or, in a conftest.py:

    pytest_plugins = ["propsuite.pytest_plugin"]

Any module-level TestInstance or TestGroup in a collected test module becomes
one item per instance. Group names and the instance name form the item name
("arithmetic/reverse_involutive"); instance tags become keywords, so
``-k slow`` selects tests tagged "slow".

Options reach every property test in the session, applied in this order
through each instance's set_option():
1. ``property_settings`` ini key: path to a settings YAML file (only the
   fields the file sets)
2. ``property_options`` ini key: one NAME=VALUE per line
3. ``--property-option NAME=VALUE`` on the command line (repeatable)
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from pathlib import Path
from typing import Any

import pytest
from pydantic import ValidationError

from propsuite.contracts.errors import SetOptionError
from propsuite.contracts.suite import Error, Fail, Pass, TestGroup, TestInstance, iter_instances
from propsuite.core.config import load_settings, settings_to_options
from propsuite.core.options import parse_assignment

_ASSIGNMENTS_KEY = pytest.StashKey[list[tuple[str, str]]]()


class PropertyCheckError(Exception):
    """Base for verdicts reported as pytest failures."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


class PropertyFailed(PropertyCheckError):
    """The property was falsified, or an expected failure did not happen."""


class PropertyGaveUp(PropertyCheckError):
    """The checker gave up before reaching a verdict."""


def _parse_assignments(lines: Iterable[str]) -> list[tuple[str, str]]:
    try:
        return [parse_assignment(line) for line in lines]
    except ValueError as exc:
        raise pytest.UsageError(f"Invalid property option: {exc}") from exc


def apply_options(instance: TestInstance, assignments: Iterable[tuple[str, str]]) -> TestInstance:
    """Set every option on an instance, in order.

    Raises:
        pytest.UsageError: If an option is unknown or its value malformed.
    """
    for name, value in assignments:
        try:
            instance = instance.set_option(name, value)
        except SetOptionError as exc:
            raise pytest.UsageError(f"Property test {instance.name!r}: {exc}") from exc
    return instance


def pytest_addoption(parser: pytest.Parser) -> None:
    group = parser.getgroup("propsuite", "property tests")
    group.addoption(
        "--property-option",
        action="append",
        default=[],
        dest="property_options",
        metavar="NAME=VALUE",
        help="Set an option on every property test (repeatable).",
    )
    parser.addini("property_options", type="linelist", help="Property test options, one NAME=VALUE per line.")
    parser.addini("property_settings", type="string", default="", help="Path to a property settings YAML file.")


def pytest_configure(config: pytest.Config) -> None:
    config.addinivalue_line("markers", "property: property-based test collected by propsuite")

    assignments: list[tuple[str, str]] = []
    settings_path = config.getini("property_settings")
    if settings_path:
        path = Path(settings_path)
        if not path.is_absolute():
            path = config.rootpath / path
        try:
            assignments += settings_to_options(load_settings(path))
        except (FileNotFoundError, ValidationError) as exc:
            raise pytest.UsageError(f"Invalid property settings {settings_path!r}: {exc}") from exc

    assignments += _parse_assignments(config.getini("property_options"))
    assignments += _parse_assignments(config.getoption("property_options"))
    config.stash[_ASSIGNMENTS_KEY] = assignments


def pytest_pycollect_makeitem(collector: pytest.Collector, name: str, obj: object) -> list[PropertyItem] | None:
    if not isinstance(obj, TestInstance | TestGroup):
        return None
    assignments = collector.config.stash.get(_ASSIGNMENTS_KEY, [])
    return list(PropertyItem.collect_tree(collector, obj, assignments))


class PropertyItem(pytest.Item):
    """A single property test instance run as a pytest item."""

    def __init__(self, *, instance: TestInstance, **kwargs: Any) -> None:
        super().__init__(**kwargs)
        self.instance = instance
        self.add_marker("property")
        self.extra_keyword_matches.update(instance.tags)

    @classmethod
    def collect_tree(
        cls,
        parent: pytest.Collector,
        tree: TestInstance | TestGroup,
        assignments: list[tuple[str, str]],
    ) -> Iterator[PropertyItem]:
        for path, instance in iter_instances(tree):
            configured = apply_options(instance, assignments)
            yield cls.from_parent(parent, name="/".join((*path, instance.name)), instance=configured)

    def runtest(self) -> None:
        match self.instance.run():
            case Pass():
                return
            case Fail(message=message):
                raise PropertyFailed(message)
            case Error(message=message):
                raise PropertyGaveUp(message)

    def repr_failure(self, excinfo: pytest.ExceptionInfo[BaseException], style: Any = None) -> Any:
        if isinstance(excinfo.value, PropertyCheckError):
            return excinfo.value.message
        return super().repr_failure(excinfo, style=style)

    def reportinfo(self) -> tuple[Path, int | None, str]:
        return self.path, None, f"property: {self.name}"
