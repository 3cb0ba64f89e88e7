# src/propsuite/cli.py
"""Command-line test driver for property test trees.

    propsuite options
    propsuite options --settings properties.yaml
    propsuite run tests.props:suite -o maxSuccess=500 -o verbose=True

``run`` imports ``module:attribute`` (a TestInstance, a TestGroup or a list
of either), applies settings and options to every instance, runs them one
after another and exits non-zero when any verdict is not Pass.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path

import structlog
import typer
from pydantic import ValidationError

from propsuite import __version__
from propsuite.contracts.config import PropertyArgs, std_property_args
from propsuite.contracts.errors import SetOptionError
from propsuite.contracts.suite import (
    Error,
    Fail,
    OptionBool,
    OptionEnum,
    OptionNumber,
    OptionType,
    Pass,
    Test,
    TestGroup,
    TestInstance,
    group,
    iter_instances,
)
from propsuite.core.config import PropertySettings, load_settings, settings_to_options
from propsuite.core.options import describe_options, parse_assignment

logger = structlog.get_logger(__name__)

app = typer.Typer(
    name="propsuite",
    help="propsuite: Run and configure Hypothesis property test suites.",
    no_args_is_help=True,
)


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        typer.echo(f"propsuite version {__version__}")
        raise typer.Exit()


@app.callback()
def main(
    version: bool | None = typer.Option(
        None,
        "--version",
        "-V",
        callback=version_callback,
        is_eager=True,
        help="Show version and exit.",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Enable verbose/debug logging.",
    ),
    json_logs: bool = typer.Option(
        False,
        "--json-logs",
        help="Output structured JSON logs (for machine processing).",
    ),
) -> None:
    """propsuite: Run and configure Hypothesis property test suites."""
    from propsuite.core.logging import configure_logging

    configure_logging(json_output=json_logs, level="DEBUG" if verbose else "WARNING")


def _load_settings_or_exit(settings_path: Path | None) -> PropertySettings | None:
    if settings_path is None:
        return None
    try:
        return load_settings(settings_path)
    except FileNotFoundError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None
    except ValidationError as exc:
        typer.secho(f"Error: invalid settings in {settings_path}:\n{exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None


def _describe_type(option_type: OptionType) -> str:
    match option_type:
        case OptionBool():
            return "bool"
        case OptionEnum(choices=choices):
            return "|".join(choices)
        case OptionNumber(is_int=is_int, bounds=(lower, upper)):
            kind = "int" if is_int else "number"
            return f"{kind} [{lower or ''}..{upper or ''}]"


@app.command()
def options(
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to property settings YAML file.",
    ),
) -> None:
    """Show the options every property test accepts, with their defaults."""
    loaded = _load_settings_or_exit(settings)
    args = PropertyArgs.from_settings(loaded) if loaded is not None else std_property_args()

    for descr in describe_options(args):
        typer.echo(f"{descr.name:<18} {_describe_type(descr.option_type):<40} default={descr.default}")
        typer.echo(f"{'':<18} {descr.description}")


def _import_target(target: str) -> Test:
    # Resolve targets against the working directory, like `python -m`
    cwd = str(Path.cwd())
    if cwd not in sys.path:
        sys.path.insert(0, cwd)

    module_name, sep, attribute = target.partition(":")
    if not sep or not module_name or not attribute:
        typer.secho(f"Error: target must look like module:attribute, got {target!r}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1)
    try:
        module = importlib.import_module(module_name)
    except ImportError as exc:
        typer.secho(f"Error: cannot import {module_name!r}: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None
    try:
        obj = getattr(module, attribute)
    except AttributeError:
        typer.secho(f"Error: {module_name!r} has no attribute {attribute!r}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None

    if isinstance(obj, TestInstance | TestGroup):
        return obj
    if isinstance(obj, list | tuple) and all(isinstance(member, TestInstance | TestGroup) for member in obj):
        return group(attribute, obj)
    typer.secho(f"Error: {target!r} is not a test, a test group or a list of tests", fg=typer.colors.RED, err=True)
    raise typer.Exit(1)


@app.command()
def run(
    target: str = typer.Argument(..., help="Tests to run, as module:attribute."),
    option: list[str] | None = typer.Option(
        None,
        "--option",
        "-o",
        help="Set an option on every test, as NAME=VALUE (repeatable).",
    ),
    settings: Path | None = typer.Option(
        None,
        "--settings",
        "-s",
        help="Path to property settings YAML file.",
    ),
) -> None:
    """Run property tests and report a verdict for each."""
    loaded = _load_settings_or_exit(settings)
    assignments = settings_to_options(loaded) if loaded is not None else []
    try:
        assignments += [parse_assignment(raw) for raw in option or []]
    except ValueError as exc:
        typer.secho(f"Error: {exc}", fg=typer.colors.RED, err=True)
        raise typer.Exit(1) from None

    tree = _import_target(target)
    failures = 0
    total = 0
    for path, instance in iter_instances(tree):
        name = "/".join((*path, instance.name))
        try:
            for option_name, value in assignments:
                instance = instance.set_option(option_name, value)
        except SetOptionError as exc:
            typer.secho(f"Error: {name}: {exc}", fg=typer.colors.RED, err=True)
            raise typer.Exit(1) from None

        total += 1
        verdict = instance.run()
        logger.debug("test_finished", test=name, verdict=type(verdict).__name__)
        match verdict:
            case Pass():
                typer.secho(f"PASS  {name}", fg=typer.colors.GREEN)
            case Fail(message=message):
                failures += 1
                typer.secho(f"FAIL  {name}", fg=typer.colors.RED)
                typer.echo(message)
            case Error(message=message):
                failures += 1
                typer.secho(f"ERROR {name}", fg=typer.colors.YELLOW)
                typer.echo(message)

    typer.echo(f"{total - failures}/{total} passed")
    if failures:
        raise typer.Exit(1)


if __name__ == "__main__":
    app()
