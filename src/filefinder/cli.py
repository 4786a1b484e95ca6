"""Command-line entry point: find files under PATH and print each match."""

from __future__ import annotations

import logging
import os
import sys
from typing import Any, NoReturn

import click
from pydantic import ValidationError

from filefinder import __version__
from filefinder.config.parser import ConfigurationError, load_config
from filefinder.errors import FinderError, InvalidPatternError
from filefinder.tools.predicates import compile_pattern


def _fail(message: str) -> NoReturn:
    click.echo(f"ERROR: {message}", err=True)
    sys.exit(1)


def _parse_non_negative(option: str, value: str | None) -> int | None:
    if value is None:
        return None
    try:
        parsed = int(value)
    except ValueError:
        _fail(f"Invalid argument --{option}: invalid digit found in string '{value}'.")
    if parsed < 0:
        _fail(f"Invalid argument --{option}: value must be non-negative, got {parsed}.")
    return parsed


def _configure_logging(verbose: int) -> None:
    if not verbose:
        level = logging.WARNING
    elif verbose == 1:
        level = logging.INFO
    else:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s", stream=sys.stderr)


@click.command(name="filefinder", help="Finds files under PATH that match every given filter.")
@click.argument("path")
@click.option("-d", "--depth", "depth", metavar="DEPTH",
              help="Configures the max depth this recursive search will explore [default: 99999]")
@click.option("-e", "--extension", "extension", metavar="EXT",
              help="Looks for files that have this file extension")
@click.option("-p", "--pattern", "pattern", metavar="REGEX",
              help="Looks for files whose name contains this REGEX")
@click.option("-g", "--size-greater-than", "size_greater_than", metavar="BYTES",
              help="Filters out files where file size is not >= BYTES")
@click.option("-l", "--size-less-than", "size_less_than", metavar="BYTES",
              help="Filters out files where file size is not <= BYTES")
@click.option("--case-sensitive", is_flag=True, default=False,
              help="Match --extension case-sensitively")
@click.option("-c", "--config", "config_path", type=click.Path(dir_okay=False), default=None,
              help="YAML file with default search options")
@click.option("-v", "--verbose", count=True, help="Log progress to stderr (repeat for debug output)")
@click.version_option(version=__version__, prog_name="filefinder")
def cli(
    path: str,
    depth: str | None,
    extension: str | None,
    pattern: str | None,
    size_greater_than: str | None,
    size_less_than: str | None,
    case_sensitive: bool,
    config_path: str | None,
    verbose: int,
) -> None:
    _configure_logging(verbose)

    if not os.path.exists(path):
        _fail(f"Invalid argument for PATH: <{path}>. Make sure search path exists.")

    overrides: dict[str, Any] = {
        "depth": _parse_non_negative("depth", depth),
        "size_greater_than": _parse_non_negative("size-greater-than", size_greater_than),
        "size_less_than": _parse_non_negative("size-less-than", size_less_than),
        "extension": extension,
        "pattern": pattern,
        "case_sensitive": True if case_sensitive else None,
    }

    try:
        config = load_config(config_path).config
    except ConfigurationError as exc:
        _fail(str(exc))

    if pattern is not None:
        try:
            compile_pattern(pattern)
        except InvalidPatternError as exc:
            _fail(f"Invalid argument --pattern: {exc}.")

    try:
        settings = config.merge(overrides)
    except ValidationError as exc:
        _fail(f"Invalid arguments: {exc}")

    finder = settings.build_finder(path)
    try:
        finder.print_find(settings.depth)
    except FinderError as exc:
        _fail(str(exc))


def main() -> None:
    cli()


if __name__ == "__main__":
    main()
