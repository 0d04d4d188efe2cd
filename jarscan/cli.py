"""CLI entry point for standalone usage: jarscan.

Subcommands:
    jarscan select artifacts.json -p 'org\\.acme:.*:test-jar'   # matching archives
    jarscan scan lib/a-tests.jar lib/b-tests.jar                # test classes in archives
    jarscan discover artifacts.json -p 'org\\.acme:core'         # select + scan
"""

from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import NoReturn

import click
from pydantic import ValidationError

from jarscan.errors import ArchiveScanError, ConfigurationError
from jarscan.filters import IncludeExcludeFilter
from jarscan.logging import setup_logging
from jarscan.models import Artifact, ScanResult
from jarscan.scanner import DependencyScanner
from jarscan.schemas import load_artifacts
from jarscan.selector import select

_EXIT_SCAN_ERROR = 1
_EXIT_CONFIG_ERROR = 2


def _fail(message: str, code: int) -> NoReturn:
    click.echo(f"Error: {message}", err=True)
    sys.exit(code)


def _load(artifacts_file: Path) -> list[Artifact]:
    try:
        return load_artifacts(artifacts_file)
    except (json.JSONDecodeError, UnicodeDecodeError) as e:
        _fail(f"Invalid JSON in {artifacts_file}: {e}", _EXIT_CONFIG_ERROR)
    except ValidationError as e:
        _fail(f"Invalid artifact list in {artifacts_file}: {e}", _EXIT_CONFIG_ERROR)


def _build_filter(includes: tuple[str, ...], excludes: tuple[str, ...]) -> IncludeExcludeFilter:
    try:
        return IncludeExcludeFilter(includes or None, excludes or None)
    except ConfigurationError as e:
        _fail(str(e), _EXIT_CONFIG_ERROR)


def _print_classes(result: ScanResult, as_json: bool) -> None:
    if as_json:
        click.echo(json.dumps(result.classes, indent=2))
        return
    if result.is_empty():
        click.echo("No test classes found.")
        return
    for name in result:
        click.echo(name)


def _run_scan(scanner: DependencyScanner, as_json: bool) -> None:
    try:
        result = scanner.scan()
    except ArchiveScanError as e:
        _fail(f"{e}: {e.__cause__}", _EXIT_SCAN_ERROR)
    else:
        _print_classes(result, as_json)


_include_option = click.option(
    "-i", "--include", "includes", multiple=True, help="Include glob or %regex[...] (repeatable)"
)
_exclude_option = click.option(
    "-e", "--exclude", "excludes", multiple=True, help="Exclude glob or %regex[...] (repeatable)"
)
_pattern_option = click.option(
    "-p",
    "--pattern",
    "patterns",
    multiple=True,
    required=True,
    help="groupId:artifactId[:type[:classifier[:version]]] (repeatable)",
)
_json_option = click.option("--json", "as_json", is_flag=True, help="Output as JSON")
_artifacts_argument = click.argument(
    "artifacts_file", type=click.Path(exists=True, dir_okay=False, path_type=Path)
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Verbose logging")
def main(verbose: bool) -> None:
    """jarscan: discover test classes inside dependency archives."""
    setup_logging("DEBUG" if verbose else None)


@main.command("select")
@_artifacts_argument
@_pattern_option
@_json_option
def select_cmd(artifacts_file: Path, patterns: tuple[str, ...], as_json: bool) -> None:
    """Print the archives of the artifacts matching any pattern."""
    artifacts = _load(artifacts_file)
    try:
        files = select(artifacts, list(patterns))
    except ConfigurationError as e:
        _fail(str(e), _EXIT_CONFIG_ERROR)

    if as_json:
        click.echo(json.dumps([str(f) if f else None for f in files], indent=2))
        return
    if not files:
        click.echo("No matching artifacts.")
        return
    for f in files:
        click.echo(str(f) if f else "<not resolved>")


@main.command("scan")
@click.argument("archives", nargs=-1, type=click.Path(path_type=Path))
@_include_option
@_exclude_option
@_json_option
def scan_cmd(
    archives: tuple[Path, ...],
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    as_json: bool,
) -> None:
    """Print the test classes found in ARCHIVES (missing files are skipped)."""
    test_filter = _build_filter(includes, excludes)
    _run_scan(DependencyScanner(list(archives), test_filter), as_json)


@main.command("discover")
@_artifacts_argument
@_pattern_option
@_include_option
@_exclude_option
@_json_option
def discover_cmd(
    artifacts_file: Path,
    patterns: tuple[str, ...],
    includes: tuple[str, ...],
    excludes: tuple[str, ...],
    as_json: bool,
) -> None:
    """Select archives by pattern, then print the test classes they contain."""
    artifacts = _load(artifacts_file)
    test_filter = _build_filter(includes, excludes)
    try:
        scanner = DependencyScanner.from_artifacts(artifacts, list(patterns), test_filter)
    except ConfigurationError as e:
        _fail(str(e), _EXIT_CONFIG_ERROR)
    _run_scan(scanner, as_json)
