"""CLI interface for diskcull."""

import logging
import sys
from typing import Optional

import typer

from diskcull import __version__
from diskcull.caches import describe_cache_roots, scan_caches
from diskcull.config import (
    DEFAULT_CACHE_THRESHOLD,
    DEFAULT_LIST_LIMIT,
    DEFAULT_SCAN_ROOT,
    DEFAULT_SIZE_THRESHOLD,
)
from diskcull.display import (
    console,
    scanning_status,
    show_cache_roots,
    show_scan_error,
    show_scan_found,
    show_scan_result,
    show_workflow_outcome,
)
from diskcull.menu import ConsolePrompts, start_menu
from diskcull.models import ScanConfig, ScanResult
from diskcull.scanner import scan
from diskcull.units import parse_size
from diskcull.workflow import review_and_delete

# Create Typer app
app = typer.Typer(
    name="diskcull",
    help="Find large files, folders and caches, and delete the ones you pick",
    add_completion=False,
    pretty_exceptions_enable=False,
)


def _setup_logging(verbosity: int) -> None:
    level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG
    logging.basicConfig(level=level, format="%(levelname)s: %(message)s")


def _parse_threshold(value: Optional[str], default: int) -> int:
    if value is None:
        return default
    try:
        return parse_size(value)
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--threshold")


def version_callback(value: bool) -> None:
    """Print version and exit."""
    if value:
        console.print(f"diskcull version {__version__}")
        raise typer.Exit()


@app.callback(invoke_without_command=True)
def main(
    ctx: typer.Context,
    version: bool = typer.Option(
        None,
        "--version",
        help="Show version and exit.",
        callback=version_callback,
        is_eager=True,
    ),
    verbose: int = typer.Option(
        0,
        "--verbose",
        "-v",
        count=True,
        help="Increase verbosity (-v info, -vv debug).",
    ),
) -> None:
    """diskcull - large file and cache cleanup."""
    _setup_logging(verbose)

    # If no command specified, launch menu with defaults
    if ctx.invoked_subcommand is None:
        start_menu(console=console)


@app.command()
def menu(
    dry_run: bool = typer.Option(False, "--dry-run", help="Simulate deletion without deleting"),
    threshold: Optional[str] = typer.Option(
        None, "--threshold", "-t", help="Large-file threshold, e.g. 1GiB or 500MB"
    ),
    cache_threshold: Optional[str] = typer.Option(
        None, "--cache-threshold", help="Cache-item threshold, e.g. 512MB"
    ),
    limit: int = typer.Option(
        DEFAULT_LIST_LIMIT, "--limit", "-n", min=1, help="Maximum number of large items to collect"
    ),
) -> None:
    """Interactive menu-driven cleanup (default).

    This is the default command when running 'diskcull' without arguments.
    """
    start_menu(
        console=console,
        dry_run=dry_run,
        size_threshold=_parse_threshold(threshold, DEFAULT_SIZE_THRESHOLD),
        cache_threshold=_parse_threshold(cache_threshold, DEFAULT_CACHE_THRESHOLD),
        list_limit=limit,
    )


def _review_or_list(result: ScanResult, list_only: bool, dry_run: bool) -> None:
    if list_only:
        show_scan_result(result)
        return

    report = review_and_delete(result, ConsolePrompts(console=console, dry_run=dry_run), dry_run=dry_run)
    show_workflow_outcome(report)


@app.command()
def large(
    directory: str = typer.Argument(DEFAULT_SCAN_ROOT, help="Directory to scan"),
    threshold: Optional[str] = typer.Option(
        None, "--threshold", "-t", help="Minimum size, e.g. 1GiB or 500MB (default 1GiB)"
    ),
    limit: int = typer.Option(
        DEFAULT_LIST_LIMIT, "--limit", "-n", min=1, help="Stop after this many items"
    ),
    list_only: bool = typer.Option(False, "--list", help="Only list results, never delete"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Simulate deletion without deleting"),
) -> None:
    """Scan a directory for large files and folders."""
    config = ScanConfig(
        root_directory=directory,
        size_threshold=_parse_threshold(threshold, DEFAULT_SIZE_THRESHOLD),
        list_limit=limit,
    )

    with scanning_status("Scanning for large files..."):
        result = scan(config)

    if not result.ok:
        show_scan_error(result)
        raise typer.Exit(1)

    show_scan_found(result)
    _review_or_list(result, list_only, dry_run)


@app.command()
def caches(
    threshold: Optional[str] = typer.Option(
        None, "--threshold", "-t", help="Minimum size, e.g. 512MB (default 512MB)"
    ),
    list_only: bool = typer.Option(False, "--list", help="Only list results, never delete"),
    dry_run: bool = typer.Option(False, "--dry-run", help="Simulate deletion without deleting"),
) -> None:
    """Scan the well-known cache directories."""
    size_threshold = _parse_threshold(threshold, DEFAULT_CACHE_THRESHOLD)

    with scanning_status("Scanning for cache files..."):
        result = scan_caches(size_threshold)

    show_scan_found(result, label="cache items")
    _review_or_list(result, list_only, dry_run)


@app.command()
def roots() -> None:
    """Show the cache locations that are searched."""
    show_cache_roots(describe_cache_roots())


def run() -> None:
    """Console-script entry point."""
    try:
        app()
    except Exception as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


if __name__ == "__main__":
    run()
