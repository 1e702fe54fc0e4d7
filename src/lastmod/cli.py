"""Command line interface for lastmod."""

from __future__ import annotations

import logging
import os
from datetime import timezone
from pathlib import Path
from typing import Any, NoReturn

import click
from rich.console import Console

from lastmod.config import ConfigError, LastmodConfig, load_config
from lastmod.errors import ScanError, TargetError, TargetNotFoundError
from lastmod.logging_config import configure_logging
from lastmod.scan import ActivityReport, RecentActivityAggregator, ResultRow, SubtreeScanner

LOGGER = logging.getLogger(__name__)

TIMESTAMP_FORMAT = "%Y/%m/%d %H:%M:%S"

console = Console()


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    original: Exception | None = None,
) -> NoReturn:
    """Report a fatal target error on stdout and exit with status 1.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier used in JSON mode.
        json_output: Indicates whether JSON mode is active.
        original: Exception that triggered the error, for logging.

    Raises:
        SystemExit: Always, with exit status 1.
    """

    if original is not None:
        LOGGER.debug("Aborting: %r", original)
    if json_output:
        console.print_json(data={"error": {"code": code, "message": message}}, ensure_ascii=True)
    else:
        click.echo(f"Error: {message}")
    raise SystemExit(1)


def display_path(path: str | Path) -> str:
    """Return ``path`` (or a message embedding one) as printable text.

    Bytes that are not valid UTF-8 become U+FFFD; every other character,
    control characters included, is kept as is.
    """

    return os.fsencode(path).decode("utf-8", "replace")


def format_row(row: ResultRow) -> str:
    """Render a row as ``<UTC timestamp> <display path>``.

    Rows for directories without any file have no display path; the path
    column is left empty for them.
    """

    stamp = row.timestamp.astimezone(timezone.utc).strftime(TIMESTAMP_FORMAT)
    path = "" if row.display_path is None else display_path(row.display_path)
    return f"{stamp} {path}"


def _emit_report(report: ActivityReport, config: LastmodConfig) -> None:
    if config.output.format == "json":
        console.print_json(data=report.model_dump(mode="json"), ensure_ascii=True)
        return

    for row in report.rows:
        click.echo(format_row(row))


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.argument("target", required=False, default=".", type=click.Path(path_type=Path))
@click.option("-v", "--verbose", is_flag=True, help="Verbose output.")
@click.option("--max-depth", type=int, help="Deepest level scanned below each subdirectory.")
@click.option(
    "--follow-symlinks",
    is_flag=True,
    help="Descend into symlinked directories (each directory is visited once).",
)
@click.option("--json", "json_output", is_flag=True, help="Emit the report as JSON.")
@click.version_option(package_name="lastmod")
def cli(
    target: Path,
    verbose: bool,
    max_depth: int | None,
    follow_symlinks: bool,
    json_output: bool,
) -> None:
    """Show recently modified files and directories under TARGET.

    Each immediate child of TARGET (default: the current directory) is listed
    with its latest modification time, newest first. Directories report the
    most recently modified file anywhere beneath them.

    Args:
        target: Directory whose immediate children are reported on.
        verbose: Enable debug diagnostics on stderr.
        max_depth: Override for the recursive scan depth limit.
        follow_symlinks: Whether symlinked directories are descended into.
        json_output: If True, emit the report as JSON.

    Raises:
        click.ClickException: If options are invalid or TARGET cannot be listed.
    """

    overrides: dict[str, Any] = {
        "scan.max_depth": max_depth,
        "scan.follow_symlinks": True if follow_symlinks else None,
        "output.format": "json" if json_output else None,
        "logging.verbose": True if verbose else None,
    }
    try:
        config = load_config(cli_overrides=overrides)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    configure_logging(config.logging)

    scanner = SubtreeScanner(
        max_depth=config.scan.max_depth,
        follow_symlinks=config.scan.follow_symlinks,
    )
    aggregator = RecentActivityAggregator(scanner)

    try:
        report = aggregator.aggregate(target)
    except TargetError as exc:
        code = "target_not_found" if isinstance(exc, TargetNotFoundError) else "not_a_directory"
        message = display_path(str(exc))
        _handle_cli_error(message, code=code, json_output=json_output, original=exc)
    except ScanError as exc:
        raise click.ClickException(display_path(str(exc))) from exc

    _emit_report(report, config)
    LOGGER.info(
        "Reported %d entr%s under %s (%d diagnostic(s))",
        len(report.rows),
        "y" if len(report.rows) == 1 else "ies",
        target,
        len(report.errors),
    )


def main() -> None:
    """Invoke the Click CLI as the console script entry point.

    Returns:
        None: This function is invoked for its side effects.
    """
    cli()


if __name__ == "__main__":
    main()
