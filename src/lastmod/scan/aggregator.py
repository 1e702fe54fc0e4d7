"""Combine per-child timestamps of a target directory into a sorted report."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from lastmod.errors import ScanError, TargetNotDirectoryError, TargetNotFoundError

from .models import ActivityReport, Entry, ResultRow
from .scanner import SubtreeScanner, read_modified_time

LOGGER = logging.getLogger(__name__)


def validate_target(target: Path) -> Path:
    """Ensure ``target`` exists and is a directory.

    Args:
        target: Path supplied by the caller.

    Returns:
        Path: The same path, once validated.

    Raises:
        TargetNotFoundError: If the path does not exist.
        TargetNotDirectoryError: If the path is not a directory.
    """

    if not target.exists():
        raise TargetNotFoundError(f"Directory '{target}' does not exist.")
    if not target.is_dir():
        raise TargetNotDirectoryError(f"'{target}' is not a directory.")
    return target


def sort_rows(rows: Iterable[ResultRow]) -> List[ResultRow]:
    """Order rows newest-first, breaking ties by display path."""
    ordered = sorted(rows, key=lambda row: str(row.display_path or ""))
    ordered.sort(key=lambda row: row.timestamp, reverse=True)
    return ordered


class RecentActivityAggregator:
    """Report the latest modification time for each child of a directory."""

    def __init__(self, scanner: SubtreeScanner | None = None) -> None:
        self.scanner = scanner or SubtreeScanner()

    def aggregate(self, target: Path) -> ActivityReport:
        """Validate ``target`` and build its sorted report.

        Raises:
            TargetError: If ``target`` is missing or not a directory.
            ScanError: If the children of ``target`` cannot be listed.
        """
        validate_target(target)
        report = ActivityReport(target=target)

        try:
            children = list(target.iterdir())
        except OSError as exc:
            raise ScanError(f"Cannot list '{target}': {exc}") from exc

        rows: list[ResultRow] = []
        for child in children:
            if child.is_file():
                try:
                    modified = read_modified_time(child)
                except OSError as exc:
                    LOGGER.warning("Can't get modification time of %s: %s", child, exc)
                    report.errors.append(f"{child}: cannot read modification time")
                    continue
                rows.append(
                    ResultRow(
                        entry=Entry(path=child, kind="file"),
                        display_path=child,
                        timestamp=modified,
                    )
                )
            elif child.is_dir():
                result = self.scanner.scan(child)
                report.errors.extend(result.errors)
                rows.append(
                    ResultRow(
                        entry=Entry(path=child, kind="directory"),
                        display_path=result.representative_path,
                        timestamp=result.representative_time,
                    )
                )
            else:
                LOGGER.debug("Ignoring %s: neither a file nor a directory", child)

        report.rows = sort_rows(rows)
        return report


def aggregate(target: Path, scanner: SubtreeScanner | None = None) -> ActivityReport:
    """Build the report for ``target`` with an optional preconfigured scanner."""
    return RecentActivityAggregator(scanner).aggregate(target)


__all__ = ["RecentActivityAggregator", "aggregate", "sort_rows", "validate_target"]
