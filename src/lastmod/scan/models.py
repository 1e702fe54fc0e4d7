"""Data models describing scan results and report rows."""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from pathlib import Path
from typing import List, Literal, Optional

from pydantic import BaseModel, Field

DEFAULT_SENTINEL_YEARS = 100


def sentinel_timestamp(
    now: datetime | None = None, years: int = DEFAULT_SENTINEL_YEARS
) -> datetime:
    """Return the "far past" timestamp used when a subtree holds no files.

    Args:
        now: Reference time; defaults to the current UTC time.
        years: How many (365-day) years to step back from ``now``.

    Returns:
        datetime: Timezone-aware UTC timestamp.
    """

    reference = now if now is not None else datetime.now(timezone.utc)
    return reference.astimezone(timezone.utc) - timedelta(days=365 * years)


class Entry(BaseModel):
    """One immediate child of the target directory.

    Attributes:
        path: Path of the child, joined onto the target path.
        kind: Whether the child is a regular file or a directory.
    """

    path: Path
    kind: Literal["file", "directory"]


class ScanResult(BaseModel):
    """Most recently modified file found beneath a directory.

    Attributes:
        root: Directory that was scanned.
        representative_path: File bearing the latest timestamp, if any.
        representative_time: Timestamp of that file, or the sentinel.
        files_seen: Number of regular files whose timestamp was read.
        errors: Diagnostics for branches that could not be listed.
    """

    root: Path
    representative_path: Optional[Path] = None
    representative_time: datetime
    files_seen: int = 0
    errors: List[str] = Field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        """Return True when no regular file was observed."""
        return self.representative_path is None


class ResultRow(BaseModel):
    """A single line of the final report."""

    entry: Entry
    display_path: Optional[Path] = None
    timestamp: datetime


class ActivityReport(BaseModel):
    """Sorted rows for a target directory along with per-item diagnostics."""

    target: Path
    rows: List[ResultRow] = Field(default_factory=list)
    errors: List[str] = Field(default_factory=list)


__all__ = [
    "DEFAULT_SENTINEL_YEARS",
    "Entry",
    "ScanResult",
    "ResultRow",
    "ActivityReport",
    "sentinel_timestamp",
]
