"""Recursive subtree scanning for the most recently modified file."""

from __future__ import annotations

import logging
from datetime import datetime, timezone
from pathlib import Path
from typing import List, Optional, Set, Tuple

from .models import ScanResult, sentinel_timestamp

LOGGER = logging.getLogger(__name__)

DEFAULT_MAX_DEPTH = 100


def read_modified_time(path: Path) -> datetime:
    """Return the modification time of ``path`` as a UTC datetime.

    Raises:
        OSError: If the file metadata cannot be read or its timestamp lies
            outside the range ``datetime`` can represent.
    """
    stat = path.stat()
    try:
        return datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc)
    except (OverflowError, ValueError) as exc:
        raise OSError(f"modification time of {path} is out of range: {exc}") from exc


def list_directory(directory: Path) -> List[Path]:
    """Return the entries of ``directory`` in name order."""
    return sorted(directory.iterdir(), key=lambda child: child.name)


class SubtreeScanner:
    """Find the most recently modified regular file beneath a directory."""

    def __init__(
        self,
        *,
        max_depth: int = DEFAULT_MAX_DEPTH,
        follow_symlinks: bool = False,
        sentinel: datetime | None = None,
    ) -> None:
        """Initialize the scanner.

        Args:
            max_depth: Deepest level (relative to the scanned root) that is visited.
            follow_symlinks: Whether symlinked directories are descended into.
            sentinel: Timestamp reported for subtrees without files; defaults to
                one hundred years before the scanner is created.
        """
        if max_depth < 1:
            raise ValueError("max_depth must be at least 1")
        self.max_depth = max_depth
        self.follow_symlinks = follow_symlinks
        self.sentinel = sentinel if sentinel is not None else sentinel_timestamp()

    def scan(self, root: Path) -> ScanResult:
        """Return the latest file under ``root``, excluding ``root`` itself.

        Branches that cannot be listed are skipped and reported through
        ``ScanResult.errors``; files whose timestamp cannot be read are skipped
        silently.
        """
        best_path: Optional[Path] = None
        best_time = self.sentinel
        files_seen = 0
        errors: list[str] = []

        visited: Set[Tuple[int, int]] = set()
        if self.follow_symlinks:
            identity = self._identity(root)
            if identity is not None:
                visited.add(identity)

        stack: list[Tuple[Path, int]] = [(root, 0)]
        while stack:
            directory, depth = stack.pop()
            try:
                children = list_directory(directory)
            except OSError as exc:
                message = f"{directory}: cannot list directory ({exc.strerror or exc})"
                LOGGER.warning("Skipping unreadable directory %s: %s", directory, exc)
                errors.append(message)
                continue

            child_depth = depth + 1
            subdirectories: list[Path] = []
            for child in children:
                if child.is_file():
                    try:
                        modified = read_modified_time(child)
                    except OSError as exc:
                        LOGGER.debug("Cannot read modification time of %s: %s", child, exc)
                        continue
                    files_seen += 1
                    if modified > best_time:
                        best_time = modified
                        best_path = child
                elif child.is_dir():
                    if child_depth >= self.max_depth:
                        continue
                    if self._should_descend(child, visited):
                        subdirectories.append(child)
            stack.extend((child, child_depth) for child in reversed(subdirectories))

        LOGGER.debug(
            "Scanned %s: %d file(s), latest %s",
            root,
            files_seen,
            best_path if best_path is not None else "<none>",
        )
        return ScanResult(
            root=root,
            representative_path=best_path,
            representative_time=best_time,
            files_seen=files_seen,
            errors=errors,
        )

    # Internal helpers -------------------------------------------------

    def _should_descend(self, directory: Path, visited: Set[Tuple[int, int]]) -> bool:
        if not self.follow_symlinks:
            return not directory.is_symlink()
        identity = self._identity(directory)
        if identity is None or identity in visited:
            LOGGER.debug("Not revisiting directory %s", directory)
            return False
        visited.add(identity)
        return True

    def _identity(self, directory: Path) -> Tuple[int, int] | None:
        try:
            stat = directory.stat()
        except OSError as exc:
            LOGGER.debug("Cannot stat directory %s: %s", directory, exc)
            return None
        return stat.st_dev, stat.st_ino


def scan_subtree(
    root: Path,
    *,
    max_depth: int = DEFAULT_MAX_DEPTH,
    follow_symlinks: bool = False,
    sentinel: datetime | None = None,
) -> ScanResult:
    """Scan ``root`` with a one-off :class:`SubtreeScanner`."""
    scanner = SubtreeScanner(max_depth=max_depth, follow_symlinks=follow_symlinks, sentinel=sentinel)
    return scanner.scan(root)


__all__ = [
    "DEFAULT_MAX_DEPTH",
    "SubtreeScanner",
    "list_directory",
    "read_modified_time",
    "scan_subtree",
]
