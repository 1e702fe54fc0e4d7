"""Shared fixtures for building directory trees with fixed modification times."""

import os
from datetime import datetime, timezone
from pathlib import Path
from typing import Callable

import pytest

BASE_MTIME = 1_700_000_000

Touch = Callable[..., Path]


@pytest.fixture
def touch() -> Touch:
    """Return a helper that creates a file and pins its mtime to BASE_MTIME + offset."""

    def _touch(path: Path, offset: int = 0, content: str = "x") -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        stamp = BASE_MTIME + offset
        os.utime(path, (stamp, stamp))
        return path

    return _touch


@pytest.fixture
def utc_at() -> Callable[[int], datetime]:
    """Return a helper mapping an offset to the UTC datetime `touch` would assign."""

    def _utc_at(offset: int = 0) -> datetime:
        return datetime.fromtimestamp(BASE_MTIME + offset, tz=timezone.utc)

    return _utc_at


@pytest.fixture
def far_future() -> Callable[[Path], Path]:
    """Return a helper that pushes a file's mtime past the year ``datetime`` supports."""

    def _far_future(path: Path) -> Path:
        stamp = 1e12
        try:
            os.utime(path, (stamp, stamp))
        except (OSError, OverflowError, ValueError):
            pytest.skip("filesystem rejects far-future timestamps")
        if path.stat().st_mtime < stamp:
            pytest.skip("filesystem clamps far-future timestamps")
        return path

    return _far_future
