"""Tests for the recursive subtree scanner."""

import os
from datetime import datetime, timezone
from pathlib import Path

import pytest

import lastmod.scan.scanner as scanner_module
from lastmod.scan import ScanResult, SubtreeScanner, scan_subtree, sentinel_timestamp

SENTINEL = datetime(1920, 1, 1, tzinfo=timezone.utc)

requires_symlinks = pytest.mark.skipif(not hasattr(os, "symlink"), reason="symlinks unavailable")


def test_single_nested_file_is_reported(tmp_path: Path, touch, utc_at) -> None:
    nested = touch(tmp_path / "a" / "b" / "deep.txt", offset=5)

    result = scan_subtree(tmp_path, sentinel=SENTINEL)

    assert result.representative_path == nested
    assert result.representative_time == utc_at(5)
    assert result.files_seen == 1
    assert not result.is_empty


def test_latest_file_wins_across_branches(tmp_path: Path, touch) -> None:
    touch(tmp_path / "top.txt", offset=10)
    newest = touch(tmp_path / "x" / "y" / "new.txt", offset=40)
    touch(tmp_path / "z" / "old.txt", offset=1)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == newest
    assert result.files_seen == 3


def test_subtree_without_files_returns_sentinel(tmp_path: Path) -> None:
    (tmp_path / "empty" / "deeper").mkdir(parents=True)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.is_empty
    assert result.representative_path is None
    assert result.representative_time == SENTINEL
    assert result.files_seen == 0


def test_equal_timestamps_keep_first_encountered(tmp_path: Path, touch) -> None:
    first = touch(tmp_path / "a.txt", offset=3)
    touch(tmp_path / "b.txt", offset=3)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == first


def test_max_depth_bounds_traversal(tmp_path: Path, touch) -> None:
    deep = touch(tmp_path / "one" / "two" / "three.txt", offset=2)

    assert SubtreeScanner(max_depth=2, sentinel=SENTINEL).scan(tmp_path).is_empty
    assert SubtreeScanner(max_depth=3, sentinel=SENTINEL).scan(tmp_path).representative_path == deep


def test_max_depth_must_be_positive() -> None:
    with pytest.raises(ValueError):
        SubtreeScanner(max_depth=0)


def test_unreadable_file_is_skipped(
    tmp_path: Path, touch, monkeypatch: pytest.MonkeyPatch
) -> None:
    broken = touch(tmp_path / "broken.txt", offset=99)
    fine = touch(tmp_path / "fine.txt", offset=1)
    original = scanner_module.read_modified_time

    def _read(path: Path) -> datetime:
        if path == broken:
            raise PermissionError("denied")
        return original(path)

    monkeypatch.setattr(scanner_module, "read_modified_time", _read)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == fine
    assert result.files_seen == 1
    assert result.errors == []


def test_unlistable_directory_is_skipped_and_reported(
    tmp_path: Path, touch, monkeypatch: pytest.MonkeyPatch
) -> None:
    touch(tmp_path / "locked" / "hidden.txt", offset=50)
    visible = touch(tmp_path / "open" / "seen.txt", offset=5)
    original = scanner_module.list_directory

    def _list(directory: Path) -> list[Path]:
        if directory.name == "locked":
            raise PermissionError(13, "Permission denied")
        return original(directory)

    monkeypatch.setattr(scanner_module, "list_directory", _list)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == visible
    assert len(result.errors) == 1
    assert "locked" in result.errors[0]


@requires_symlinks
def test_symlinked_directories_are_not_followed_by_default(tmp_path: Path, touch) -> None:
    outside = tmp_path / "outside"
    touch(outside / "far.txt", offset=7)
    root = tmp_path / "root"
    root.mkdir()
    os.symlink(outside, root / "link", target_is_directory=True)

    assert SubtreeScanner(sentinel=SENTINEL).scan(root).is_empty

    followed = SubtreeScanner(follow_symlinks=True, sentinel=SENTINEL).scan(root)
    assert followed.representative_path == root / "link" / "far.txt"


@requires_symlinks
def test_symlink_cycle_is_entered_once(tmp_path: Path, touch) -> None:
    root = tmp_path / "root"
    only = touch(root / "inner" / "file.txt", offset=4)
    os.symlink(root, root / "inner" / "loop", target_is_directory=True)

    result = SubtreeScanner(follow_symlinks=True, sentinel=SENTINEL).scan(root)

    assert result.representative_path == only
    assert result.files_seen == 1


def test_sentinel_is_a_century_before_now() -> None:
    now = datetime(2026, 10, 19, 12, 0, tzinfo=timezone.utc)

    value = sentinel_timestamp(now)

    assert value.tzinfo is not None
    assert (now - value).days == 365 * 100


def test_scan_result_model_defaults(tmp_path: Path) -> None:
    result = ScanResult(root=tmp_path, representative_time=SENTINEL)

    assert result.is_empty
    assert result.errors == []


def test_out_of_range_mtime_raises_os_error(tmp_path: Path, touch, far_future) -> None:
    odd = far_future(touch(tmp_path / "future.txt"))

    with pytest.raises(OSError, match="out of range"):
        scanner_module.read_modified_time(odd)


def test_out_of_range_mtime_is_skipped(tmp_path: Path, touch, far_future) -> None:
    far_future(touch(tmp_path / "sub" / "future.txt"))
    normal = touch(tmp_path / "sub" / "normal.txt", offset=6)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == normal
    assert result.files_seen == 1


def test_sibling_directories_are_walked_in_name_order(tmp_path: Path, touch) -> None:
    first = touch(tmp_path / "a" / "x.txt", offset=8)
    touch(tmp_path / "b" / "y.txt", offset=8)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == first


def test_files_are_handled_before_subdirectories(tmp_path: Path, touch) -> None:
    top = touch(tmp_path / "z.txt", offset=8)
    touch(tmp_path / "a" / "x.txt", offset=8)

    result = SubtreeScanner(sentinel=SENTINEL).scan(tmp_path)

    assert result.representative_path == top


@requires_symlinks
def test_symlink_to_file_counts_as_file(tmp_path: Path, touch, utc_at) -> None:
    target = touch(tmp_path / "outside" / "target.txt", offset=12)
    root = tmp_path / "root"
    root.mkdir()
    os.symlink(target, root / "link.txt")

    result = SubtreeScanner(sentinel=SENTINEL).scan(root)

    assert result.representative_path == root / "link.txt"
    assert result.representative_time == utc_at(12)
    assert result.files_seen == 1
