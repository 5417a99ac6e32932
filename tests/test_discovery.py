"""Unit tests for recent file discovery."""

import os
from pathlib import Path

from CodeWall.core import get_recent_files, scan_directory


def _touch(path: Path, mtime: float) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text("x = 1\n", encoding="utf-8")
    os.utime(path, (mtime, mtime))


def test_recent_files_are_sorted_newest_first(tmp_path: Path) -> None:
    _touch(tmp_path / "old.py", 1_000)
    _touch(tmp_path / "src" / "new.js", 3_000)
    _touch(tmp_path / "src" / "deep" / "mid.java", 2_000)

    files = get_recent_files(str(tmp_path), count=5)
    assert [f.name for f in files] == ["new.js", "mid.java", "old.py"]
    assert files[0].path == str(tmp_path / "src" / "new.js")
    assert files[0].size == len("x = 1\n")


def test_count_limits_result(tmp_path: Path) -> None:
    for i in range(6):
        _touch(tmp_path / f"f{i}.ts", 1_000 + i)
    files = get_recent_files(str(tmp_path), count=2)
    assert [f.name for f in files] == ["f5.ts", "f4.ts"]


def test_skips_ignored_dirs_and_extensions(tmp_path: Path) -> None:
    _touch(tmp_path / "keep.rs", 1_000)
    _touch(tmp_path / "notes.txt", 5_000)
    _touch(tmp_path / "node_modules" / "lib.js", 5_000)
    _touch(tmp_path / ".git" / "hook.py", 5_000)
    _touch(tmp_path / "pkg" / "__pycache__" / "mod.py", 5_000)

    names = [f.name for f in scan_directory(str(tmp_path))]
    assert names == ["keep.rs"]


def test_missing_root_yields_nothing(tmp_path: Path) -> None:
    assert get_recent_files(str(tmp_path / "missing")) == []
