# topmark:header:start
#
#   project      : ScriptKit
#   file         : test_fs.py
#   file_relpath : tests/utils/test_fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Tests for the safe filesystem helpers."""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

from scriptkit.core.errors import FileOperationError
from scriptkit.core.exit_codes import ExitCode
from scriptkit.utils.fs import safe_mkdir, safe_touch, safe_truncate

if TYPE_CHECKING:
    from pathlib import Path


def test_safe_mkdir_skips_existing(tmp_path: Path) -> None:
    (tmp_path / "a").mkdir()

    created = safe_mkdir(tmp_path / "a", tmp_path / "b")

    assert created == [tmp_path / "b"]
    assert (tmp_path / "b").is_dir()


def test_safe_mkdir_collects_all_failures(tmp_path: Path) -> None:
    bad1 = tmp_path / "x" / "1"
    bad2 = tmp_path / "y" / "2"

    with pytest.raises(FileOperationError) as excinfo:
        safe_mkdir(bad1, tmp_path / "good", bad2)

    assert excinfo.value.failed == (str(bad1), str(bad2))
    assert excinfo.value.exit_code == ExitCode.CANT_CREATE
    assert (tmp_path / "good").is_dir()


def test_safe_mkdir_parents(tmp_path: Path) -> None:
    safe_mkdir(tmp_path / "x" / "y", parents=True)

    assert (tmp_path / "x" / "y").is_dir()


def test_safe_touch_creates_and_bumps_mtime(tmp_path: Path) -> None:
    existing = tmp_path / "old"
    existing.write_text("keep", encoding="utf-8")
    os.utime(existing, (0, 0))

    safe_touch(existing, tmp_path / "new")

    assert existing.read_text(encoding="utf-8") == "keep"
    assert existing.stat().st_mtime > 0
    assert (tmp_path / "new").exists()


def test_safe_touch_reports_failures(tmp_path: Path) -> None:
    with pytest.raises(FileOperationError, match="Failed to touch the following files"):
        safe_touch(tmp_path / "ok", tmp_path / "missing" / "f")

    assert (tmp_path / "ok").exists()


def test_safe_truncate(tmp_path: Path) -> None:
    full = tmp_path / "full"
    full.write_text("data", encoding="utf-8")

    safe_truncate(full, tmp_path / "created")

    assert full.read_bytes() == b""
    assert (tmp_path / "created").read_bytes() == b""

    with pytest.raises(FileOperationError, match="truncate"):
        safe_truncate(tmp_path)  # a directory cannot be truncated


def test_empty_input_warns(caplog: pytest.LogCaptureFixture) -> None:
    safe_touch()
    safe_truncate()

    assert "No files provided to touch" in caplog.text
    assert "No files provided to truncate" in caplog.text
