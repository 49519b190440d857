# topmark:header:start
#
#   project      : ScriptKit
#   file         : test_run_command.py
#   file_relpath : tests/cli/test_run_command.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `scriptkit run`."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING

import pytest

from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_run_success(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["run", "--", sys.executable, "-c", "open('ran', 'w')"])

    assert_SUCCESS(result)
    assert (tmp_path / "ran").exists()


def test_run_propagates_child_exit_code(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["run", sys.executable, "-c", "raise SystemExit(3)"])

    assert result.exit_code == 3, result.output
    assert "Command failed with exit code 3" in result.output


def test_run_no_check_continues(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["run", "--no-check", sys.executable, "-c", "raise SystemExit(5)"]
    )

    assert_SUCCESS(result)
    assert "continuing" in result.output


def test_run_dry_run_spawns_nothing(tmp_path: Path) -> None:
    result = run_cli_in(
        tmp_path, ["--dry-run", "run", sys.executable, "-c", "open('ran', 'w')"]
    )

    assert_SUCCESS(result)
    assert "[DRY-RUN] Would run:" in result.output
    assert not (tmp_path / "ran").exists()


def test_run_without_command_is_usage_error(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["run"])

    assert_USAGE_ERROR(result)
    assert "No command provided" in result.output
