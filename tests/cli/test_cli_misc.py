# topmark:header:start
#
#   project      : ScriptKit
#   file         : test_cli_misc.py
#   file_relpath : tests/cli/test_cli_misc.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `version`, `branch` and the bare group."""

from __future__ import annotations

import shutil
import subprocess
from typing import TYPE_CHECKING

import pytest

from scriptkit.constants import SCRIPTKIT_VERSION
from scriptkit.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, run_cli, run_cli_in
from tests.conftest import mark_integration

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_version_outputs_version() -> None:
    result = run_cli(["version"])

    assert_SUCCESS(result)
    assert result.output.strip() == SCRIPTKIT_VERSION


def test_group_without_command_prints_help() -> None:
    result = run_cli([])

    assert_SUCCESS(result)
    for name in ("section", "mkdir", "touch", "truncate", "run", "branch", "version"):
        assert name in result.output


def test_branch_outside_repository_fails(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["branch", str(tmp_path / "nowhere")])

    assert result.exit_code == ExitCode.FAILURE, result.output
    assert "is not inside a git repository" in result.output


@mark_integration
@pytest.mark.skipif(shutil.which("git") is None, reason="git is not installed")
def test_branch_inside_repository(tmp_path: Path) -> None:
    subprocess.run(
        ["git", "init", "-q", "-b", "trunk", str(tmp_path)], check=True, capture_output=True
    )

    result = run_cli_in(tmp_path, ["branch", "."])

    assert_SUCCESS(result)
    assert result.output.strip() == "trunk"
