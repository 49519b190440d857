# topmark:header:start
#
#   project      : ScriptKit
#   file         : test_section_cli.py
#   file_relpath : tests/cli/test_section_cli.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""CLI tests: `scriptkit section`."""

from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from scriptkit.core.exit_codes import ExitCode
from tests.cli.conftest import assert_SUCCESS, assert_USAGE_ERROR, run_cli_in

if TYPE_CHECKING:
    from pathlib import Path

pytestmark = pytest.mark.cli


def test_section_appends_and_reports_status(tmp_path: Path) -> None:
    (tmp_path / "profile").write_text("initial content\n", encoding="utf-8")

    result = run_cli_in(
        tmp_path, ["section", "profile", "# START", "# END", "new line 1", "new line 2"]
    )

    assert_SUCCESS(result)
    assert "profile: section appended" in result.output
    assert (tmp_path / "profile").read_text(encoding="utf-8") == (
        "initial content\n# START\nnew line 1\nnew line 2\n# END\n"
    )


def test_section_remove_flag(tmp_path: Path) -> None:
    (tmp_path / "profile").write_text("a\n# START\nb\n# END\nc\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["section", "-r", "profile", "# START", "# END"])

    assert_SUCCESS(result)
    assert "section removed" in result.output
    assert (tmp_path / "profile").read_text(encoding="utf-8") == "a\nc\n"


def test_section_content_may_look_like_options(tmp_path: Path) -> None:
    (tmp_path / "rc").write_text("", encoding="utf-8")

    result = run_cli_in(tmp_path, ["section", "rc", "# START", "# END", "--verbose", "-x"])

    assert_SUCCESS(result)
    assert (tmp_path / "rc").read_text(encoding="utf-8") == "# START\n--verbose\n-x\n# END\n"


def test_section_missing_target_is_success(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["section", "absent", "# START", "# END", "x"])

    assert_SUCCESS(result)
    assert "target file does not exist" in result.output
    assert not (tmp_path / "absent").exists()


def test_section_insufficient_arguments_exit_64(tmp_path: Path) -> None:
    (tmp_path / "rc").write_text("keep\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["section", "rc", "# START"])

    assert_USAGE_ERROR(result)
    assert "Insufficient arguments" in result.output
    assert (tmp_path / "rc").read_text(encoding="utf-8") == "keep\n"


def test_section_remove_with_content_exit_64(tmp_path: Path) -> None:
    result = run_cli_in(tmp_path, ["section", "--remove", "rc", "# START", "# END", "x"])

    assert result.exit_code == ExitCode.USAGE_ERROR, result.output


def test_section_dry_run_reports_without_writing(tmp_path: Path) -> None:
    (tmp_path / "rc").write_text("keep\n", encoding="utf-8")

    result = run_cli_in(tmp_path, ["--dry-run", "section", "rc", "# START", "# END", "x"])

    assert_SUCCESS(result)
    assert "rc: would add or update section '# START'" in result.output
    assert (tmp_path / "rc").read_text(encoding="utf-8") == "keep\n"


def test_section_dry_run_from_environment(tmp_path: Path) -> None:
    (tmp_path / "rc").write_text("# START\nx\n# END\n", encoding="utf-8")

    result = run_cli_in(
        tmp_path,
        ["section", "-r", "rc", "# START", "# END"],
        env={"SCRIPTKIT_DRY_RUN": "yes"},
    )

    assert_SUCCESS(result)
    assert "would remove section" in result.output
    assert (tmp_path / "rc").read_text(encoding="utf-8") == "# START\nx\n# END\n"


def test_section_accepts_undecodable_marker_bytes(tmp_path: Path) -> None:
    (tmp_path / "rc").write_bytes(b"# START \xff\nold\n# END\n")
    # How sys.argv presents a non-UTF-8 argument on POSIX
    start = b"# START \xff".decode("utf-8", "surrogateescape")

    result = run_cli_in(tmp_path, ["section", "rc", start, "# END", "y"])

    assert_SUCCESS(result)
    assert "section replaced" in result.output
    assert (tmp_path / "rc").read_bytes() == b"# START \xff\ny\n# END\n"
