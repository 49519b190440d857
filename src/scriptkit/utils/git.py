# topmark:header:start
#
#   project      : ScriptKit
#   file         : git.py
#   file_relpath : src/scriptkit/utils/git.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Git helpers.

Only read-only lookups live here; ScriptKit does not pull, push or sync
repositories.
"""

from __future__ import annotations

import os
import subprocess
from pathlib import Path

from scriptkit.config.logging import get_logger
from scriptkit.constants import DETACHED_HEAD
from scriptkit.core.errors import UsageError

logger = get_logger(__name__)


def _git(directory: Path, *args: str) -> subprocess.CompletedProcess[str]:
    return subprocess.run(
        ["git", *args],
        cwd=directory,
        capture_output=True,
        text=True,
        check=False,
    )


def current_branch(target_dir: str | os.PathLike[str]) -> str | None:
    """Return the branch checked out in ``target_dir``.

    Args:
        target_dir (str | os.PathLike[str]): A directory inside a git work tree.

    Returns:
        str | None: The short branch name (e.g. ``"main"``, ``"feature/login"``),
        ``"detached head"`` when HEAD is detached, or None if the directory does not
        exist, is not inside a git work tree, or git is not installed.

    Raises:
        UsageError: If ``target_dir`` is empty.
    """
    if not os.fspath(target_dir):
        logger.error("Usage: current_branch <directory>")
        raise UsageError("current_branch: No directory provided.")

    directory = Path(target_dir)
    if not directory.is_dir():
        logger.debug("'%s' is not a directory", directory)
        return None

    try:
        inside = _git(directory, "rev-parse", "--is-inside-work-tree")
    except FileNotFoundError:
        logger.warning("git is not installed")
        return None
    if inside.returncode != 0 or inside.stdout.strip() != "true":
        logger.debug("'%s' is not inside a git work tree", directory)
        return None

    # symbolic-ref distinguishes a named branch from a detached HEAD
    ref = _git(directory, "symbolic-ref", "--short", "-q", "HEAD")
    if ref.returncode == 0:
        return ref.stdout.strip()
    return DETACHED_HEAD
