# topmark:header:start
#
#   project      : ScriptKit
#   file         : fs.py
#   file_relpath : src/scriptkit/utils/fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Safe filesystem helpers.

Every helper processes *all* given paths, collects the ones it failed on and
raises a single [`FileOperationError`][scriptkit.core.errors.FileOperationError]
listing them at the end.
"""

from __future__ import annotations

import os
from pathlib import Path

from scriptkit.config.logging import get_logger
from scriptkit.core.errors import FileOperationError

logger = get_logger(__name__)

StrPath = str | os.PathLike[str]


def _raise_for_failures(action: str, failed: list[Path]) -> None:
    if failed:
        message = f"Failed to {action}: {' '.join(str(p) for p in failed)}"
        logger.error(message)
        raise FileOperationError(message, failed=failed)


def safe_mkdir(*dirs: StrPath, parents: bool = False) -> list[Path]:
    """Create directories, skipping those that already exist.

    Args:
        *dirs (StrPath): Directories to create.
        parents (bool): Also create missing parent directories (``mkdir -p``).

    Returns:
        list[Path]: The directories that were actually created.

    Raises:
        FileOperationError: If any directory could not be created; all others are still
            attempted.
    """
    created: list[Path] = []
    failed: list[Path] = []
    for d in map(Path, dirs):
        if d.is_dir():
            continue
        try:
            d.mkdir(parents=parents)
        except OSError as exc:
            logger.debug("mkdir %s failed: %s", d, exc)
            failed.append(d)
        else:
            created.append(d)
    _raise_for_failures("create directories", failed)
    return created


def safe_touch(*files: StrPath) -> None:
    """Create files or update their modification time.

    Raises:
        FileOperationError: Listing every file that could not be touched.
    """
    if not files:
        logger.warning("safe_touch: No files provided to touch.")
        return
    failed: list[Path] = []
    for f in map(Path, files):
        try:
            f.touch()
        except OSError as exc:
            logger.debug("touch %s failed: %s", f, exc)
            failed.append(f)
    _raise_for_failures("touch the following files", failed)


def safe_truncate(*files: StrPath) -> None:
    """Truncate files to zero bytes, creating them if needed.

    Raises:
        FileOperationError: Listing every file that could not be truncated.
    """
    if not files:
        logger.warning("safe_truncate: No files provided to truncate.")
        return
    failed: list[Path] = []
    for f in map(Path, files):
        try:
            with open(f, "wb"):
                pass
        except OSError as exc:
            logger.debug("truncate %s failed: %s", f, exc)
            failed.append(f)
    _raise_for_failures("truncate the following files", failed)
