# topmark:header:start
#
#   project      : ScriptKit
#   file         : run.py
#   file_relpath : src/scriptkit/utils/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Command execution with dry-run support.

Commands are executed without a shell, so arguments containing spaces or shell
metacharacters are passed through verbatim and nothing is ever evaluated.

In dry-run mode (``dry_run=True``, or ``SCRIPTKIT_DRY_RUN``/``DRY_RUN`` set in the
environment) the command is only logged, in a form that can be pasted back into
a shell.

Examples:
    ```python
    run(["ls", "-l", "/tmp"])                    # raises CommandFailedError on failure
    if run(["grep", "x", "/etc/hosts"], check=False):
        ...                                      # non-zero: not found, carry on
    ```
"""

from __future__ import annotations

import shlex
import subprocess
from typing import TYPE_CHECKING

from scriptkit.config.logging import get_logger
from scriptkit.config.model import RuntimeConfig
from scriptkit.core.errors import CommandFailedError, UsageError

if TYPE_CHECKING:
    from collections.abc import Sequence

logger = get_logger(__name__)


def format_command(command: Sequence[str]) -> str:
    """Return ``command`` rendered as an unambiguous, shell-quoted string."""
    return shlex.join(command)


def run(
    command: Sequence[str],
    *,
    check: bool = True,
    dry_run: bool | None = None,
) -> int:
    """Execute ``command`` and return its exit status.

    Args:
        command (Sequence[str]): Program and arguments.
        check (bool): Raise on a non-zero exit status (default). When False, the
            failure is logged as a warning and the status returned.
        dry_run (bool | None): Only log the command. ``None`` consults the
            environment via [`RuntimeConfig.from_env`][scriptkit.config.model.RuntimeConfig.from_env].

    Returns:
        int: The exit status (0 in dry-run mode).

    Raises:
        UsageError: If ``command`` is empty.
        CommandFailedError: If the command fails (or cannot be started) and ``check`` is True.
    """
    if not command:
        logger.error("run: No command provided.")
        raise UsageError("run: No command provided.")
    argv = list(command)

    if dry_run is None:
        dry_run = RuntimeConfig.from_env().dry_run
    if dry_run:
        logger.info("[DRY-RUN] Would run: %s", format_command(argv))
        return 0

    logger.debug("Running: %s", format_command(argv))
    try:
        returncode = subprocess.run(argv, check=False).returncode
    except OSError as exc:
        # Same status a shell reports for a command it cannot find/execute
        returncode = 127 if isinstance(exc, FileNotFoundError) else 126
        logger.debug("Could not start %s: %s", argv[0], exc)

    if returncode:
        if check:
            message = f"Command failed with exit code {returncode}: {format_command(argv)}"
            logger.error(message)
            raise CommandFailedError(message, command=argv, returncode=returncode)
        logger.warning("Command failed with exit code %d (continuing).", returncode)
    return returncode
