# topmark:header:start
#
#   project      : ScriptKit
#   file         : errors.py
#   file_relpath : src/scriptkit/core/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exception taxonomy for ScriptKit.

Usage:
    Library functions raise these exceptions to signal failures with standardized
    messages and exit codes. They are framework-agnostic; the CLI converts them into
    Click exceptions (see `scriptkit.cli.errors`).

All failures are terminal for the current call: nothing in ScriptKit retries on its
own, the caller decides whether to try again.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from scriptkit.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Sequence
    from os import PathLike


class ScriptkitError(Exception):
    """Base class for all ScriptKit errors.

    Attributes:
        message (str): Human-readable description of the failure.
        path (str | None): The file or directory the failure relates to, if any.
    """

    exit_code: int = ExitCode.FAILURE

    def __init__(self, message: str, *, path: str | PathLike[str] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = None if path is None else str(path)


class UsageError(ScriptkitError):
    """Error for invalid invocations (missing or conflicting arguments)."""

    exit_code = ExitCode.USAGE_ERROR


# --- Section editor ---------------------------------------------------------


class SectionEditError(ScriptkitError):
    """Base class for failures of the section editor.

    Whenever one of these is raised the target file is left untouched.
    """


class InsufficientArgumentsError(SectionEditError, UsageError):
    """Missing target/markers, or content supplied together with the remove flag.

    Detected before any file I/O.
    """

    exit_code = ExitCode.USAGE_ERROR


class TempFileCreationError(SectionEditError):
    """The scratch buffer could not be created next to the target."""

    exit_code = ExitCode.CANT_CREATE


class SectionProcessingError(SectionEditError):
    """The scan-and-rewrite pass over an existing section failed."""

    exit_code = ExitCode.IO_ERROR


class AppendError(SectionEditError):
    """Appending a new section to the copy of the target failed."""

    exit_code = ExitCode.IO_ERROR


# --- Assertions ---------------------------------------------------------------


class AssertionFailedError(ScriptkitError):
    """A value, argument count or environment assertion did not hold."""

    exit_code = ExitCode.FAILURE


class MissingFileError(AssertionFailedError):
    """One or more required files or directories do not exist."""

    exit_code = ExitCode.FILE_NOT_FOUND


class MissingCommandError(AssertionFailedError):
    """One or more required commands are not on the PATH."""

    exit_code = ExitCode.UNAVAILABLE


# --- Filesystem and processes ----------------------------------------------------


class FileOperationError(ScriptkitError):
    """A batch filesystem operation failed for at least one path.

    Attributes:
        failed (tuple[str, ...]): The paths the operation failed for.
    """

    exit_code = ExitCode.CANT_CREATE

    def __init__(self, message: str, *, failed: Sequence[str | PathLike[str]]) -> None:
        super().__init__(message)
        self.failed: tuple[str, ...] = tuple(str(p) for p in failed)


class CommandFailedError(ScriptkitError):
    """A child process exited with a non-zero status.

    The CLI propagates the child's status as its own exit code.

    Attributes:
        command (tuple[str, ...]): The command that was executed.
        returncode (int): Its exit status.
    """

    def __init__(self, message: str, *, command: Sequence[str], returncode: int) -> None:
        super().__init__(message)
        self.command: tuple[str, ...] = tuple(command)
        self.returncode = returncode
        self.exit_code = returncode
