# topmark:header:start
#
#   project      : ScriptKit
#   file         : errors.py
#   file_relpath : src/scriptkit/cli/errors.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exceptions for the ScriptKit CLI.

Usage:
    Commands call library functions inside `translate_errors()`; any
    [`ScriptkitError`][scriptkit.core.errors.ScriptkitError] escaping the block is
    re-raised as a `ScriptkitCliError` carrying the library error's exit code, which
    Click then reports and exits with.

Styling:
    Errors prefer the project console if available (see `show()`); if no console
    is present in the Click context, they fall back to Click's default styling.
"""

from __future__ import annotations

from contextlib import contextmanager
from typing import IO, TYPE_CHECKING, Any

import click

from scriptkit.core.errors import ScriptkitError
from scriptkit.core.exit_codes import ExitCode

if TYPE_CHECKING:
    from collections.abc import Iterator


class ScriptkitCliError(click.ClickException):
    """Base class for all ScriptKit CLI errors."""

    exit_code = ExitCode.FAILURE

    def __init__(self, message: str, *, exit_code: int | None = None) -> None:
        super().__init__(message)
        if exit_code is not None:
            self.exit_code = exit_code

    def format_message(self) -> str:  # pragma: no cover - trivial
        """Return the plain error message text (colorization happens in `show()`)."""
        return str(getattr(self, "message", ""))

    def show(self, file: IO[Any] | None = None) -> None:  # pragma: no cover - Click prints errors
        """Display the error using the project console if available."""
        ctx = click.get_current_context(silent=True)
        if ctx is not None and isinstance(ctx.obj, dict):
            console = ctx.obj.get("console")
            if console is not None:
                console.error(f"Error: {self.format_message()}")
                return
        super().show(file)


class ScriptkitCliUsageError(ScriptkitCliError):
    """Error for command-line invocation errors (invalid flags/args)."""

    exit_code = ExitCode.USAGE_ERROR


@contextmanager
def translate_errors() -> Iterator[None]:
    """Convert library errors raised in the block into CLI errors.

    Raises:
        ScriptkitCliError: Wrapping the library error, with its exit code.
    """
    try:
        yield
    except ScriptkitError as exc:
        raise ScriptkitCliError(exc.message, exit_code=int(exc.exit_code)) from exc
