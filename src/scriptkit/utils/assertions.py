# topmark:header:start
#
#   project      : ScriptKit
#   file         : assertions.py
#   file_relpath : src/scriptkit/utils/assertions.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Assertions for script inputs and the runtime environment.

The existence and emptiness checks inspect *all* of their inputs and report every
failure in a single error, so a misconfigured script learns about all missing
pieces at once.
Failures are logged at error level and raised as
[`AssertionFailedError`][scriptkit.core.errors.AssertionFailedError] (or one of
its subclasses).
"""

from __future__ import annotations

import os
import re
import shutil
from collections.abc import Sized
from typing import TYPE_CHECKING

from scriptkit.config.logging import get_logger
from scriptkit.core.errors import (
    AssertionFailedError,
    MissingCommandError,
    MissingFileError,
    UsageError,
)

if TYPE_CHECKING:
    from collections.abc import Iterable

logger = get_logger(__name__)

INTEGER_RE: re.Pattern[str] = re.compile(r"[-+]?[0-9]+")


def _fail(error: AssertionFailedError) -> AssertionFailedError:
    logger.error("%s", error.message)
    return error


def _join(items: Iterable[object]) -> str:
    return " ".join(str(i) for i in items)


def _is_empty(value: object) -> bool:
    if value is None:
        return True
    if isinstance(value, Sized):
        return len(value) == 0
    return False


def assert_not_empty(**values: object) -> None:
    """Check that every named value is non-empty.

    ``None`` and empty strings/collections count as empty.

    Example:
        ```python
        assert_not_empty(USER=user, TOKEN=token)
        ```

    Raises:
        AssertionFailedError: Listing the names of all empty values.
    """
    if not values:
        raise _fail(AssertionFailedError("assert_not_empty: No values provided for validation."))
    empty = [name for name, value in values.items() if _is_empty(value)]
    if empty:
        raise _fail(
            AssertionFailedError(
                f"These required values are not set or are empty: {_join(empty)}"
            )
        )


def is_integer(value: object) -> bool:
    """Return True if ``value`` is an int or a string of optionally signed digits."""
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return True
    return isinstance(value, str) and INTEGER_RE.fullmatch(value) is not None


def assert_integer(**values: object) -> None:
    """Check that every named value is a valid integer.

    Raises:
        AssertionFailedError: Listing every value that is not an integer.
    """
    if not values:
        raise _fail(AssertionFailedError("assert_integer: No values provided."))
    invalid = [
        f"'{name}' with value '{value}'"
        for name, value in values.items()
        if not is_integer(value)
    ]
    if invalid:
        raise _fail(
            AssertionFailedError(f"These values are not valid integers: {', '.join(invalid)}")
        )


def assert_integer_range(name: str, value: object, minimum: object, maximum: object) -> int:
    """Check that ``value`` is an integer with ``minimum <= value <= maximum``.

    Args:
        name (str): Name used in the error message.
        value (object): The value to check (int or digit string).
        minimum (object): Lower bound (inclusive).
        maximum (object): Upper bound (inclusive).

    Returns:
        int: The value as an ``int``.

    Raises:
        AssertionFailedError: If any of the three is not an integer or the value is out of range.
    """
    assert_integer(**{name: value, "minimum": minimum, "maximum": maximum})
    number, low, high = int(str(value)), int(str(minimum)), int(str(maximum))
    if number < low or number > high:
        raise _fail(
            AssertionFailedError(f"Value '{name}' ({number}) is not in range [{low}, {high}].")
        )
    return number


def assert_arg_count(count: int, expected: int, maximum: int | None = None) -> None:
    """Check that an argument count is exactly ``expected`` or within a range.

    Args:
        count (int): The actual number of arguments.
        expected (int): The exact expected count, or the minimum when ``maximum`` is given.
        maximum (int | None): Optional inclusive upper bound.

    Raises:
        UsageError: If the bounds themselves are not integers.
        AssertionFailedError: If the count does not match.

    Example:
        ```python
        assert_arg_count(len(argv), 1, 3)  # between 1 and 3 arguments
        ```
    """
    for label, bound in (("count", count), ("expected", expected), ("maximum", maximum)):
        if bound is not None and not is_integer(bound):
            logger.error("assert_arg_count: '%s' is not an integer: %r", label, bound)
            raise UsageError(f"assert_arg_count: '{label}' is not an integer: {bound!r}")

    if maximum is None:
        if count != expected:
            raise _fail(
                AssertionFailedError(
                    f"Argument count mismatch: expected {expected} but got {count} arguments"
                )
            )
    elif count < expected or count > maximum:
        raise _fail(
            AssertionFailedError(
                f"Argument count mismatch: expected between {expected} and {maximum} "
                f"arguments, but got {count}"
            )
        )


def assert_command_exists(*commands: str) -> None:
    """Check that every command is available on the ``PATH``.

    Raises:
        MissingCommandError: Listing all missing commands.
    """
    if not commands:
        logger.warning("assert_command_exists: No commands provided to check.")
        return
    missing = [cmd for cmd in commands if shutil.which(cmd) is None]
    if missing:
        raise _fail(
            MissingCommandError(
                f"These required commands were not found in your PATH: {_join(missing)}"
            )
        )


def assert_file_exists(*paths: str | os.PathLike[str]) -> None:
    """Check that every path exists and is a regular file.

    Raises:
        MissingFileError: Listing all missing or non-regular files.
    """
    if not paths:
        logger.warning("assert_file_exists: No files provided to check.")
        return
    missing = [p for p in paths if not os.path.isfile(p)]
    if missing:
        raise _fail(
            MissingFileError(
                "These required files do not exist or are not regular files: "
                f"{_join(os.fspath(p) for p in missing)}"
            )
        )


def assert_dir_exists(*paths: str | os.PathLike[str]) -> None:
    """Check that every path exists and is a directory.

    Raises:
        MissingFileError: Listing all missing directories.
    """
    if not paths:
        logger.warning("assert_dir_exists: No directories provided to check.")
        return
    missing = [p for p in paths if not os.path.isdir(p)]
    if missing:
        raise _fail(
            MissingFileError(
                "These required directories do not exist: "
                f"{_join(os.fspath(p) for p in missing)}"
            )
        )
