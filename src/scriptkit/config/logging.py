# topmark:header:start
#
#   project      : ScriptKit
#   file         : logging.py
#   file_relpath : src/scriptkit/config/logging.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Custom ScriptKit logging with TRACE logging.

This module extends the standard logging module with ScriptKit-specific features,
including a custom TRACE level, a specialized logger class, and colored output formatting.
It is the diagnostic log sink of the toolkit: library code reports progress at
info/debug level and failures at error level before raising.
"""

from __future__ import annotations

import logging
import os
import sys
from typing import TYPE_CHECKING, Final, cast

from yachalk import chalk

from scriptkit.constants import ENV_LOG_LEVEL

if TYPE_CHECKING:
    from collections.abc import Mapping

# Define TRACE_LEVEL as a module-level constant
TRACE_LEVEL: Final[int] = logging.DEBUG - 5

DEFAULT_LOG_LEVEL: Final[int] = logging.WARNING


class ScriptkitLogger(logging.Logger):
    """Custom logger class for ScriptKit with support for a TRACE log level below DEBUG."""

    def trace(
        self,
        msg: object,
        *args: object,
        extra: Mapping[str, object] | None = None,
    ) -> None:
        """Log 'msg % args' with severity 'TRACE'.

        Args:
            msg (object): The message to be logged.
            *args (object): Variable length argument list for the message.
            extra (Mapping[str, object] | None): Optional dictionary of extra information to pass
                to the logger.
        """
        if self.isEnabledFor(TRACE_LEVEL):
            self._log(
                TRACE_LEVEL,
                msg=msg,
                args=args,
                extra=extra,
                stacklevel=2,
            )


if not hasattr(logging, "TRACE"):
    logging.addLevelName(TRACE_LEVEL, "TRACE")
    # Expose TRACE_LEVEL as logging.TRACE
    logging.TRACE = TRACE_LEVEL  # type: ignore

logging.setLoggerClass(ScriptkitLogger)


LOG_FORMAT = "%(asctime)s %(levelname)-7s %(message)s"
DEBUG_LOG_FORMAT = "%(asctime)s %(levelname)-7s %(filename)s:%(lineno)d %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


class ChalkFormatter(logging.Formatter):
    """Formatter that outputs log records with chalk-colored formatting based on severity level."""

    def format(self, record: logging.LogRecord) -> str:
        """Format the specified record with colors based on log level.

        Args:
            record (logging.LogRecord): The LogRecord to be formatted.

        Returns:
            str: The colorized formatted log message as a string.
        """
        level = record.levelno
        message = super().format(record)

        if level >= logging.ERROR:
            return chalk.red(message)
        if level >= logging.WARNING:
            return chalk.yellow(message)
        if level >= logging.INFO:
            return chalk.green(message)
        if level >= logging.DEBUG:
            return chalk.cyan(message)
        # TRACE and anything below it
        return message


_NAME_TO_LEVEL: Final[dict[str, int]] = {
    "TRACE": TRACE_LEVEL,
    "VERBOSE": TRACE_LEVEL,
    "DEBUG": logging.DEBUG,
    "INFO": logging.INFO,
    "WARNING": logging.WARNING,
    "WARN": logging.WARNING,
    "ERROR": logging.ERROR,
    "CRITICAL": logging.CRITICAL,
    "FATAL": logging.CRITICAL,
    "NOTSET": logging.NOTSET,
}


def resolve_env_log_level(environ: Mapping[str, str] | None = None) -> int | None:
    """Return a logging level from environment or None if unset.

    Honors SCRIPTKIT_LOG_LEVEL (e.g., "TRACE", "DEBUG", "INFO", numeric "10").

    Args:
        environ (Mapping[str, str] | None): Environment to consult; defaults to ``os.environ``.

    Returns:
        int | None: The resolved level, or None when unset or unrecognized.
    """
    env = os.environ if environ is None else environ
    val = env.get(ENV_LOG_LEVEL)
    if not val:
        return None
    v = val.strip().upper()
    if v.isdigit():
        return int(v)
    return _NAME_TO_LEVEL.get(v)


def setup_logging(level: int | None = None) -> None:
    """Configure the root logger with a specified log level and colored output.

    If ``level`` is None, environment variables are consulted via
    [`resolve_env_log_level`][scriptkit.config.logging.resolve_env_log_level].
    Default is WARNING when unspecified.
    """
    if level is None:
        level = resolve_env_log_level()
    if level is None:
        level = DEFAULT_LOG_LEVEL

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Remove all existing handlers to prevent duplicate log messages
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)
    # Source locations only help when debugging
    formatter = ChalkFormatter(
        LOG_FORMAT if level >= logging.INFO else DEBUG_LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
    handler.setFormatter(formatter)
    root_logger.addHandler(handler)


def get_logger(name: str) -> ScriptkitLogger:
    """Retrieve a ScriptkitLogger instance with the specified name.

    Args:
        name (str): The name of the logger.

    Returns:
        ScriptkitLogger: A ScriptkitLogger instance.
    """
    logger = logging.getLogger(name)
    return cast("ScriptkitLogger", logger)
