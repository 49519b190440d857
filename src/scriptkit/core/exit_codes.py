# topmark:header:start
#
#   project      : ScriptKit
#   file         : exit_codes.py
#   file_relpath : src/scriptkit/core/exit_codes.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Exit codes for ScriptKit.

ScriptKit aligns with the BSD `sysexits` convention where practical, so that other tooling
can interpret failures consistently. Library errors carry one of these codes (see
`scriptkit.core.errors`) and the CLI exits with it.
"""

from enum import IntEnum


class ExitCode(IntEnum):
    """Standardized exit codes for ScriptKit.

    Attributes:
        SUCCESS: Successful execution, including idempotent no-ops.
        FAILURE: Generic failure (non-specific error), e.g. a failed assertion.
        USAGE_ERROR: Invocation error (missing or conflicting arguments). Mirrors BSD
            ``EX_USAGE (64)``.
        DATA_ERROR: Malformed input data. Mirrors BSD ``EX_DATAERR (65)``.
        FILE_NOT_FOUND: Input path does not exist. Mirrors BSD ``EX_NOINPUT (66)``.
        UNAVAILABLE: A required command or service is unavailable. Mirrors BSD
            ``EX_UNAVAILABLE (69)``.
        SOFTWARE_ERROR: Internal error. Mirrors BSD ``EX_SOFTWARE (70)``.
        CANT_CREATE: An output file or directory cannot be created. Mirrors BSD
            ``EX_CANTCREAT (73)``.
        IO_ERROR: I/O error reading/writing a file. Mirrors BSD ``EX_IOERR (74)``.
        PERMISSION_DENIED: Insufficient permissions (read/write). Mirrors BSD
            ``EX_NOPERM (77)``.
        CONFIG_ERROR: Configuration error. Mirrors BSD ``EX_CONFIG (78)``.
        UNEXPECTED_ERROR: Unhandled/unknown error (last-resort).
    """

    SUCCESS = 0
    FAILURE = 1

    # sysexits-aligned values for better interoperability
    USAGE_ERROR = 64  # EX_USAGE
    DATA_ERROR = 65  # EX_DATAERR
    FILE_NOT_FOUND = 66  # EX_NOINPUT
    UNAVAILABLE = 69  # EX_UNAVAILABLE
    SOFTWARE_ERROR = 70  # EX_SOFTWARE
    CANT_CREATE = 73  # EX_CANTCREAT
    IO_ERROR = 74  # EX_IOERR
    PERMISSION_DENIED = 77  # EX_NOPERM
    CONFIG_ERROR = 78  # EX_CONFIG

    UNEXPECTED_ERROR = 255
