# topmark:header:start
#
#   project      : ScriptKit
#   file         : __init__.py
#   file_relpath : src/scriptkit/core/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Core, UI-agnostic primitives shared across ScriptKit.

Included modules:

- ``errors``
  The exception taxonomy raised by the library. Each error carries the exit
  code the CLI reports for it.

- ``exit_codes``
  Centralized exit codes for the CLI and runtime, aligned with BSD-style
  ``sysexits`` where practical.
"""

from __future__ import annotations
