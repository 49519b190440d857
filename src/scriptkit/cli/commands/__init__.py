# topmark:header:start
#
#   project      : ScriptKit
#   file         : __init__.py
#   file_relpath : src/scriptkit/cli/commands/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit CLI subcommands."""

from __future__ import annotations
