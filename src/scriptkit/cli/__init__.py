# topmark:header:start
#
#   project      : ScriptKit
#   file         : __init__.py
#   file_relpath : src/scriptkit/cli/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Click-based command line interface for ScriptKit."""

from __future__ import annotations
