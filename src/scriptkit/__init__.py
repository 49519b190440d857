# topmark:header:start
#
#   project      : ScriptKit
#   file         : __init__.py
#   file_relpath : src/scriptkit/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit package.

ScriptKit is a foundation toolkit for automation and configuration scripts.
It bundles leveled diagnostic logging, a structured error taxonomy, value
assertions, safe filesystem helpers, command execution with dry-run support,
and an idempotent editor for marker-delimited sections of text files. Every
feature is available both as a small typed API and through the ``scriptkit``
CLI.
"""

from __future__ import annotations

from scriptkit.sections.editor import (
    EditResult,
    EditStatus,
    SectionMode,
    SectionRequest,
    update_file_section,
)

__all__ = [
    "EditResult",
    "EditStatus",
    "SectionMode",
    "SectionRequest",
    "update_file_section",
]
