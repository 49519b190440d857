# topmark:header:start
#
#   project      : ScriptKit
#   file         : __init__.py
#   file_relpath : src/scriptkit/sections/__init__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Idempotent editing of marker-delimited sections in text files.

A *section* is the span of lines between a start marker line and an end
marker line. [`update_file_section`][scriptkit.sections.editor.update_file_section]
inserts, replaces or removes the first such section of a file, writing through
a [`ScratchBuffer`][scriptkit.sections.scratch.ScratchBuffer] that is atomically
renamed over the original.
"""

from __future__ import annotations
