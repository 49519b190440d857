# topmark:header:start
#
#   project      : ScriptKit
#   file         : __main__.py
#   file_relpath : src/scriptkit/__main__.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Module entry point for running ScriptKit via ``python -m scriptkit``.

It delegates directly to :func:`scriptkit.cli.main.cli`, ensuring a single,
authoritative CLI entry point regardless of how ScriptKit is launched.

Examples:
    Add or refresh a section in a shell profile::

        python -m scriptkit section ~/.bashrc "# BEGIN tools" "# END tools" 'export X=1'
"""

from __future__ import annotations

from scriptkit.cli.main import cli

if __name__ == "__main__":
    # We call the Click group directly
    cli()
