# topmark:header:start
#
#   project      : ScriptKit
#   file         : version.py
#   file_relpath : src/scriptkit/cli/commands/version.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit ``version`` command.

Prints the current ScriptKit version as installed in the active Python environment.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptkit.constants import SCRIPTKIT_VERSION

if TYPE_CHECKING:
    from scriptkit.cli.console import ClickConsole


@click.command(name="version", help="Show the current version of ScriptKit.")
def version_command() -> None:
    """Show the current version of ScriptKit."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    console.print(SCRIPTKIT_VERSION)
