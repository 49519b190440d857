# topmark:header:start
#
#   project      : ScriptKit
#   file         : branch.py
#   file_relpath : src/scriptkit/cli/commands/branch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit ``branch`` command: print the branch checked out in a directory."""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptkit.cli.errors import ScriptkitCliError, translate_errors
from scriptkit.utils.git import current_branch

if TYPE_CHECKING:
    from scriptkit.cli.console import ClickConsole


@click.command(name="branch", help="Print the git branch checked out in DIRECTORY.")
@click.argument("directory", type=click.Path(), default=".")
def branch_command(*, directory: str) -> None:
    """Print the current branch (``detached head`` if HEAD is detached)."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]

    with translate_errors():
        branch = current_branch(directory)
    if branch is None:
        raise ScriptkitCliError(f"'{directory}' is not inside a git repository.")
    console.print(branch)
