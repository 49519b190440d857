# topmark:header:start
#
#   project      : ScriptKit
#   file         : run.py
#   file_relpath : src/scriptkit/cli/commands/run.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit ``run`` command.

Runs a command without a shell. With ``--dry-run`` on the group (or
``SCRIPTKIT_DRY_RUN=1``) it only reports what would run.

Examples:
    $ scriptkit run -- make install
    $ scriptkit --dry-run run -- rm -rf build
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptkit.cli.errors import ScriptkitCliUsageError, translate_errors
from scriptkit.utils.run import format_command, run

if TYPE_CHECKING:
    from scriptkit.cli.console import ClickConsole
    from scriptkit.config.model import RuntimeConfig


@click.command(
    name="run",
    help="Run a command; fail with its exit status unless --no-check is given.",
    context_settings={"ignore_unknown_options": True, "allow_interspersed_args": False},
)
@click.option(
    "--no-check",
    "no_check",
    is_flag=True,
    help="Report a failing command as a warning and exit 0.",
)
@click.argument("command", nargs=-1, type=click.UNPROCESSED)
def run_command(*, no_check: bool, command: tuple[str, ...]) -> None:
    """Run COMMAND."""
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    config: RuntimeConfig = ctx.obj["config"]

    if not command:
        raise ScriptkitCliUsageError("run: No command provided.")

    if config.dry_run:
        console.print(f"[DRY-RUN] Would run: {format_command(command)}")
        return

    with translate_errors():
        returncode = run(command, check=not no_check, dry_run=False)
    if returncode:
        console.warn(f"Command failed with exit code {returncode} (continuing).")
