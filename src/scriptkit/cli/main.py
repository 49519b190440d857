# topmark:header:start
#
#   project      : ScriptKit
#   file         : main.py
#   file_relpath : src/scriptkit/cli/main.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit command line interface.

Key ideas:
- Group-level state (logging, runtime configuration, console) is initialized once
  and placed into ``ctx.obj``.
- Subcommands are thin: they call the library inside
  [`translate_errors`][scriptkit.cli.errors.translate_errors] so library errors
  surface with their exit codes.
"""

from __future__ import annotations

import sys

import click

from scriptkit.cli.commands.branch import branch_command
from scriptkit.cli.commands.fs import mkdir_command, touch_command, truncate_command
from scriptkit.cli.commands.run import run_command
from scriptkit.cli.commands.section import section_command
from scriptkit.cli.commands.version import version_command
from scriptkit.cli.console import ClickConsole
from scriptkit.config.logging import get_logger, setup_logging
from scriptkit.config.model import RuntimeConfig

logger = get_logger(__name__)


def init_common_state(ctx: click.Context, *, dry_run: bool) -> None:
    """Initialize shared state (logging, configuration, console) on the Click context.

    Args:
        ctx (click.Context): Current Click context; will have ``obj`` populated.
        dry_run (bool): Whether ``--dry-run`` was passed; overrides the environment.
    """
    ctx.ensure_object(dict)

    config = RuntimeConfig.from_env()
    if dry_run:
        config = config.with_overrides(dry_run=True)
    ctx.obj["config"] = config

    # Configure internal logging via env:
    setup_logging(level=config.log_level)

    ctx.obj["console"] = ClickConsole(enable_color=sys.stdout.isatty())
    logger.debug("Runtime configuration: %s", config)


@click.group(
    context_settings={"help_option_names": ["-h", "--help"]},
    invoke_without_command=True,
    help="ScriptKit: helpers for automation and configuration scripts.",
)
@click.option(
    "--dry-run",
    "dry_run",
    is_flag=True,
    help="Preview actions without changing anything (also: SCRIPTKIT_DRY_RUN=1).",
)
@click.pass_context
def cli(ctx: click.Context, dry_run: bool) -> None:
    """Entry point for the ScriptKit CLI."""
    init_common_state(ctx, dry_run=dry_run)

    if ctx.invoked_subcommand is None:
        console: ClickConsole = ctx.obj["console"]
        console.print(ctx.get_help())


cli.add_command(section_command)

cli.add_command(mkdir_command)

cli.add_command(touch_command)

cli.add_command(truncate_command)

cli.add_command(run_command)

cli.add_command(branch_command)

cli.add_command(version_command)

if __name__ == "__main__":
    cli()
