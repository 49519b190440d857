# topmark:header:start
#
#   project      : ScriptKit
#   file         : section.py
#   file_relpath : src/scriptkit/cli/commands/section.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit ``section`` command.

Adds, updates or removes a marker-delimited section of a file, idempotently.

Arguments are collected raw and validated by
[`SectionRequest.from_argv`][scriptkit.sections.editor.SectionRequest.from_argv],
so the command accepts exactly the ``[-r] TARGET START END [LINE...]`` form and
reports an incomplete invocation with exit code 64.

Examples:
  Add or refresh a block:

    $ scriptkit section ~/.profile "# BEGIN tools" "# END tools" 'export EDITOR=vim'

  Remove it again:

    $ scriptkit section -r ~/.profile "# BEGIN tools" "# END tools"
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptkit.cli.errors import translate_errors
from scriptkit.sections.editor import (
    REMOVE_FLAG,
    SectionMode,
    SectionRequest,
    apply_section_request,
)

if TYPE_CHECKING:
    from scriptkit.cli.console import ClickConsole
    from scriptkit.config.model import RuntimeConfig


@click.command(
    name="section",
    help="Add or update (with -r: remove) a marker-delimited section of TARGET.",
    context_settings={
        "help_option_names": ["-h", "--help"],
        "ignore_unknown_options": True,
        "allow_interspersed_args": False,
    },
    epilog="""\
Arguments: TARGET START_MARKER END_MARKER [LINE...]

Markers match whole lines exactly. Only the first section is changed; a missing
TARGET is left alone.
""",
)
@click.option(
    "-r",
    "--remove",
    "remove",
    is_flag=True,
    help="Remove the section (markers included) instead of adding/updating it.",
)
@click.argument("args", nargs=-1, type=click.UNPROCESSED)
def section_command(*, remove: bool, args: tuple[str, ...]) -> None:
    """Add, update or remove a section.

    Args:
        remove (bool): Remove the section instead of adding/updating it.
        args (tuple[str, ...]): ``TARGET START END [LINE...]``.
    """
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    console: ClickConsole = ctx.obj["console"]
    config: RuntimeConfig = ctx.obj["config"]

    argv = [REMOVE_FLAG, *args] if remove else list(args)
    with translate_errors():
        request = SectionRequest.from_argv(argv)
        if config.dry_run:
            action = "remove" if request.mode is SectionMode.REMOVE else "add or update"
            console.print(f"{request.target}: would {action} section {request.start_marker!r}")
            return
        result = apply_section_request(request)

    console.print(f"{result.path}: {result.status.render(enable_color=console.enable_color)}")
