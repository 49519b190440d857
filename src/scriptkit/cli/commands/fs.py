# topmark:header:start
#
#   project      : ScriptKit
#   file         : fs.py
#   file_relpath : src/scriptkit/cli/commands/fs.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""ScriptKit filesystem commands: ``mkdir``, ``touch`` and ``truncate``.

Each command processes every path it is given and fails once at the end,
listing the paths it could not handle (exit code 73).
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import click

from scriptkit.cli.errors import translate_errors
from scriptkit.utils.fs import safe_mkdir, safe_touch, safe_truncate

if TYPE_CHECKING:
    from scriptkit.cli.console import ClickConsole


def _console() -> ClickConsole:
    ctx = click.get_current_context()
    ctx.ensure_object(dict)
    return ctx.obj["console"]


@click.command(name="mkdir", help="Create directories that do not exist yet.")
@click.option("-p", "--parents", is_flag=True, help="Create missing parent directories.")
@click.argument("dirs", nargs=-1, required=True, type=click.Path())
def mkdir_command(*, parents: bool, dirs: tuple[str, ...]) -> None:
    """Create DIRS."""
    console = _console()
    with translate_errors():
        created = safe_mkdir(*dirs, parents=parents)
    for d in created:
        console.print(f"created {d}")


@click.command(name="touch", help="Create files or update their modification time.")
@click.argument("files", nargs=-1, required=True, type=click.Path())
def touch_command(*, files: tuple[str, ...]) -> None:
    """Touch FILES."""
    with translate_errors():
        safe_touch(*files)


@click.command(name="truncate", help="Truncate files to zero bytes.")
@click.argument("files", nargs=-1, required=True, type=click.Path())
def truncate_command(*, files: tuple[str, ...]) -> None:
    """Truncate FILES."""
    with translate_errors():
        safe_truncate(*files)
