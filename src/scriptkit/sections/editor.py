# topmark:header:start
#
#   project      : ScriptKit
#   file         : editor.py
#   file_relpath : src/scriptkit/sections/editor.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Idempotent section editor.

Adds, updates or removes a block of lines delimited by a literal start marker
line and end marker line::

    # BEGIN managed
    export PATH="$HOME/bin:$PATH"
    # END managed

Rules:
  * Markers are compared by exact equality with a line's content (the line
    without its ``\\n`` terminator). No pattern matching.
  * Only the *first* section is ever touched. A later section with identical
    markers passes through byte for byte.
  * **Upsert** replaces the first section's body with the payload, or appends a
    new section at the end of the file when the markers are not both present.
  * **Remove** deletes the first section, markers included.
  * The target is rewritten through a [`ScratchBuffer`][scriptkit.sections.scratch.ScratchBuffer]
    and atomically renamed into place; on any failure it is left untouched.
  * A missing target is a successful no-op: the editor maintains existing files,
    it never creates them.

The "found" test only checks that each marker occurs somewhere in the file; it
does not verify ordering or pairing. A start marker line that is never followed
by an end marker line suppresses the rest of the file. Both behaviors are
relied upon by existing callers and are kept as they are.

The file is handled as bytes. Markers and payload lines are UTF-8 encoded with
``surrogateescape``, so arguments that arrived as undecodable bytes (as
``sys.argv`` delivers them on POSIX) match and are written back byte for byte.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path, PurePath
from typing import TYPE_CHECKING

from yachalk import chalk

from scriptkit.config.logging import ScriptkitLogger, get_logger
from scriptkit.core.errors import (
    AppendError,
    InsufficientArgumentsError,
    SectionProcessingError,
)
from scriptkit.rendering.colored_enum import ColoredStrEnum
from scriptkit.sections.scratch import ScratchBuffer

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator, Sequence

logger: ScriptkitLogger = get_logger(__name__)

REMOVE_FLAG: str = "-r"
NEWLINE: bytes = b"\n"

USAGE_UPSERT: str = "Usage: update_file_section <target_file> <start_marker> <end_marker> [lines...]"
USAGE_REMOVE: str = "Usage: update_file_section -r <target_file> <start_marker> <end_marker>"


class SectionMode(Enum):
    """Operation selected by the caller."""

    UPSERT = "upsert"
    REMOVE = "remove"


class ScanState(Enum):
    """Position of the rewrite pass relative to the first section.

    BEFORE: the first start marker line has not been seen yet.
    IN_SUPPRESSED_SPAN: inside the first section; original lines are dropped.
    AFTER: the first section has been closed; everything passes through.
    """

    BEFORE = "before"
    IN_SUPPRESSED_SPAN = "in_suppressed_span"
    AFTER = "after"


class EditStatus(ColoredStrEnum):
    """Outcome of a section edit."""

    # Value format: (description: str, color_renderer: ChalkBuilder)
    MISSING_FILE = ("target file does not exist", chalk.gray)
    INSERTED = ("section appended", chalk.green)
    REPLACED = ("section replaced", chalk.green)
    REMOVED = ("section removed", chalk.green)
    UNCHANGED = ("no matching section", chalk.yellow)


@dataclass(frozen=True)
class EditResult:
    """Structured result of a section edit.

    Attributes:
        path (Path): The target file.
        status (EditStatus): What happened to it.
        bytes_written (int): Size of the promoted content (0 if nothing was written).
    """

    path: Path
    status: EditStatus
    bytes_written: int = 0

    @property
    def changed(self) -> bool:
        """Return True if the target was rewritten."""
        return self.status in {
            EditStatus.INSERTED,
            EditStatus.REPLACED,
            EditStatus.REMOVED,
        }


@dataclass(frozen=True)
class SectionRequest:
    """A validated section edit request.

    Attributes:
        target (Path): File to edit (a ``str`` is accepted and coerced).
        start_marker (str): Exact content of the start marker line.
        end_marker (str): Exact content of the end marker line.
        mode (SectionMode): Upsert or remove.
        content (tuple[str, ...]): Lines to place between the markers (empty for remove).
    """

    target: Path
    start_marker: str
    end_marker: str
    mode: SectionMode = SectionMode.UPSERT
    content: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        usage = USAGE_REMOVE if self.mode is SectionMode.REMOVE else USAGE_UPSERT
        raw_target = os.fspath(self.target)
        # Path("") normalizes to "."
        empty_target = not raw_target or (
            isinstance(self.target, PurePath) and raw_target == "."
        )
        if empty_target or not self.start_marker or not self.end_marker:
            logger.error("Insufficient arguments.")
            logger.info(usage)
            raise InsufficientArgumentsError(
                f"Insufficient arguments: a target file, a start marker and an end marker "
                f"are required. {usage}"
            )
        if self.mode is SectionMode.REMOVE and self.content:
            logger.error("When removing a section, no content arguments should be provided.")
            logger.info(usage)
            raise InsufficientArgumentsError(
                f"No content lines may be given when removing a section. {usage}",
                path=raw_target,
            )
        object.__setattr__(self, "target", Path(raw_target))
        object.__setattr__(self, "content", tuple(self.content))

    @classmethod
    def from_argv(cls, argv: Sequence[str]) -> SectionRequest:
        """Parse a shell-style argument vector ``[-r] target start end [line...]``.

        Args:
            argv (Sequence[str]): The raw arguments.

        Returns:
            SectionRequest: The validated request.

        Raises:
            InsufficientArgumentsError: If fewer than three positional values are given,
                or content lines are combined with ``-r``.
        """
        args = list(argv)
        mode = SectionMode.UPSERT
        if args and args[0] == REMOVE_FLAG:
            mode = SectionMode.REMOVE
            args = args[1:]
        if len(args) < 3:
            usage = USAGE_REMOVE if mode is SectionMode.REMOVE else USAGE_UPSERT
            logger.error("Insufficient arguments.")
            logger.info(usage)
            raise InsufficientArgumentsError(
                f"Insufficient arguments: expected at least 3, got {len(args)}. {usage}"
            )
        target, start_marker, end_marker, *content = args
        return cls(
            target=target,  # type: ignore[arg-type]
            start_marker=start_marker,
            end_marker=end_marker,
            mode=mode,
            content=tuple(content),
        )


# --- scanning -------------------------------------------------------------------


def _line_content(line: bytes) -> bytes:
    return line[:-1] if line.endswith(NEWLINE) else line


def encode_text(text: str) -> bytes:
    """Encode a marker or payload line, restoring surrogate-escaped raw bytes."""
    return text.encode("utf-8", "surrogateescape")


def markers_present(path: str | os.PathLike[str], start_marker: str, end_marker: str) -> bool:
    """Return True if both markers occur somewhere in the file.

    This is a membership test: each marker only has to appear as a substring of
    some line. Order and pairing are not checked.

    Args:
        path (str | os.PathLike[str]): File to scan.
        start_marker (str): Start marker text.
        end_marker (str): End marker text.

    Returns:
        bool: True if both markers were found.
    """
    start = encode_text(start_marker)
    end = encode_text(end_marker)
    seen_start = seen_end = False
    with open(path, "rb") as fh:
        for line in fh:
            seen_start = seen_start or start in line
            seen_end = seen_end or end in line
            if seen_start and seen_end:
                return True
    return False


def encode_payload(content: Iterable[str]) -> list[bytes]:
    """Encode payload lines, each followed by its own newline terminator."""
    return [encode_text(line) + NEWLINE for line in content]


class SectionRewriter:
    """Single forward pass that rewrites or drops the first section.

    The pass is driven by `ScanState`; after iteration `state` tells whether the
    first section was found (`AFTER`), left unterminated (`IN_SUPPRESSED_SPAN`)
    or never opened (`BEFORE`). Every emitted line ends with ``\\n``.

    Args:
        start_marker (bytes): Exact content of the start marker line.
        end_marker (bytes): Exact content of the end marker line.
        mode (SectionMode): ``UPSERT`` re-emits the markers around ``payload``;
            ``REMOVE`` drops the span, markers included.
        payload (Sequence[bytes]): Newline-terminated body lines (upsert only).
    """

    def __init__(
        self,
        start_marker: bytes,
        end_marker: bytes,
        mode: SectionMode,
        payload: Sequence[bytes] = (),
    ) -> None:
        self.start_marker = start_marker
        self.end_marker = end_marker
        self.mode = mode
        self.payload = payload
        self.state = ScanState.BEFORE

    def rewrite(self, lines: Iterable[bytes]) -> Iterator[bytes]:
        """Yield the lines of the rewritten file.

        Args:
            lines (Iterable[bytes]): Lines of the original file, read lazily.

        Yields:
            bytes: Output lines, each terminated by ``\\n``.
        """
        upsert = self.mode is SectionMode.UPSERT
        for raw in lines:
            content = _line_content(raw)
            if self.state is ScanState.BEFORE and content == self.start_marker:
                self.state = ScanState.IN_SUPPRESSED_SPAN
                if upsert:
                    yield self.start_marker + NEWLINE
                    yield from self.payload
                continue
            if self.state is ScanState.IN_SUPPRESSED_SPAN:
                if content == self.end_marker:
                    self.state = ScanState.AFTER
                    if upsert:
                        yield self.end_marker + NEWLINE
                continue
            yield content + NEWLINE


def rewrite_lines(
    lines: Iterable[bytes],
    start_marker: bytes,
    end_marker: bytes,
    mode: SectionMode,
    payload: Sequence[bytes] = (),
) -> Iterator[bytes]:
    """Return the lines of ``lines`` with the first section rewritten or dropped."""
    return SectionRewriter(start_marker, end_marker, mode, payload).rewrite(lines)


# --- editing --------------------------------------------------------------------


def _rewrite_existing(request: SectionRequest, buf: ScratchBuffer) -> tuple[EditStatus, int]:
    """Rewrite pass for a file that contains both markers."""
    rewriter = SectionRewriter(
        encode_text(request.start_marker),
        encode_text(request.end_marker),
        request.mode,
        encode_payload(request.content),
    )
    with open(request.target, "rb") as fh:
        written = buf.writelines(rewriter.rewrite(fh))

    if rewriter.state is ScanState.BEFORE:
        # Markers only occur inside longer lines
        logger.debug("No line of '%s' equals the start marker exactly", request.target)
        return EditStatus.UNCHANGED, written
    if rewriter.state is ScanState.IN_SUPPRESSED_SPAN:
        logger.warning(
            "Section in '%s' is not closed by '%s'; the rest of the file was %s",
            request.target,
            request.end_marker,
            "replaced" if request.mode is SectionMode.UPSERT else "removed",
        )
    if request.mode is SectionMode.REMOVE:
        return EditStatus.REMOVED, written
    return EditStatus.REPLACED, written


def _append_section(request: SectionRequest, buf: ScratchBuffer) -> int:
    """Copy the target and append a new section at its end."""
    written = buf.copy_from(request.target)
    tail = buf.last_byte()
    if tail and tail != NEWLINE:
        written += buf.write(NEWLINE)
    written += buf.write(encode_text(request.start_marker) + NEWLINE)
    written += buf.writelines(encode_payload(request.content))
    written += buf.write(encode_text(request.end_marker) + NEWLINE)
    return written


def _processing_error(target: Path, exc: OSError) -> SectionProcessingError:
    logger.error("Failed to process sections in '%s': %s", target, exc)
    return SectionProcessingError(f"Failed to process sections in '{target}': {exc}", path=target)


def apply_section_request(request: SectionRequest) -> EditResult:
    """Execute a validated [`SectionRequest`][scriptkit.sections.editor.SectionRequest].

    Args:
        request (SectionRequest): The request to apply.

    Returns:
        EditResult: The outcome. No-ops (missing target, nothing to remove) are
        successes.

    Raises:
        TempFileCreationError: If the scratch buffer cannot be created.
        SectionProcessingError: If rewriting an existing section fails.
        AppendError: If appending a new section fails.
    """
    target = request.target
    if not target.is_file():
        logger.debug("Target file '%s' does not exist.", target)
        return EditResult(path=target, status=EditStatus.MISSING_FILE)

    logger.info("Updating '%s'", target)

    with ScratchBuffer(target) as buf:
        try:
            found = markers_present(target, request.start_marker, request.end_marker)
        except OSError as exc:
            raise _processing_error(target, exc) from exc

        if found:
            try:
                status, written = _rewrite_existing(request, buf)
                if status is EditStatus.UNCHANGED:
                    return EditResult(path=target, status=status)
                buf.promote()
            except OSError as exc:
                raise _processing_error(target, exc) from exc
        elif request.mode is SectionMode.REMOVE:
            logger.debug("No section to remove from '%s'", target)
            return EditResult(path=target, status=EditStatus.UNCHANGED)
        else:
            status = EditStatus.INSERTED
            try:
                written = _append_section(request, buf)
                buf.promote()
            except OSError as exc:
                logger.error("Failed to add new section to '%s': %s", target, exc)
                raise AppendError(
                    f"Failed to add new section to '{target}': {exc}", path=target
                ) from exc

    logger.debug("%s: %s (%d bytes written)", target, status.value, written)
    return EditResult(path=target, status=status, bytes_written=written)


def update_file_section(
    target: str | os.PathLike[str],
    start_marker: str,
    end_marker: str,
    content: Sequence[str] = (),
    *,
    remove: bool = False,
) -> EditResult:
    """Idempotently add, update or remove a marker-delimited section of a file.

    Args:
        target (str | os.PathLike[str]): The file to modify. A missing file is left alone.
        start_marker (str): Exact text of the line that opens the section.
        end_marker (str): Exact text of the line that closes the section.
        content (Sequence[str]): Lines to place between the markers. Must be empty when
            ``remove`` is True.
        remove (bool): Remove the first section instead of adding/updating it.

    Returns:
        EditResult: The outcome of the edit.

    Raises:
        InsufficientArgumentsError: On an empty target/marker, or content with ``remove``.
        TempFileCreationError: If the scratch buffer cannot be created.
        SectionProcessingError: If rewriting an existing section fails.
        AppendError: If appending a new section fails.

    Example:
        ```python
        update_file_section(
            "/etc/profile.d/tools.sh",
            "# BEGIN tools",
            "# END tools",
            ['export PATH="/opt/tools/bin:$PATH"'],
        )
        ```
    """
    if isinstance(content, str):
        content = [content]
    request = SectionRequest(
        target=target,  # type: ignore[arg-type]  # coerced to Path in __post_init__
        start_marker=start_marker,
        end_marker=end_marker,
        mode=SectionMode.REMOVE if remove else SectionMode.UPSERT,
        content=tuple(content),
    )
    return apply_section_request(request)


__all__ = [
    "EditResult",
    "EditStatus",
    "ScanState",
    "SectionMode",
    "SectionRequest",
    "SectionRewriter",
    "apply_section_request",
    "markers_present",
    "rewrite_lines",
    "update_file_section",
]
