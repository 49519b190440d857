# topmark:header:start
#
#   project      : ScriptKit
#   file         : scratch.py
#   file_relpath : src/scriptkit/sections/scratch.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Scratch buffers: write-ahead temporary files promoted by atomic rename.

A `ScratchBuffer` is created in the same directory as the file it will replace,
so that promoting it is a same-filesystem `os.replace`. Readers of the target
observe either the old content or the complete new content, never a partial
write.

The buffer is a scoped resource:

```python
with ScratchBuffer(path) as buf:
    buf.writelines(lines)
    buf.promote()
# not promoted (exception or early exit) -> the temporary file is deleted
```
"""

from __future__ import annotations

import os
import stat
import tempfile
from pathlib import Path
from typing import IO, TYPE_CHECKING

from scriptkit.config.logging import ScriptkitLogger, get_logger
from scriptkit.core.errors import TempFileCreationError

if TYPE_CHECKING:
    from collections.abc import Iterable
    from types import TracebackType

logger: ScriptkitLogger = get_logger(__name__)


class ScratchBuffer:
    """Uniquely named temporary file next to ``target``.

    Args:
        target (str | os.PathLike[str]): The file the buffer will eventually replace.

    Attributes:
        target (Path): The file to replace on promotion.
        path (Path | None): Location of the temporary file while it exists.
    """

    def __init__(self, target: str | os.PathLike[str]) -> None:
        self.target: Path = Path(target)
        self.path: Path | None = None
        self._fh: IO[bytes] | None = None
        self._promoted: bool = False
        self._tail: bytes = b""

    # --- context management ---------------------------------------------------

    def __enter__(self) -> ScratchBuffer:
        self.open()
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        if not self._promoted:
            self.discard()

    # --- lifecycle ---------------------------------------------------------------

    def open(self) -> None:
        """Create the temporary file.

        Raises:
            TempFileCreationError: If the file cannot be created (e.g. the directory is
                not writable).
        """
        directory = self.target.parent
        try:
            fd, name = tempfile.mkstemp(prefix=f"{self.target.name}.", dir=directory)
        except OSError as exc:
            logger.error("Failed to create temporary file for '%s': %s", self.target, exc)
            raise TempFileCreationError(
                f"Failed to create temporary file for '{self.target}': {exc}",
                path=self.target,
            ) from exc
        self.path = Path(name)
        self._fh = os.fdopen(fd, "wb")
        logger.trace("Created scratch buffer %s for %s", self.path, self.target)

    def _handle(self) -> IO[bytes]:
        if self._fh is None or self._fh.closed:
            raise ValueError(f"Scratch buffer for '{self.target}' is not open")
        return self._fh

    def write(self, data: bytes) -> int:
        """Write raw bytes to the buffer and return the number written."""
        written = self._handle().write(data)
        if data:
            self._tail = data[-1:]
        return written

    def writelines(self, lines: Iterable[bytes]) -> int:
        """Write each item of ``lines`` eagerly and return the total byte count."""
        fh = self._handle()
        total = 0
        for line in lines:
            total += fh.write(line)
            if line:
                self._tail = line[-1:]
        return total

    def copy_from(self, source: str | os.PathLike[str], *, chunk_size: int = 64 * 1024) -> int:
        """Append the raw content of ``source`` to the buffer."""
        fh = self._handle()
        total = 0
        with open(source, "rb") as src:
            while chunk := src.read(chunk_size):
                total += fh.write(chunk)
                self._tail = chunk[-1:]
        return total

    def last_byte(self) -> bytes:
        """Return the last byte written so far (``b""`` for an empty buffer)."""
        return self._tail

    def promote(self) -> None:
        """Atomically replace the target with the buffer content.

        The target's permission bits are carried over, since temporary files are
        created private to the current user.
        """
        fh = self._handle()
        if self.path is None:
            raise ValueError(f"Scratch buffer for '{self.target}' has no file to promote")
        fh.flush()
        os.fsync(fh.fileno())
        fh.close()
        try:
            mode = stat.S_IMODE(os.stat(self.target).st_mode)
        except FileNotFoundError:
            mode = None
        if mode is not None:
            os.chmod(self.path, mode)
        os.replace(self.path, self.target)
        logger.trace("Promoted scratch buffer %s over %s", self.path, self.target)
        self._promoted = True
        self.path = None

    def discard(self) -> None:
        """Close and delete the temporary file; safe to call more than once."""
        if self._fh is not None and not self._fh.closed:
            self._fh.close()
        if self.path is not None:
            try:
                self.path.unlink()
            except FileNotFoundError:
                pass
            except OSError as exc:
                logger.error("Failed to delete temporary file %s: %s", self.path, exc)
            else:
                logger.trace("Discarded scratch buffer %s", self.path)
            self.path = None
