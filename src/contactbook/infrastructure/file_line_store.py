"""Line store backed by a UTF-8 text file, one record per line."""

import logging
import os
import tempfile
from collections.abc import Iterable
from pathlib import Path

logger = logging.getLogger(__name__)


class FileLineStore:
    """Reads and rewrites the whole file. A missing file reads as empty.
    Rewrites go through a temp file in the same directory and os.replace,
    so the file holds either the old or the new content.
    """

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def read_lines(self) -> list[str]:
        if not self._path.exists():
            return []
        text = self._path.read_text(encoding="utf-8")
        if not text:
            return []
        # Only "\n" ends a record; fields may hold other characters str.splitlines breaks on.
        lines = text.split("\n")
        if lines[-1] == "":
            lines.pop()
        return lines

    def write_lines(self, lines: Iterable[str]) -> None:
        data = "".join(f"{line}\n" for line in lines)
        self._path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(
            dir=self._path.parent, prefix=f".{self._path.name}.", suffix=".tmp"
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as fh:
                fh.write(data)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise
        logger.debug("Rewrote %s (%d bytes)", self._path, len(data))

    def append_lines(self, lines: Iterable[str]) -> None:
        data = "".join(f"{line}\n" for line in lines)
        if not data:
            return
        self._path.parent.mkdir(parents=True, exist_ok=True)
        with self._path.open("a", encoding="utf-8", newline="\n") as fh:
            fh.write(data)
        logger.debug("Appended to %s (%d bytes)", self._path, len(data))
