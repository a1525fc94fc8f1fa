"""In-memory implementation of LineStore (no file)."""

from collections.abc import Iterable


class InMemoryLineStore:
    """Holds lines in a list. Order preserved by insertion."""

    def __init__(self, lines: Iterable[str] | None = None) -> None:
        self._lines: list[str] = list(lines or [])
        self.writes = 0  # full rewrites so far

    def read_lines(self) -> list[str]:
        return list(self._lines)

    def write_lines(self, lines: Iterable[str]) -> None:
        self._lines = list(lines)
        self.writes += 1

    def append_lines(self, lines: Iterable[str]) -> None:
        self._lines.extend(lines)
