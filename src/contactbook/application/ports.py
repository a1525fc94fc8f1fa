"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Iterable
from typing import Protocol


class LineStore(Protocol):
    """Durable, ordered sequence of text lines. Owned by one ContactStore."""

    def read_lines(self) -> list[str]:
        """Return every stored line in order, without line terminators."""
        ...

    def write_lines(self, lines: Iterable[str]) -> None:
        """Replace the whole content with lines. Leaves the old or the new content, never a mix."""
        ...

    def append_lines(self, lines: Iterable[str]) -> None:
        """Add lines after the existing ones. Not used by add/remove/update."""
        ...
