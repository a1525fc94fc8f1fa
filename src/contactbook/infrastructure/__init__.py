"""Infrastructure layer: concrete implementations of application ports."""

from contactbook.infrastructure.file_line_store import FileLineStore
from contactbook.infrastructure.memory_line_store import InMemoryLineStore
from contactbook.infrastructure.phone import format_phone

__all__ = [
    "FileLineStore",
    "InMemoryLineStore",
    "format_phone",
]
