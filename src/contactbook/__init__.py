"""
Contact book core: clean-architecture layout.

- domain: Contact entity, line codec, failures. No outer dependencies.
- application: ContactStore, command and field-edit models, ports (LineStore).
- infrastructure: adapters (FileLineStore, InMemoryLineStore), phone display.
"""

from contactbook.application import (
    Command,
    ContactStore,
    FieldEdit,
    LineStore,
    apply_edits,
    parse_command,
    parse_edits,
)
from contactbook.domain import (
    Contact,
    ContactError,
    DuplicateKey,
    InvalidContact,
    MalformedRecord,
    NotFound,
    decode,
    encode,
)
from contactbook.infrastructure import FileLineStore, InMemoryLineStore

__all__ = [
    "Command",
    "Contact",
    "ContactError",
    "ContactStore",
    "DuplicateKey",
    "FieldEdit",
    "FileLineStore",
    "InMemoryLineStore",
    "InvalidContact",
    "LineStore",
    "MalformedRecord",
    "NotFound",
    "apply_edits",
    "decode",
    "encode",
    "parse_command",
    "parse_edits",
]
