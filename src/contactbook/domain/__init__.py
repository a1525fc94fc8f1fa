"""Domain layer: the Contact entity, its line codec, and failures. No dependencies on outer layers."""

from contactbook.domain.entities import FIELD_DELIMITER, Contact
from contactbook.domain.errors import (
    ContactError,
    DuplicateKey,
    InvalidContact,
    MalformedRecord,
    NotFound,
)
from contactbook.domain.record_codec import decode, encode

__all__ = [
    "FIELD_DELIMITER",
    "Contact",
    "ContactError",
    "DuplicateKey",
    "InvalidContact",
    "MalformedRecord",
    "NotFound",
    "decode",
    "encode",
]
