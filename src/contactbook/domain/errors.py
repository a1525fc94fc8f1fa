"""Failures raised by the contact store and the record codec."""


class ContactError(Exception):
    """Base class for contact book failures."""


class InvalidContact(ContactError, ValueError):
    """A contact value failed validation (empty username, delimiter in a field)."""


class DuplicateKey(ContactError):
    """A contact with this username already exists."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Contact {username} already exists")
        self.username = username


class NotFound(ContactError):
    """No contact has this username."""

    def __init__(self, username: str) -> None:
        super().__init__(f"Contact {username} not found")
        self.username = username


class MalformedRecord(ContactError):
    """A stored line does not decode into a contact. Aborts the whole load."""

    def __init__(self, line: str) -> None:
        super().__init__(f"Invalid contact format: {line!r}")
        self.line = line
