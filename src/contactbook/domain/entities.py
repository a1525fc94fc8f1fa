"""Domain entity: Contact."""

from dataclasses import dataclass

from contactbook.domain.errors import InvalidContact

# Separates fields in the on-disk record; never allowed inside a value.
FIELD_DELIMITER = "|"

_FORBIDDEN = (FIELD_DELIMITER, "\n", "\r")


@dataclass(frozen=True)
class Contact:
    """
    One entry of the contact book, keyed by username.
    A Contact is immutable; updates produce a new instance.
    """

    username: str
    first_name: str = ""
    last_name: str = ""
    phone_number: str = ""
    email: str = ""

    def __post_init__(self):
        if not self.username or not self.username.strip():
            raise InvalidContact("Contact username must be non-empty.")
        for name in ("username", "first_name", "last_name", "phone_number", "email"):
            value = getattr(self, name)
            if any(ch in value for ch in _FORBIDDEN):
                raise InvalidContact(
                    f"Contact {name} must not contain '{FIELD_DELIMITER}' or line breaks."
                )

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()
