"""One contact per line: username|first_name|last_name|phone_number|email."""

from contactbook.domain.entities import FIELD_DELIMITER, Contact
from contactbook.domain.errors import InvalidContact, MalformedRecord

FIELD_COUNT = 5


def encode(contact: Contact) -> str:
    """Join the five fields in fixed order. Contact validation keeps the delimiter out of values."""
    return FIELD_DELIMITER.join(
        (
            contact.username,
            contact.first_name,
            contact.last_name,
            contact.phone_number,
            contact.email,
        )
    )


def decode(line: str) -> Contact:
    """Parse one stored line. Raises MalformedRecord unless it holds exactly five valid fields."""
    parts = line.split(FIELD_DELIMITER)
    if len(parts) != FIELD_COUNT:
        raise MalformedRecord(line)
    username, first_name, last_name, phone_number, email = parts
    try:
        return Contact(
            username=username,
            first_name=first_name,
            last_name=last_name,
            phone_number=phone_number,
            email=email,
        )
    except InvalidContact as exc:
        raise MalformedRecord(line) from exc
