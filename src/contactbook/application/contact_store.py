"""Contact book over a line store: add, remove, search, update. Reloads the full book on every call."""

from collections.abc import Callable

from contactbook.application.ports import LineStore
from contactbook.domain import Contact, DuplicateKey, NotFound, decode, encode


class ContactStore:
    """
    Each mutating call does one full load, one decision and one full rewrite.
    No state is kept between calls; the line store is the only copy.
    """

    def __init__(self, lines: LineStore) -> None:
        self._lines = lines

    def _load(self) -> list[Contact]:
        # Any malformed line raises before anything is returned.
        return [decode(line) for line in self._lines.read_lines()]

    def _save(self, contacts: list[Contact]) -> None:
        self._lines.write_lines([encode(c) for c in contacts])

    def add(self, contact: Contact) -> str:
        """Store a new contact. Raises DuplicateKey if the username is taken."""
        contacts = self._load()
        if any(c.username == contact.username for c in contacts):
            raise DuplicateKey(contact.username)
        self._save(contacts + [contact])
        return contact.username

    def remove(self, username: str) -> None:
        """Drop the contact with this username. No-op if there is none."""
        contacts = self._load()
        self._save([c for c in contacts if c.username != username])

    def find_by_username(self, username: str) -> Contact | None:
        for contact in self._load():
            if contact.username == username:
                return contact
        return None

    def find_by_name(self, name: str) -> list[Contact]:
        """Contacts whose first or last name equals name exactly."""
        return [c for c in self._load() if c.first_name == name or c.last_name == name]

    def find_by_email(self, email: str) -> list[Contact]:
        return [c for c in self._load() if c.email == email]

    def find_by_phone_number(self, number: str) -> list[Contact]:
        return [c for c in self._load() if c.phone_number == number]

    def list_all(self) -> list[Contact]:
        """Return all contacts in stored order."""
        return self._load()

    def update(self, username: str, edit: Callable[[Contact], Contact]) -> Contact:
        """
        Replace the contact with this username by edit(contact), in place.
        Raises NotFound if there is none, DuplicateKey if the edit renames it onto
        another contact's username. Nothing is written when it raises.
        """
        contacts = self._load()
        index = next(
            (i for i, c in enumerate(contacts) if c.username == username), None
        )
        if index is None:
            raise NotFound(username)
        updated = edit(contacts[index])
        if updated.username != username and any(
            c.username == updated.username for c in contacts
        ):
            raise DuplicateKey(updated.username)
        contacts[index] = updated
        self._save(contacts)
        return updated
