"""Operator-facing text: contact cards and usage."""

from contactbook.domain import Contact
from contactbook.infrastructure import format_phone

HELP_TEXT = """\
Usage: contacts [command]

Commands:
  add
  remove <username>
  search id <username>
  search name <name>
  search email <email>
  search number <number>
  list
  update <username> [flags]
  help

Flags (for update command):
  --first-name <name>
  --last-name <name>
  --phone-number <number>
  --email <email>
"""

NO_CONTACTS = "No contacts found"


def format_contact(contact: Contact, default_region: str | None = None) -> str:
    """Format one contact as a card: username, name, phone, email."""
    lines = [f"Username: {contact.username}"]
    if contact.full_name:
        lines.append(f"Name: {contact.full_name}")
    if contact.phone_number:
        lines.append(f"Phone: {format_phone(contact.phone_number, default_region)}")
    if contact.email:
        lines.append(f"Email: {contact.email}")
    return "\n".join(lines)


def format_contacts(contacts: list[Contact], default_region: str | None = None) -> str:
    if not contacts:
        return NO_CONTACTS
    return "\n\n".join(format_contact(c, default_region) for c in contacts)
