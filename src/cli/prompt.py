"""Interactive entry of a new contact."""

from collections.abc import Callable

from contactbook.domain import Contact


def read_contact(ask: Callable[[str], str] = input) -> Contact:
    """Ask for each field in turn. Raises InvalidContact on an empty username or a '|' in a value."""
    username = ask("Enter the username: ").strip()
    first_name = ask("Enter the first name: ").strip()
    last_name = ask("Enter the last name: ").strip()
    phone_number = ask("Enter the phone number: ").strip()
    email = ask("Enter the email: ").strip()
    return Contact(
        username=username,
        first_name=first_name,
        last_name=last_name,
        phone_number=phone_number,
        email=email,
    )
