"""Runs one Command against the ContactStore and prints the result.
The only place where store failures become operator text.
"""

import logging
from collections.abc import Callable

from cli.presentation import HELP_TEXT, format_contact, format_contacts
from cli.prompt import read_contact as prompt_contact
from contactbook.application import (
    Add,
    Command,
    ContactStore,
    Help,
    List,
    Remove,
    SearchByEmail,
    SearchById,
    SearchByName,
    SearchByNumber,
    Unknown,
    Update,
    apply_edits,
)
from contactbook.domain import Contact, ContactError, MalformedRecord

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_CORRUPT_BOOK = 1


def dispatch(
    command: Command,
    store: ContactStore,
    *,
    out: Callable[[str], None] = print,
    read_contact: Callable[[], Contact] = prompt_contact,
    default_region: str | None = None,
) -> int:
    """Execute command and print its outcome. Returns the process exit status."""
    logger.debug("Dispatching %r", command)
    try:
        _run(command, store, out, read_contact, default_region)
    except MalformedRecord as exc:
        logger.error("Contact book is corrupted: %s", exc)
        out(f"Contact book is corrupted, operation aborted. {exc}")
        return EXIT_CORRUPT_BOOK
    except ContactError as exc:
        # DuplicateKey, NotFound, InvalidContact: reported, no state change.
        out(str(exc))
    except EOFError:
        out("Input closed, nothing changed.")
    return EXIT_OK


def _run(
    command: Command,
    store: ContactStore,
    out: Callable[[str], None],
    read_contact: Callable[[], Contact],
    default_region: str | None,
) -> None:
    if isinstance(command, Add):
        username = store.add(read_contact())
        out(f"Contact {username} added")
    elif isinstance(command, Remove):
        store.remove(command.username)
        out(f"Contact {command.username} removed")
    elif isinstance(command, SearchById):
        contact = store.find_by_username(command.username)
        if contact is None:
            out(f"Contact {command.username} not found")
        else:
            out(format_contact(contact, default_region))
    elif isinstance(command, SearchByName):
        out(format_contacts(store.find_by_name(command.name), default_region))
    elif isinstance(command, SearchByEmail):
        out(format_contacts(store.find_by_email(command.email), default_region))
    elif isinstance(command, SearchByNumber):
        out(format_contacts(store.find_by_phone_number(command.number), default_region))
    elif isinstance(command, List):
        out(format_contacts(store.list_all(), default_region))
    elif isinstance(command, Update):
        for edit in command.edits:
            if isinstance(edit, Unknown):
                out(f"Unknown flag: {edit.token}")
        updated = store.update(
            command.username, lambda prev: apply_edits(prev, command.edits)
        )
        out(f"Updated contact {updated.username}")
    elif isinstance(command, Help):
        out(HELP_TEXT)
