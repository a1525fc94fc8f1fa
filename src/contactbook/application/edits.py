"""Update directives parsed from --flag value pairs, and their application to a Contact."""

from collections.abc import Iterable, Sequence
from dataclasses import dataclass, replace

from contactbook.domain import Contact


@dataclass(frozen=True)
class SetFirstName:
    value: str


@dataclass(frozen=True)
class SetLastName:
    value: str


@dataclass(frozen=True)
class SetPhoneNumber:
    value: str


@dataclass(frozen=True)
class SetEmail:
    value: str


@dataclass(frozen=True)
class Unknown:
    """A token that is not a recognized flag, or a flag missing its value."""

    token: str


FieldEdit = SetFirstName | SetLastName | SetPhoneNumber | SetEmail | Unknown

_FLAGS = {
    "--first-name": SetFirstName,
    "--last-name": SetLastName,
    "--phone-number": SetPhoneNumber,
    "--email": SetEmail,
}


def parse_edits(tokens: Sequence[str]) -> tuple[FieldEdit, ...]:
    """
    Read flag/value pairs from the front, in order.
    The first token that is not a flag followed by a value stops parsing and
    the result is only Unknown(token); edits read before it are dropped.
    """
    edits: list[FieldEdit] = []
    i = 0
    while i < len(tokens):
        token = tokens[i]
        edit_type = _FLAGS.get(token)
        if edit_type is None or i + 1 >= len(tokens):
            return (Unknown(token),)
        edits.append(edit_type(tokens[i + 1]))
        i += 2
    return tuple(edits)


def apply_edit(contact: Contact, edit: FieldEdit) -> Contact:
    if isinstance(edit, SetFirstName):
        return replace(contact, first_name=edit.value)
    if isinstance(edit, SetLastName):
        return replace(contact, last_name=edit.value)
    if isinstance(edit, SetPhoneNumber):
        return replace(contact, phone_number=edit.value)
    if isinstance(edit, SetEmail):
        return replace(contact, email=edit.value)
    return contact


def apply_edits(contact: Contact, edits: Iterable[FieldEdit]) -> Contact:
    """Fold edits left to right over contact; a later edit of the same field wins."""
    for edit in edits:
        contact = apply_edit(contact, edit)
    return contact
