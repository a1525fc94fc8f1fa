"""Application layer: contact store, command and field-edit models, ports. Depends only on domain."""

from contactbook.application.commands import (
    Add,
    Command,
    Help,
    List,
    Remove,
    SearchByEmail,
    SearchById,
    SearchByName,
    SearchByNumber,
    Update,
    parse_command,
)
from contactbook.application.contact_store import ContactStore
from contactbook.application.edits import (
    FieldEdit,
    SetEmail,
    SetFirstName,
    SetLastName,
    SetPhoneNumber,
    Unknown,
    apply_edits,
    parse_edits,
)
from contactbook.application.ports import LineStore

__all__ = [
    "Add",
    "Command",
    "ContactStore",
    "FieldEdit",
    "Help",
    "LineStore",
    "List",
    "Remove",
    "SearchByEmail",
    "SearchById",
    "SearchByName",
    "SearchByNumber",
    "SetEmail",
    "SetFirstName",
    "SetLastName",
    "SetPhoneNumber",
    "Unknown",
    "Update",
    "apply_edits",
    "parse_command",
    "parse_edits",
]
