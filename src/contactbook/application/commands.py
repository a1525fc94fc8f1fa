"""Command-line arguments -> one Command. Unrecognized input is Help."""

from collections.abc import Sequence
from dataclasses import dataclass

from contactbook.application.edits import FieldEdit, parse_edits


@dataclass(frozen=True)
class Add:
    pass


@dataclass(frozen=True)
class Remove:
    username: str


@dataclass(frozen=True)
class SearchById:
    username: str


@dataclass(frozen=True)
class SearchByName:
    name: str


@dataclass(frozen=True)
class SearchByEmail:
    email: str


@dataclass(frozen=True)
class SearchByNumber:
    number: str


@dataclass(frozen=True)
class List:
    pass


@dataclass(frozen=True)
class Update:
    username: str
    edits: tuple[FieldEdit, ...] = ()


@dataclass(frozen=True)
class Help:
    pass


Command = (
    Add
    | Remove
    | SearchById
    | SearchByName
    | SearchByEmail
    | SearchByNumber
    | List
    | Update
    | Help
)

_SEARCHES = {
    "id": SearchById,
    "name": SearchByName,
    "email": SearchByEmail,
    "number": SearchByNumber,
}


def parse_command(tokens: Sequence[str]) -> Command:
    """Map argv-style tokens to a Command. Never raises."""
    tokens = list(tokens)
    if not tokens:
        return Help()
    head, rest = tokens[0], tokens[1:]
    if head == "add" and not rest:
        return Add()
    if head == "remove" and len(rest) == 1:
        return Remove(username=rest[0])
    if head == "search" and len(rest) == 2 and rest[0] in _SEARCHES:
        return _SEARCHES[rest[0]](rest[1])
    if head == "list":
        return List()
    if head == "update" and rest:
        return Update(username=rest[0], edits=parse_edits(rest[1:]))
    return Help()
