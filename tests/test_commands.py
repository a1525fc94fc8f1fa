"""Tests for command and field-edit parsing, and edit application."""

import pytest

from contactbook.application import (
    Add,
    Help,
    List,
    Remove,
    SearchByEmail,
    SearchById,
    SearchByName,
    SearchByNumber,
    SetEmail,
    SetFirstName,
    SetLastName,
    SetPhoneNumber,
    Unknown,
    Update,
    apply_edits,
    parse_command,
    parse_edits,
)
from contactbook.domain import Contact


def test_empty_tokens_is_help() -> None:
    assert parse_command([]) == Help()


def test_add() -> None:
    assert parse_command(["add"]) == Add()


def test_remove() -> None:
    assert parse_command(["remove", "alice"]) == Remove(username="alice")


@pytest.mark.parametrize(
    "kind, expected",
    [
        ("id", SearchById("alice")),
        ("name", SearchByName("alice")),
        ("email", SearchByEmail("alice")),
        ("number", SearchByNumber("alice")),
    ],
)
def test_search_variants(kind: str, expected) -> None:
    assert parse_command(["search", kind, "alice"]) == expected


def test_search_by_name_scenario() -> None:
    assert parse_command(["search", "name", "Bob"]) == SearchByName("Bob")


def test_list_ignores_trailing_tokens() -> None:
    assert parse_command(["list"]) == List()
    assert parse_command(["list", "everything", "now"]) == List()


def test_update_with_email() -> None:
    assert parse_command(["update", "alice", "--email", "a@b.com"]) == Update(
        username="alice", edits=(SetEmail("a@b.com"),)
    )


def test_update_without_flags() -> None:
    assert parse_command(["update", "alice"]) == Update(username="alice", edits=())


@pytest.mark.parametrize(
    "tokens",
    [
        ["add", "extra"],
        ["remove"],
        ["remove", "alice", "bob"],
        ["search"],
        ["search", "id"],
        ["search", "id", "alice", "extra"],
        ["search", "nickname", "al"],
        ["update"],
        ["help"],
        ["frobnicate"],
    ],
)
def test_unrecognized_input_is_help(tokens: list[str]) -> None:
    assert parse_command(tokens) == Help()


def test_parse_edits_empty() -> None:
    assert parse_edits([]) == ()


def test_parse_edits_keeps_flag_order() -> None:
    edits = parse_edits(
        [
            "--first-name", "Jo",
            "--last-name", "March",
            "--phone-number", "555",
            "--email", "jo@example.com",
            "--first-name", "Josephine",
        ]
    )
    assert edits == (
        SetFirstName("Jo"),
        SetLastName("March"),
        SetPhoneNumber("555"),
        SetEmail("jo@example.com"),
        SetFirstName("Josephine"),
    )


def test_parse_edits_unknown_flag_discards_earlier_edits() -> None:
    assert parse_edits(["--first-name", "Jo", "--bogus"]) == (Unknown("--bogus"),)


def test_parse_edits_flag_without_value_is_unknown() -> None:
    assert parse_edits(["--email"]) == (Unknown("--email"),)
    assert parse_edits(["--first-name", "Jo", "--email"]) == (Unknown("--email"),)


def test_parse_edits_stray_value_is_unknown() -> None:
    assert parse_edits(["Jo", "--first-name", "Jo"]) == (Unknown("Jo"),)


def test_apply_edits_later_edit_wins() -> None:
    prev = Contact(username="jo", first_name="J", last_name="M", phone_number="1", email="e")
    result = apply_edits(
        prev,
        (SetFirstName("Jo"), SetPhoneNumber("2"), SetFirstName("Josephine")),
    )
    assert result == Contact(
        username="jo", first_name="Josephine", last_name="M", phone_number="2", email="e"
    )
    assert prev.first_name == "J"


def test_apply_edits_ignores_unknown() -> None:
    prev = Contact(username="jo", first_name="J")
    assert apply_edits(prev, (Unknown("--bogus"),)) == prev
