"""Tests for settings and first-run bootstrap."""

from pathlib import Path

from cli.config import DEFAULT_BOOK_PATH, ensure_book, load_settings


def test_defaults_when_env_empty():
    settings = load_settings({})
    assert settings.book_path == DEFAULT_BOOK_PATH
    assert settings.log_level == "WARNING"
    assert settings.default_region is None


def test_values_from_env(tmp_path):
    settings = load_settings(
        {
            "CONTACTS_BOOK_PATH": str(tmp_path / "book.data"),
            "CONTACTS_LOG_LEVEL": "debug",
            "CONTACTS_DEFAULT_REGION": " us ",
        }
    )
    assert settings.book_path == tmp_path / "book.data"
    assert settings.log_level == "DEBUG"
    assert settings.default_region == "US"


def test_unknown_log_level_falls_back_to_default():
    assert load_settings({"CONTACTS_LOG_LEVEL": "chatty"}).log_level == "WARNING"


def test_book_path_expands_user(monkeypatch, tmp_path):
    monkeypatch.setenv("HOME", str(tmp_path))
    settings = load_settings({"CONTACTS_BOOK_PATH": "~/book.data"})
    assert settings.book_path == Path(tmp_path) / "book.data"


def test_ensure_book_creates_directory_and_file(tmp_path):
    path = tmp_path / ".contactbook" / "contacts.data"
    assert ensure_book(path) == path
    assert path.is_file()
    assert path.read_text(encoding="utf-8") == ""


def test_ensure_book_keeps_existing_content(tmp_path):
    path = tmp_path / "contacts.data"
    path.write_text("alice|Alice|Smith|111|a@example.com\n", encoding="utf-8")
    ensure_book(path)
    assert path.read_text(encoding="utf-8") == "alice|Alice|Smith|111|a@example.com\n"
