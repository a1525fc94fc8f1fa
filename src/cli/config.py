"""Settings from environment (.env is loaded by the entry point) and first-run bootstrap."""

import os
from collections.abc import Mapping
from dataclasses import dataclass
from pathlib import Path

DEFAULT_BOOK_PATH = Path.home() / ".contactbook" / "contacts.data"
DEFAULT_LOG_LEVEL = "WARNING"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass(frozen=True)
class Settings:
    book_path: Path
    log_level: str = DEFAULT_LOG_LEVEL
    default_region: str | None = None


def load_settings(environ: Mapping[str, str] | None = None) -> Settings:
    """Build Settings from CONTACTS_BOOK_PATH, CONTACTS_LOG_LEVEL, CONTACTS_DEFAULT_REGION."""
    if environ is None:
        environ = os.environ
    path = environ.get("CONTACTS_BOOK_PATH", "").strip()
    book_path = Path(path).expanduser() if path else DEFAULT_BOOK_PATH
    log_level = environ.get("CONTACTS_LOG_LEVEL", "").strip().upper()
    if log_level not in LOG_LEVELS:
        log_level = DEFAULT_LOG_LEVEL
    region = environ.get("CONTACTS_DEFAULT_REGION", "").strip().upper() or None
    return Settings(book_path=book_path, log_level=log_level, default_region=region)


def ensure_book(path: Path) -> Path:
    """Create the book's directory and an empty book if missing. Idempotent."""
    if not path.exists():
        path.parent.mkdir(parents=True, exist_ok=True)
        path.touch()
    return path
