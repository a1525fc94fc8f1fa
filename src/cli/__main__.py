"""
Contact book CLI.
Run: python -m cli <command> (or the `contacts` script), with .env or env vars set.
"""
import logging
import sys
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/cli/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from cli.config import ensure_book, load_settings
from cli.dispatcher import dispatch
from contactbook.application import ContactStore, parse_command
from contactbook.infrastructure import FileLineStore

logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    settings = load_settings()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=settings.log_level,
    )
    book = ensure_book(settings.book_path)
    logger.debug("Using contact book %s", book)
    store = ContactStore(FileLineStore(book))
    command = parse_command(sys.argv[1:] if argv is None else argv)
    return dispatch(command, store, default_region=settings.default_region)


if __name__ == "__main__":
    raise SystemExit(main())
