"""
Console phone book and dialer.
Run: python -m cli (from repo root, with .env or env vars set), or the sphone script.
"""
import asyncio
import logging
from pathlib import Path

from dotenv import load_dotenv

# Repo root: from src/cli/__main__.py go up to repo root
_REPO_ROOT = Path(__file__).resolve().parent.parent.parent
# Load .env from repo root or current dir
for path in (_REPO_ROOT / ".env", Path.cwd() / ".env"):
    if path.exists():
        load_dotenv(path)
        break

from cli.app import build_application
from cli.config import Settings
from cli.messages import load_catalog

logger = logging.getLogger(__name__)


def main() -> None:
    settings = Settings.from_env()
    logging.basicConfig(
        format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        level=getattr(logging, settings.log_level, logging.WARNING),
    )
    catalog = load_catalog(settings.messages_path)
    app = build_application(settings, catalog)
    logger.info(
        "Contacts: %s, call history: %s", settings.contacts_file, settings.call_history_file
    )
    try:
        asyncio.run(app.run())
    except KeyboardInterrupt:
        print()


if __name__ == "__main__":
    main()
