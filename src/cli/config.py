"""Runtime settings read from the environment (after .env is loaded by the entry point)."""

import os
from dataclasses import dataclass
from pathlib import Path

from cli.messages import get_messages_path

CALL_HISTORY_FILE = "call_history_db.json"
CONTACT_LIST_FILE = "contact_list.json"
EXPORT_FILE = "exported_contacts.txt"


def _env_path(name: str, default: str) -> Path:
    value = os.environ.get(name, "").strip()
    return Path(value or default)


@dataclass(frozen=True)
class Settings:
    call_history_file: Path
    contacts_file: Path
    export_file: Path
    messages_path: Path
    log_level: str = "WARNING"

    @classmethod
    def from_env(cls) -> "Settings":
        return cls(
            call_history_file=_env_path("SPHONE_CALL_HISTORY_FILE", CALL_HISTORY_FILE),
            contacts_file=_env_path("SPHONE_CONTACTS_FILE", CONTACT_LIST_FILE),
            export_file=_env_path("SPHONE_EXPORT_FILE", EXPORT_FILE),
            messages_path=get_messages_path(),
            log_level=os.environ.get("SPHONE_LOG_LEVEL", "WARNING").strip().upper() or "WARNING",
        )
