"""JSON-file implementation of Repository.

The file always holds the full serialized list (pretty-printed array).
Load and save failures are logged and never raised: the in-memory list stays
authoritative for the rest of the session.
"""

import logging
from pathlib import Path
from typing import Generic, TypeVar

from pydantic import TypeAdapter
from pydantic_core import PydanticSerializationError

logger = logging.getLogger(__name__)

T = TypeVar("T")


class JsonFileRepository(Generic[T]):
    """Loads a list of item_type from path at construction; save_changes rewrites the file."""

    def __init__(self, path: Path | str, item_type: type[T]) -> None:
        self._path = Path(path)
        self._adapter: TypeAdapter[list[T]] = TypeAdapter(list[item_type])
        self._items: list[T] = []
        self.load_warning: str | None = None
        self.load()

    @property
    def path(self) -> Path:
        return self._path

    def get_all(self) -> list[T]:
        return self._items

    def add(self, item: T) -> None:
        self._items.append(item)

    def save_changes(self) -> bool:
        try:
            payload = self._adapter.dump_json(self._items, indent=2)
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_bytes(payload)
        except (OSError, PydanticSerializationError) as e:
            logger.warning("Could not save data to %s: %s", self._path, e)
            return False
        return True

    def load(self) -> None:
        self.load_warning = None
        if not self._path.exists():
            self._items = []
            return
        try:
            raw = self._path.read_bytes()
            self._items = self._adapter.validate_json(raw)
        except (OSError, ValueError) as e:
            # ValidationError is a ValueError; covers malformed JSON and bad records.
            self.load_warning = f"Could not load data from {self._path}: {e}"
            logger.warning("Could not load data from %s: %s", self._path, e)
            self._items = []
