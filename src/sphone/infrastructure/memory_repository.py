"""In-memory implementation of Repository (no file)."""

from typing import Generic, TypeVar

T = TypeVar("T")


class InMemoryRepository(Generic[T]):
    """Stores items in memory. Order preserved by insertion.
    save_count records how many snapshots would have been written.
    """

    def __init__(self, items: list[T] | None = None) -> None:
        self._seed = list(items or [])
        self._items: list[T] = []
        self.save_count = 0
        self.load_warning: str | None = None
        self.load()

    def get_all(self) -> list[T]:
        return self._items

    def add(self, item: T) -> None:
        self._items.append(item)

    def save_changes(self) -> bool:
        self.save_count += 1
        return True

    def load(self) -> None:
        self._items = list(self._seed)
