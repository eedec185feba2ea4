"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Callable
from typing import Protocol, TypeVar

from sphone.domain import Contact

T = TypeVar("T")

# Resolves a cleaned phone number to the contact that holds it, if any.
ContactLookup = Callable[[str], Contact | None]


class Repository(Protocol[T]):
    """Ordered list of entities mirrored to a backing store.

    Mutations happen in memory; save_changes writes the full snapshot.
    """

    load_warning: str | None

    def get_all(self) -> list[T]:
        """Return the live in-memory list. Callers may insert into it before saving."""
        ...

    def add(self, item: T) -> None:
        """Append an item in memory only."""
        ...

    def save_changes(self) -> bool:
        """Write the full list to the backing store. Returns False if the write failed."""
        ...

    def load(self) -> None:
        """Replace the in-memory list with the stored snapshot (empty when missing or unreadable)."""
        ...
