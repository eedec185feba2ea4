"""Infrastructure layer: concrete implementations of application ports."""

from sphone.infrastructure.json_repository import JsonFileRepository
from sphone.infrastructure.memory_repository import InMemoryRepository

__all__ = [
    "InMemoryRepository",
    "JsonFileRepository",
]
