"""Infrastructure layer: concrete implementations of application ports."""

from phonebook.infrastructure.memory_store import InMemoryContactStore
from phonebook.infrastructure.persistence.mongo_store import MongoContactStore

__all__ = [
    "InMemoryContactStore",
    "MongoContactStore",
]
