"""
Phonebook core: clean-architecture layout.

- domain: Contact entity, errors, field validation. No outer dependencies.
- application: use cases (PhoneBookService), ports (ContactStore, PhoneBook).
- infrastructure: adapters (InMemoryContactStore, MongoContactStore).
"""

from phonebook.application import ContactStore, PhoneBook, PhoneBookService
from phonebook.config import Settings
from phonebook.domain import Contact, ErrorKind, PhoneBookError
from phonebook.infrastructure import InMemoryContactStore, MongoContactStore

__all__ = [
    "Contact",
    "ContactStore",
    "ErrorKind",
    "InMemoryContactStore",
    "MongoContactStore",
    "PhoneBook",
    "PhoneBookError",
    "PhoneBookService",
    "Settings",
]
