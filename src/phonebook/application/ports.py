"""Application ports (interfaces). Implemented by infrastructure adapters."""

from collections.abc import Mapping, Sequence
from typing import Protocol

from phonebook.domain import Contact


class ContactStore(Protocol):
    """Persists and queries contact documents. Raises StoreError on driver failure."""

    def find(
        self, filter: Mapping[str, str], *, skip: int = 0, limit: int = 0
    ) -> list[Contact]:
        """Return contacts whose stored fields equal every filter value, in store order.
        limit=0 means no limit."""
        ...

    def insert(self, contact: Contact) -> str:
        """Store a new contact and return its assigned 24-hex id."""
        ...

    def update(self, contact_id: str, fields: Mapping[str, str]) -> int:
        """Overwrite the given fields of one contact. Returns the modified count."""
        ...

    def delete(self, contact_id: str) -> int:
        """Remove one contact. Returns the deleted count."""
        ...


class PhoneBook(Protocol):
    """Contact use cases consumed by the HTTP layer."""

    def get_contacts_with_pagination(
        self, page_param: Sequence[str] | None
    ) -> list[Contact]:
        ...

    def search_contacts(self, query: Mapping[str, Sequence[str]]) -> list[Contact]:
        ...

    def add_contact(self, contact: Contact) -> str:
        ...

    def update_contact(self, contact_id: str, contact: Contact) -> int:
        ...

    def delete_contact(self, contact_id: str) -> int:
        ...
