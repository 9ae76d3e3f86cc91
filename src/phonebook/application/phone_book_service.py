"""Contact listing, search, creation, update and deletion over a ContactStore."""

import logging
from collections.abc import Mapping, Sequence

from bson import ObjectId

from phonebook.application.ports import ContactStore
from phonebook.domain import (
    Contact,
    InvalidObjectID,
    InvalidPage,
    InvalidSearchKey,
    MissingID,
    NothingToUpdate,
    validate_contact,
    validate_contact_update,
)

logger = logging.getLogger(__name__)

DEFAULT_LIMIT_PER_PAGE = 10

# skip is sent to MongoDB as a signed 64-bit int.
_MAX_INT64 = 2**63 - 1


def parse_page(page_param: Sequence[str] | None) -> int:
    """Return the 1-based page from the first value of a query parameter list.

    Missing or empty means page 1. Zero, negative and non-numeric values raise InvalidPage.
    """
    if not page_param:
        return 1
    raw = page_param[0]
    if raw == "":
        return 1
    # int() would also accept signs, spaces and underscores.
    if not (raw.isascii() and raw.isdigit()):
        raise InvalidPage(f"invalid page number: {raw}")
    page = int(raw)
    if page < 1:
        raise InvalidPage()
    if page > _MAX_INT64:
        raise InvalidPage(f"invalid page number: {raw}")
    return page


def _require_object_id(contact_id: str, action: str) -> str:
    if not contact_id:
        logger.warning("No contact id sent to %s", action)
        raise MissingID()
    if not ObjectId.is_valid(contact_id):
        raise InvalidObjectID()
    return contact_id


class PhoneBookService:
    """Maps contact operations to store queries. Store and page size are injected."""

    def __init__(
        self,
        store: ContactStore,
        *,
        limit_per_page: int = DEFAULT_LIMIT_PER_PAGE,
    ) -> None:
        if limit_per_page < 1:
            raise ValueError("limit_per_page must be positive.")
        self._store = store
        self._limit_per_page = limit_per_page

    def get_contacts_with_pagination(
        self, page_param: Sequence[str] | None
    ) -> list[Contact]:
        """Return one page of contacts; an empty list past the end of the data."""
        page = parse_page(page_param)
        skip = (page - 1) * self._limit_per_page
        if skip > _MAX_INT64:
            raise InvalidPage(f"invalid page number: {page}")
        return self._store.find(
            {},
            skip=skip,
            limit=self._limit_per_page,
        )

    def search_contacts(self, query: Mapping[str, Sequence[str]]) -> list[Contact]:
        """Exact match on every query key, first value only. No keys lists page 1."""
        if not query:
            return self.get_contacts_with_pagination(["1"])
        for key in query:
            # Query operators ($where, $ne, ...) must never reach the store;
            # BSON keys cannot hold NUL.
            if key.startswith("$") or "\x00" in key:
                raise InvalidSearchKey(f"invalid search parameter: {key}")
        filter = {key: values[0] for key, values in query.items() if values}
        return self._store.find(filter)

    def add_contact(self, contact: Contact) -> str:
        validate_contact(contact)
        inserted_id = self._store.insert(contact)
        logger.info("Inserted contact %s", inserted_id)
        return f"Inserted ID: {inserted_id}"

    def update_contact(self, contact_id: str, contact: Contact) -> int:
        """Overwrite only the non-empty fields of contact. Returns 0 if nothing matched."""
        _require_object_id(contact_id, "edit")
        validate_contact_update(contact)
        fields = contact.to_document()
        if not fields:
            raise NothingToUpdate()
        return self._store.update(contact_id, fields)

    def delete_contact(self, contact_id: str) -> int:
        """Returns the deleted count; 0 when no contact has this id."""
        _require_object_id(contact_id, "delete")
        return self._store.delete(contact_id)
