"""In-memory implementation of ContactStore (no DB)."""

from collections.abc import Mapping

from bson import ObjectId

from phonebook.domain import Contact


class InMemoryContactStore:
    """Stores contact documents in memory. Order preserved by insertion.
    Ids are real ObjectIds so the same id checks apply as with MongoDB.
    """

    def __init__(self) -> None:
        self._documents: dict[str, dict[str, str]] = {}

    def find(
        self, filter: Mapping[str, str], *, skip: int = 0, limit: int = 0
    ) -> list[Contact]:
        matches = [
            Contact.from_document({"_id": contact_id, **document})
            for contact_id, document in self._documents.items()
            if all(
                (contact_id if key == "_id" else document.get(key)) == value
                for key, value in filter.items()
            )
        ]
        matches = matches[skip:]
        return matches[:limit] if limit else matches

    def insert(self, contact: Contact) -> str:
        contact_id = str(ObjectId())
        self._documents[contact_id] = contact.to_document()
        return contact_id

    def update(self, contact_id: str, fields: Mapping[str, str]) -> int:
        document = self._documents.get(contact_id)
        if document is None:
            return 0
        # MongoDB reports 0 modified when $set leaves the document unchanged.
        if all(document.get(key) == value for key, value in fields.items()):
            return 0
        document.update(fields)
        return 1

    def delete(self, contact_id: str) -> int:
        return 1 if self._documents.pop(contact_id, None) is not None else 0

    def __len__(self) -> int:
        return len(self._documents)
