"""Domain entities: Contact."""

from dataclasses import dataclass, field, fields

# Default upper bound for any single contact field, in characters.
MAX_FIELD_LENGTH = 100

# Attribute name -> document/JSON key. The identifier is stored as "_id".
_DOCUMENT_KEYS = {
    "first_name": "firstName",
    "last_name": "lastName",
    "phone": "phone",
    "address": "address",
}


@dataclass(frozen=True)
class Contact:
    """
    A phonebook record.
    The id is assigned by the store on insert and never changes afterwards.
    Empty strings mean "not supplied".
    """

    id: str | None = None
    first_name: str = field(default="")
    last_name: str = field(default="")
    phone: str = field(default="")
    address: str = field(default="")

    def string_fields(self) -> list[str]:
        """Return every user-supplied string field (id excluded)."""
        return [getattr(self, f.name) for f in fields(self) if f.name != "id"]

    def to_document(self) -> dict[str, str]:
        """Return the non-empty fields keyed as stored. The id is never included."""
        return {
            key: getattr(self, attr)
            for attr, key in _DOCUMENT_KEYS.items()
            if getattr(self, attr)
        }

    def to_dict(self) -> dict[str, str]:
        """JSON form: document keys plus "_id" when assigned."""
        out = {"_id": self.id} if self.id else {}
        out.update(self.to_document())
        return out

    @classmethod
    def from_document(cls, document: dict) -> "Contact":
        raw_id = document.get("_id")
        return cls(
            id=str(raw_id) if raw_id is not None else None,
            **{attr: str(document.get(key) or "") for attr, key in _DOCUMENT_KEYS.items()},
        )
