"""Domain layer: the Contact entity, errors and field validation. No outer dependencies."""

from phonebook.domain.entities import MAX_FIELD_LENGTH, Contact
from phonebook.domain.errors import (
    ContactTooLarge,
    ContactValidationError,
    ErrorKind,
    InvalidFirstName,
    InvalidLastName,
    InvalidObjectID,
    InvalidPage,
    InvalidPhone,
    InvalidSearchKey,
    MissingFirstName,
    MissingID,
    MissingPhone,
    NothingToUpdate,
    PhoneBookError,
    StoreError,
)
from phonebook.domain.validation import (
    validate_contact,
    validate_contact_update,
    validate_field_size,
)

__all__ = [
    "MAX_FIELD_LENGTH",
    "Contact",
    "ContactTooLarge",
    "ContactValidationError",
    "ErrorKind",
    "InvalidFirstName",
    "InvalidLastName",
    "InvalidObjectID",
    "InvalidPage",
    "InvalidPhone",
    "InvalidSearchKey",
    "MissingFirstName",
    "MissingID",
    "MissingPhone",
    "NothingToUpdate",
    "PhoneBookError",
    "StoreError",
    "validate_contact",
    "validate_contact_update",
    "validate_field_size",
]
