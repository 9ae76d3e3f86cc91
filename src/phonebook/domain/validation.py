"""Contact field checks run before anything reaches the store."""

import re

from phonebook.domain.entities import Contact
from phonebook.domain.errors import (
    InvalidFirstName,
    InvalidLastName,
    InvalidPhone,
    MissingFirstName,
    MissingPhone,
)

_ONLY_LETTERS = re.compile(r"[A-Za-z]+")
_ONLY_DIGITS = re.compile(r"[0-9]+")


def _letters(value: str) -> bool:
    return _ONLY_LETTERS.fullmatch(value) is not None


def _digits(value: str) -> bool:
    return _ONLY_DIGITS.fullmatch(value) is not None


def validate_contact(contact: Contact) -> None:
    """Raise the first failing check, in order: first name, last name, phone.

    First name and phone are required; last name is checked only when present.
    Address is free text.
    """
    if not contact.first_name:
        raise MissingFirstName()
    if not _letters(contact.first_name):
        raise InvalidFirstName()
    if contact.last_name and not _letters(contact.last_name):
        raise InvalidLastName()
    if not contact.phone:
        raise MissingPhone()
    if not _digits(contact.phone):
        raise InvalidPhone()


def validate_contact_update(contact: Contact) -> None:
    """Check only the fields a partial update supplies. Nothing is required."""
    if contact.first_name and not _letters(contact.first_name):
        raise InvalidFirstName()
    if contact.last_name and not _letters(contact.last_name):
        raise InvalidLastName()
    if contact.phone and not _digits(contact.phone):
        raise InvalidPhone()


def validate_field_size(contact: Contact | None, max_length: int) -> bool:
    """True iff every string field is at most max_length characters. None is invalid."""
    if contact is None:
        return False
    return all(len(value) <= max_length for value in contact.string_fields())
