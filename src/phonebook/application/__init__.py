"""Application layer: use cases and ports. Depends only on domain."""

from phonebook.application.phone_book_service import PhoneBookService, parse_page
from phonebook.application.ports import ContactStore, PhoneBook

__all__ = [
    "ContactStore",
    "PhoneBook",
    "PhoneBookService",
    "parse_page",
]
