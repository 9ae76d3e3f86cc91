"""Error taxonomy. Every error carries the kind the API maps to an HTTP status."""

from enum import Enum


class ErrorKind(str, Enum):
    BAD_REQUEST = "BadRequest"
    INTERNAL_SERVER_ERROR = "InternalServerError"


class PhoneBookError(Exception):
    """Base error. Subclasses fix `kind` and usually the message."""

    kind: ErrorKind = ErrorKind.BAD_REQUEST
    message: str = ""

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message or self.message)


class ContactValidationError(PhoneBookError):
    """A contact failed a field check."""


class MissingFirstName(ContactValidationError):
    message = "can't add contact without first name"


class InvalidFirstName(ContactValidationError):
    message = "invalid first name. name should include letters only"


class InvalidLastName(ContactValidationError):
    message = "invalid last name. name should include letters only"


class MissingPhone(ContactValidationError):
    message = "can't add contact without phone number"


class InvalidPhone(ContactValidationError):
    message = "invalid phone number. phone should include digits only"


class ContactTooLarge(ContactValidationError):
    message = "too big contact field"


class MissingID(PhoneBookError):
    message = "doesn't sent contact id"


class InvalidObjectID(PhoneBookError):
    message = "the provided hex string is not a valid ObjectID"


class InvalidPage(PhoneBookError):
    message = "page number must be positive"


class InvalidSearchKey(PhoneBookError):
    message = "invalid search parameter"


class NothingToUpdate(PhoneBookError):
    message = "no contact fields to update"


class StoreError(PhoneBookError):
    """The database layer failed. Wraps the driver exception as __cause__."""

    kind = ErrorKind.INTERNAL_SERVER_ERROR
    message = "contact store failure"
