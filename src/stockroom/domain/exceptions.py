"""Domain-level exceptions.

All integrity and validation failures are expressed as subclasses of
DomainException so the CLI layer can catch them uniformly and display
user-friendly messages.  Each class carries a stable ``kind`` so callers
can branch on the failure kind without matching on the class itself.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    DOMAIN = "domain"
    DUPLICATE_KEY = "duplicate_key"
    NOT_FOUND = "not_found"
    INVALID_QUANTITY = "invalid_quantity"
    INVALID_FIELD = "invalid_field"
    MALFORMED_RECORD = "malformed_record"
    MISSING_FIELD = "missing_field"


class DomainException(Exception):
    """Base class for all domain errors.

    ``position`` is the 1-based line or record number the error refers to,
    and ``field`` the name of the offending field, when known.
    """

    kind = ErrorKind.DOMAIN

    def __init__(
        self,
        message: str,
        *,
        position: int | None = None,
        field: str | None = None,
    ) -> None:
        self.message = message
        self.position = position
        self.field = field
        super().__init__(message)


class DuplicateKeyError(DomainException):
    """An entity with the same id is already stored."""

    kind = ErrorKind.DUPLICATE_KEY


class NotFoundError(DomainException):
    """A requested entity does not exist."""

    kind = ErrorKind.NOT_FOUND


class InvalidQuantityError(DomainException):
    """A quantity update would make stock negative."""

    kind = ErrorKind.INVALID_QUANTITY


class InvalidFieldError(DomainException):
    """A field failed domain validation."""

    kind = ErrorKind.INVALID_FIELD


class MalformedRecordError(DomainException):
    """A persisted or ingested record could not be decoded."""

    kind = ErrorKind.MALFORMED_RECORD


class MissingFieldError(MalformedRecordError):
    """An ingested record lacks one of its required fields."""

    kind = ErrorKind.MISSING_FIELD
