"""
Error taxonomy for the pattern catalog.

Every error raised by the catalog, the loader or the query layer derives
from CatalogError and carries an ErrorKind plus the HTTP status code the
API layer turns it into.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ErrorKind(Enum):
    EMPTY_FIELD = "empty_field"
    INVALID_CATEGORY = "invalid_category"
    DUPLICATE_NAME = "duplicate_name"
    NOT_FOUND = "not_found"
    DANGLING_REFERENCE = "dangling_reference"
    MALFORMED_RECORD = "malformed_record"


@dataclass
class ValidationError:
    kind: ErrorKind
    message: str
    field: str = ""


class CatalogError(Exception):
    """Base error for all catalog errors."""

    status_code: int = 500
    kind: ErrorKind = ErrorKind.MALFORMED_RECORD

    def __init__(self, message: str = "", kind: ErrorKind | None = None):
        self.message = message
        if kind is not None:
            self.kind = kind
        super().__init__(message)


class EntryValidationError(CatalogError):
    """An entry failed field validation (empty field, unknown category)."""

    status_code = 422

    def __init__(self, errors: list[ValidationError]):
        self.errors = list(errors)
        first = self.errors[0] if self.errors else None
        super().__init__(
            "; ".join(e.message for e in self.errors) or "invalid entry",
            kind=first.kind if first else ErrorKind.EMPTY_FIELD,
        )


class DuplicateNameError(CatalogError):
    """An entry with the same name is already in the catalog."""

    status_code = 409
    kind = ErrorKind.DUPLICATE_NAME


class EntryNotFoundError(CatalogError):
    """No entry with the requested name."""

    status_code = 404
    kind = ErrorKind.NOT_FOUND


class CatalogLoadError(CatalogError):
    """A whole import source could not be read or decoded."""

    status_code = 400
    kind = ErrorKind.MALFORMED_RECORD
