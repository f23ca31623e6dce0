from pattern_catalog.entries.errors import (
    CatalogError,
    CatalogLoadError,
    DuplicateNameError,
    EntryNotFoundError,
    EntryValidationError,
    ErrorKind,
    ValidationError,
)
from pattern_catalog.entries.model import Category, PatternEntry, validate_entry
from pattern_catalog.entries.validation import ValidationResult

__all__ = [
    "CatalogError",
    "CatalogLoadError",
    "Category",
    "DuplicateNameError",
    "EntryNotFoundError",
    "EntryValidationError",
    "ErrorKind",
    "PatternEntry",
    "ValidationError",
    "ValidationResult",
    "validate_entry",
]
