# backend/pattern_catalog/entries/model.py
"""
Entry Model - the shape of one pattern record

name, category, summary, tags and related_patterns are fixed at
construction. The free-text lists (applicability, known_uses, notes) only
ever grow, through amend().

Text is stored with its whitespace collapsed to single spaces, so a stored
entry renders to one line per field and reads back unchanged.
"""

import re
from dataclasses import dataclass, field
from enum import Enum
from typing import FrozenSet, Iterable, List, Optional, Tuple, Union

from .errors import EntryValidationError, ErrorKind, ValidationError
from .validation import ValidationResult


class Category(Enum):
    """Fixed classification of a pattern"""
    CREATIONAL = "Creational"
    STRUCTURAL = "Structural"
    BEHAVIORAL = "Behavioral"
    OTHER = "Other"

    @classmethod
    def parse(cls, value) -> Optional["Category"]:
        """Resolve a category from its value, ignoring case and padding. None if unknown."""
        if isinstance(value, cls):
            return value
        if not isinstance(value, str):
            return None
        needle = value.strip().lower()
        for category in cls:
            if category.value.lower() == needle:
                return category
        return None


_IMMUTABLE_FIELDS = ("name", "category", "summary", "tags", "related_patterns")
_AMENDABLE_FIELDS = ("applicability", "known_uses", "notes")

# Summary openings the Markdown reader would take for a heading or a code fence
_MARKUP_RE = re.compile(r"^(#{1,3}\s|```|~~~)")


def normalize_text(value):
    """Collapse runs of whitespace (newlines included) to single spaces. Non-strings pass through."""
    if isinstance(value, str):
        return " ".join(value.split())
    return value


@dataclass
class PatternEntry:
    """
    One design pattern or paradigm record

    related_patterns holds names only. The catalog resolves them at
    validation time and never owns the referenced entries.
    """
    name: str
    category: Union[Category, str]  # str only when it did not parse
    summary: str

    applicability: List[str] = field(default_factory=list)
    known_uses: List[str] = field(default_factory=list)
    notes: List[str] = field(default_factory=list)

    related_patterns: FrozenSet[str] = field(default_factory=frozenset)
    tags: Tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self):
        parsed = Category.parse(self.category)
        if parsed is not None:
            object.__setattr__(self, "category", parsed)
        object.__setattr__(self, "name", normalize_text(self.name))
        object.__setattr__(self, "summary", normalize_text(self.summary))
        for name in _AMENDABLE_FIELDS:
            object.__setattr__(self, name, [normalize_text(v) for v in getattr(self, name)])
        object.__setattr__(self, "tags", tuple(normalize_text(v) for v in self.tags))
        object.__setattr__(
            self, "related_patterns", frozenset(normalize_text(v) for v in self.related_patterns)
        )
        object.__setattr__(self, "_sealed", True)

    def __setattr__(self, key, value):
        if key in _IMMUTABLE_FIELDS and getattr(self, "_sealed", False):
            raise AttributeError(f"'{key}' is fixed once a PatternEntry is constructed")
        super().__setattr__(key, value)

    @property
    def category_label(self) -> str:
        if isinstance(self.category, Category):
            return self.category.value
        return str(self.category)

    def validate(self) -> ValidationResult:
        return validate_entry(self)

    def amend(
        self,
        notes: Iterable[str] = (),
        applicability: Iterable[str] = (),
        known_uses: Iterable[str] = (),
    ) -> None:
        """
        Append to the free-text lists. Nothing is appended if any item is invalid.

        A bare string counts as a single item.
        """
        additions = {
            "notes": _as_items(notes),
            "applicability": _as_items(applicability),
            "known_uses": _as_items(known_uses),
        }
        errors = []
        for field_name, items in additions.items():
            errors.extend(_check_items(field_name, items))
        if errors:
            raise EntryValidationError(errors)

        for field_name, items in additions.items():
            getattr(self, field_name).extend(normalize_text(v) for v in items)


def _as_items(values) -> list:
    if isinstance(values, str):
        return [values]
    return list(values)


def _is_blank(value) -> bool:
    return not isinstance(value, str) or not value.strip()


def _check_items(field_name: str, items: Iterable) -> List[ValidationError]:
    errors = []
    for i, item in enumerate(items):
        if not isinstance(item, str):
            errors.append(ValidationError(
                ErrorKind.MALFORMED_RECORD,
                f"{field_name}[{i}] must be a string, got {type(item).__name__}",
                field_name,
            ))
        elif not item.strip():
            errors.append(ValidationError(
                ErrorKind.EMPTY_FIELD,
                f"{field_name}[{i}] must be a non-empty string",
                field_name,
            ))
    return errors


def validate_entry(entry: PatternEntry) -> ValidationResult:
    """
    Field-level checks: non-empty name and summary, known category, and
    non-empty string items in every list.
    """
    errors = []

    if _is_blank(entry.name):
        errors.append(ValidationError(ErrorKind.EMPTY_FIELD, "name must not be empty", "name"))

    if _is_blank(entry.summary):
        errors.append(ValidationError(ErrorKind.EMPTY_FIELD, "summary must not be empty", "summary"))
    elif _MARKUP_RE.match(entry.summary):
        errors.append(
            ValidationError(
                ErrorKind.MALFORMED_RECORD,
                "summary must not start with a heading or code fence marker",
                "summary",
            )
        )

    if not isinstance(entry.category, Category):
        errors.append(
            ValidationError(
                ErrorKind.INVALID_CATEGORY,
                f"unknown category '{entry.category}'",
                "category",
            )
        )

    for field_name in _AMENDABLE_FIELDS + ("tags",):
        errors.extend(_check_items(field_name, getattr(entry, field_name)))

    refs = sorted(entry.related_patterns, key=repr)
    errors.extend(_check_items("related_patterns", refs))

    if errors:
        return ValidationResult.failure(errors)

    return ValidationResult.success()
