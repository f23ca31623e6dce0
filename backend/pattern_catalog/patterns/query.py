# backend/pattern_catalog/patterns/query.py
"""
Query Layer - read-only lookups over a Catalog
"""

from typing import List, Optional, Union

from pattern_catalog.entries import (
    Category,
    EntryValidationError,
    ErrorKind,
    PatternEntry,
    ValidationError,
)
from pattern_catalog.patterns.registry import Catalog


def _resolve_category(category: Union[Category, str]) -> Category:
    parsed = Category.parse(category)
    if parsed is None:
        raise EntryValidationError(
            [ValidationError(ErrorKind.INVALID_CATEGORY, f"unknown category '{category}'", "category")]
        )
    return parsed


class CatalogQuery:
    """
    Read-only view of a catalog

    Every method goes through the catalog's locked accessors and returns a
    fresh list, so results can be iterated any number of times.
    """

    def __init__(self, catalog: Catalog):
        self.catalog = catalog

    def by_name(self, name: str) -> Optional[PatternEntry]:
        """Exact, case-sensitive lookup"""
        return self.catalog.get(name)

    def by_category(self, category: Union[Category, str]) -> List[PatternEntry]:
        """Entries of one category in insertion order; empty if there are none"""
        return self.catalog.get_by_category(_resolve_category(category))

    def by_tag(self, tag: str) -> List[PatternEntry]:
        """Entries carrying `tag` (case-insensitive), in insertion order"""
        return self.catalog.get_by_tag(tag)

    def search(self, text: str) -> List[PatternEntry]:
        """Case-insensitive substring match on name and summary, in insertion order"""
        needle = text.lower()
        return [
            entry
            for entry in self.catalog.list_all()
            if needle in entry.name.lower() or needle in entry.summary.lower()
        ]


def by_name(catalog: Catalog, name: str) -> Optional[PatternEntry]:
    return CatalogQuery(catalog).by_name(name)


def by_category(catalog: Catalog, category: Union[Category, str]) -> List[PatternEntry]:
    return CatalogQuery(catalog).by_category(category)


def by_tag(catalog: Catalog, tag: str) -> List[PatternEntry]:
    return CatalogQuery(catalog).by_tag(tag)


def search(catalog: Catalog, text: str) -> List[PatternEntry]:
    return CatalogQuery(catalog).search(text)
