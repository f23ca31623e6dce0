# backend/pattern_catalog/patterns/__init__.py
"""
Pattern store

The Catalog and its indexes, the read-only query layer over it, and the
built-in design pattern catalog.
"""

from pattern_catalog.patterns.registry import (
    Catalog,
    Violation,
    ViolationReport,
    get_catalog,
    reset_catalog,
)
from pattern_catalog.patterns.query import (
    CatalogQuery,
    by_category,
    by_name,
    by_tag,
    search,
)
from pattern_catalog.patterns.catalog import (
    PATTERN_CATALOG,
    build_catalog,
    builtin_entries,
    register_all_patterns,
)

__all__ = [
    "Catalog",
    "CatalogQuery",
    "PATTERN_CATALOG",
    "Violation",
    "ViolationReport",
    "build_catalog",
    "builtin_entries",
    "by_category",
    "by_name",
    "by_tag",
    "get_catalog",
    "register_all_patterns",
    "reset_catalog",
    "search",
]
