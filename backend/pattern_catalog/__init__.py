# backend/pattern_catalog/__init__.py
"""
Pattern Catalog

A catalog of design patterns and programming paradigms that can be:
- Loaded from JSON or Markdown documents
- Validated, including cross-references between patterns
- Queried by name, category, tag or free text
- Rendered back to Markdown
"""

__version__ = "0.1.0"
