"""
Import of pattern records from JSON and Markdown documents.
"""

from pattern_catalog.loader.records import PatternRecord
from pattern_catalog.loader.record_loader import (
    LoadError,
    LoadReport,
    load_located,
    load_records,
    record_to_entry,
)
from pattern_catalog.loader.markdown_parser import load_markdown, parse_markdown
from pattern_catalog.loader.file_loader import load_json_text, load_path

__all__ = [
    "LoadError",
    "LoadReport",
    "PatternRecord",
    "load_json_text",
    "load_located",
    "load_markdown",
    "load_path",
    "load_records",
    "parse_markdown",
    "record_to_entry",
]
