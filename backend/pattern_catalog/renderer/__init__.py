"""
Renderers - turn a catalog back into documents.
"""

from pattern_catalog.renderer.markdown_renderer import SECTIONS, render_markdown
from pattern_catalog.renderer.json_renderer import entry_to_record, render_json, render_records

__all__ = [
    "SECTIONS",
    "entry_to_record",
    "render_json",
    "render_markdown",
    "render_records",
]
