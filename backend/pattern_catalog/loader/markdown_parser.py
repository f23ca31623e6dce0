# backend/pattern_catalog/loader/markdown_parser.py
"""
Markdown Parser - reads rendered catalog documents back into records

Expected layout (what render_markdown writes):

    # <Category>
    ## <Pattern name>
    <summary paragraph>
    ### Applicability | Known Uses | Notes | Related Patterns | Tags
    - item

Text before the first category heading is ignored, as is anything
inside fenced code blocks.
"""

import re
from typing import Dict, List, Optional, Tuple

from pattern_catalog.loader.record_loader import LoadReport, load_located
from pattern_catalog.patterns.registry import Catalog
from pattern_catalog.renderer.markdown_renderer import SECTIONS

_HEADING_RE = re.compile(r"^(#{1,3})\s+(.+?)\s*$")
_BULLET_RE = re.compile(r"^\s*[-*+]\s+(.*?)\s*$")
_FENCE_RE = re.compile(r"^\s*(```|~~~)")

_SECTION_KEYS = {heading.lower(): attr for heading, attr in SECTIONS}


class _RecordBuilder:
    def __init__(self, name: str, category: str, line: int):
        self.name = name
        self.category = category
        self.line = line
        self.summary_lines: List[str] = []
        self.lists: Dict[str, List[str]] = {attr: [] for _, attr in SECTIONS}
        self.section: Optional[str] = None
        self.in_unknown_section = False

    def add_line(self, text: str) -> None:
        if self.in_unknown_section:
            return

        if self.section is None:
            self.summary_lines.append(text.strip())
            return

        items = self.lists[self.section]
        bullet = _BULLET_RE.match(text)
        if bullet:
            items.append(bullet.group(1))
        elif items:
            # continuation of a wrapped bullet
            items[-1] = f"{items[-1]} {text.strip()}"

    def build(self) -> dict:
        return {
            "name": self.name,
            "category": self.category,
            "summary": " ".join(self.summary_lines),
            "applicability": self.lists["applicability"],
            "known_uses": self.lists["known_uses"],
            "notes": self.lists["notes"],
            "related_patterns": self.lists["related_patterns"],
            "tags": self.lists["tags"],
        }


def parse_markdown(text: str, source: str = "document") -> List[Tuple[str, dict]]:
    """Split a Markdown document into (location, record) pairs"""
    records: List[Tuple[str, dict]] = []
    category: Optional[str] = None
    current: Optional[_RecordBuilder] = None
    in_fence = False

    def flush():
        if current is not None:
            records.append((f"{source}:{current.line}", current.build()))

    for lineno, line in enumerate(text.splitlines(), start=1):
        if _FENCE_RE.match(line):
            in_fence = not in_fence
            continue
        if in_fence or not line.strip():
            continue

        heading = _HEADING_RE.match(line)
        if heading:
            level, title = len(heading.group(1)), heading.group(2)
            if level == 1:
                flush()
                current = None
                category = title
            elif level == 2:
                flush()
                current = _RecordBuilder(title, category or "", lineno)
            elif level == 3 and current is not None:
                key = _SECTION_KEYS.get(title.lower())
                current.section = key
                current.in_unknown_section = key is None
            continue

        if current is not None:
            current.add_line(line)

    flush()
    return records


def load_markdown(catalog: Catalog, text: str, source: str = "document") -> LoadReport:
    """Parse a Markdown catalog document and import every record in it"""
    return load_located(catalog, parse_markdown(text, source))
