from typing import Dict, Iterable, List, Optional

from pattern_catalog.entries import Category, PatternEntry
from pattern_catalog.patterns.registry import Catalog


# Sublists in rendering order: (heading, attribute)
SECTIONS = (
    ("Applicability", "applicability"),
    ("Known Uses", "known_uses"),
    ("Notes", "notes"),
    ("Related Patterns", "related_patterns"),
    ("Tags", "tags"),
)


def _section_items(entry: PatternEntry, attr: str) -> List[str]:
    items = getattr(entry, attr)
    if attr == "related_patterns":
        return sorted(items)
    return list(items)


def _render_entry(entry: PatternEntry) -> List[str]:
    blocks = [f"## {entry.name}", entry.summary.strip()]

    for heading, attr in SECTIONS:
        items = _section_items(entry, attr)
        if not items:
            continue
        blocks.append(f"### {heading}")
        blocks.append("\n".join(f"- {item}" for item in items))

    return blocks


def render_markdown(
    catalog: Catalog,
    entries: Optional[Iterable[PatternEntry]] = None,
    title: Optional[str] = None,
) -> str:
    """
    Render a catalog (or a subset of its entries) as Markdown.

    Categories are top-level sections in a fixed order, and entries keep
    the order they are given in. The same input always produces the same
    bytes.
    """
    if entries is None:
        entries = catalog.list_all()

    groups: Dict[Category, List[PatternEntry]] = {cat: [] for cat in Category}
    for entry in entries:
        if isinstance(entry.category, Category):
            groups[entry.category].append(entry)

    blocks: List[str] = []
    if title:
        blocks.append(f"**{title}**")

    for category, members in groups.items():
        if not members:
            continue
        blocks.append(f"# {category.value}")
        for entry in members:
            blocks.extend(_render_entry(entry))

    return "\n\n".join(blocks) + "\n"
