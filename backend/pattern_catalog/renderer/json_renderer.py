"""
Record export, in the same shape the loader reads.
"""
from __future__ import annotations

import json
from typing import Iterable, Optional

from pattern_catalog.entries import PatternEntry
from pattern_catalog.patterns.registry import Catalog


def entry_to_record(entry: PatternEntry) -> dict:
    return {
        "name": entry.name,
        "category": entry.category_label,
        "summary": entry.summary,
        "applicability": list(entry.applicability),
        "knownUses": list(entry.known_uses),
        "notes": list(entry.notes),
        "relatedPatterns": sorted(entry.related_patterns),
        "tags": list(entry.tags),
    }


def render_records(
    catalog: Catalog, entries: Optional[Iterable[PatternEntry]] = None
) -> list[dict]:
    if entries is None:
        entries = catalog.list_all()
    return [entry_to_record(e) for e in entries]


def render_json(
    catalog: Catalog, entries: Optional[Iterable[PatternEntry]] = None
) -> str:
    payload = {"patterns": render_records(catalog, entries)}
    return json.dumps(payload, indent=2, ensure_ascii=False) + "\n"
