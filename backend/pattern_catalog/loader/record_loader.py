# backend/pattern_catalog/loader/record_loader.py
"""
Record Loader - bulk import into a Catalog

Bad records are rejected one at a time and collected into a LoadReport;
the good ones are still added.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Tuple

from pydantic import ValidationError as PydanticValidationError

from pattern_catalog.entries import (
    CatalogError,
    EntryValidationError,
    ErrorKind,
    PatternEntry,
)
from pattern_catalog.loader.records import PatternRecord
from pattern_catalog.patterns.registry import Catalog

logger = logging.getLogger(__name__)


@dataclass
class LoadError:
    location: str
    kind: ErrorKind
    message: str

    def to_dict(self) -> dict:
        return {"location": self.location, "kind": self.kind.value, "message": self.message}


@dataclass
class LoadReport:
    added: List[str] = field(default_factory=list)
    errors: List[LoadError] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return not self.errors

    @property
    def error_pairs(self) -> List[Tuple[str, ErrorKind]]:
        return [(e.location, e.kind) for e in self.errors]

    def merge(self, other: "LoadReport") -> None:
        self.added.extend(other.added)
        self.errors.extend(other.errors)

    def to_dict(self) -> dict:
        return {
            "added": list(self.added),
            "errors": [e.to_dict() for e in self.errors],
        }


def _pydantic_errors(location: str, exc: PydanticValidationError) -> List[LoadError]:
    errors = []
    for err in exc.errors():
        where = ".".join(str(part) for part in err.get("loc", ())) or "record"
        kind = ErrorKind.EMPTY_FIELD if err.get("type") == "missing" else ErrorKind.MALFORMED_RECORD
        errors.append(LoadError(location, kind, f"{where}: {err.get('msg', 'invalid value')}"))
    return errors


def record_to_entry(record: PatternRecord) -> PatternEntry:
    return PatternEntry(
        name=record.name,
        category=record.category,
        summary=record.summary,
        applicability=record.applicability,
        known_uses=record.known_uses,
        notes=record.notes,
        related_patterns=set(record.related_patterns),
        tags=record.tags,
    )


def load_located(catalog: Catalog, located: Iterable[Tuple[str, Any]]) -> LoadReport:
    """Import (location, raw_record) pairs into `catalog`"""
    report = LoadReport()

    for location, raw in located:
        try:
            record = PatternRecord.model_validate(raw)
        except PydanticValidationError as exc:
            rejected = _pydantic_errors(location, exc)
            report.errors.extend(rejected)
            logger.warning(f"[Loader] Rejected {location}: {rejected[0].message}")
            continue

        entry = record_to_entry(record)
        try:
            catalog.add(entry)
        except EntryValidationError as exc:
            for err in exc.errors:
                report.errors.append(LoadError(location, err.kind, err.message))
            logger.warning(f"[Loader] Rejected {location}: {exc.message}")
            continue
        except CatalogError as exc:
            report.errors.append(LoadError(location, exc.kind, exc.message))
            logger.warning(f"[Loader] Rejected {location}: {exc.message}")
            continue

        report.added.append(entry.name)

    logger.debug(f"[Loader] Added {len(report.added)} patterns, {len(report.errors)} errors")
    return report


def load_records(catalog: Catalog, records: Iterable[Any], source: str = "records") -> LoadReport:
    """Import a sequence of record mappings; locations read `source[index]`"""
    return load_located(
        catalog,
        ((f"{source}[{i}]", raw) for i, raw in enumerate(records)),
    )
