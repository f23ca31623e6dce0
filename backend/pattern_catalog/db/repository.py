# backend/pattern_catalog/db/repository.py
"""
Catalog Repository - file-backed snapshots of a Catalog

save() replaces whatever snapshot is stored; load() feeds the stored rows
back through the record loader, so stored data gets the same validation
as any other import.
"""

import json
import logging

from sqlalchemy import delete, func, select

from pattern_catalog.db.models import Base, PatternRow
from pattern_catalog.db.session import make_engine, make_session_factory
from pattern_catalog.loader import LoadReport, load_records
from pattern_catalog.patterns.registry import Catalog
from pattern_catalog.renderer import entry_to_record

logger = logging.getLogger(__name__)

_LIST_KEYS = ("applicability", "knownUses", "notes", "relatedPatterns", "tags")


class CatalogRepository:
    def __init__(self, session_factory):
        self.session_factory = session_factory

    @classmethod
    def from_url(cls, url: str = None) -> "CatalogRepository":
        engine = make_engine(url)
        Base.metadata.create_all(bind=engine)
        return cls(make_session_factory(engine))

    def save(self, catalog: Catalog) -> int:
        """Replace the stored snapshot with the current catalog. Returns the row count."""
        records = [entry_to_record(e) for e in catalog.list_all()]

        with self.session_factory() as session:
            with session.begin():
                session.execute(delete(PatternRow))
                for position, record in enumerate(records):
                    session.add(
                        PatternRow(
                            position=position,
                            name=record["name"],
                            category=record["category"],
                            summary=record["summary"],
                            lists=json.dumps({k: record[k] for k in _LIST_KEYS}),
                        )
                    )

        logger.info(f"[Repository] Saved {len(records)} patterns")
        return len(records)

    def load(self, catalog: Catalog) -> LoadReport:
        """Import the stored snapshot into `catalog`"""
        with self.session_factory() as session:
            rows = session.execute(select(PatternRow).order_by(PatternRow.position)).scalars().all()
            records = []
            for row in rows:
                record = {"name": row.name, "category": row.category, "summary": row.summary}
                record.update(json.loads(row.lists or "{}"))
                records.append(record)

        report = load_records(catalog, records, source="db")
        logger.info(f"[Repository] Loaded {len(report.added)} patterns")
        return report

    def count(self) -> int:
        with self.session_factory() as session:
            return session.scalar(select(func.count()).select_from(PatternRow))
