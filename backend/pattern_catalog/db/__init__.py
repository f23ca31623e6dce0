from pattern_catalog.db.models import Base, PatternRow
from pattern_catalog.db.repository import CatalogRepository
from pattern_catalog.db.session import make_engine, make_session_factory

__all__ = [
    "Base",
    "CatalogRepository",
    "PatternRow",
    "make_engine",
    "make_session_factory",
]
