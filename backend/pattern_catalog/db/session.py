from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker

from pattern_catalog import config


def make_engine(url: str = None):
    url = url or config.CATALOG_DB_URL
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    return create_engine(url, connect_args=connect_args)


def make_session_factory(engine):
    return sessionmaker(bind=engine, autoflush=False, expire_on_commit=False)
