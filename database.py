# backend/database.py
from typing import Optional
from sqlalchemy.engine import Engine
from sqlalchemy.pool import StaticPool
from sqlmodel import create_engine, SQLModel

from core.config import Settings, settings as default_settings


def build_engine(settings: Optional[Settings] = None) -> Engine:
    """Create the engine for the configured DATABASE_URL."""
    settings = settings or default_settings
    url = settings.DATABASE_URL
    kwargs = {"echo": settings.DATABASE_ECHO}
    if url.startswith("sqlite"):
        # FastAPI runs sync handlers in a threadpool
        kwargs["connect_args"] = {"check_same_thread": False}
        if url in ("sqlite://", "sqlite:///:memory:"):
            # one shared connection, otherwise every checkout sees an empty db
            kwargs["poolclass"] = StaticPool
    else:
        kwargs["pool_recycle"] = 3600
    return create_engine(url, **kwargs)

def create_db_and_tables(engine: Engine):
    """Initializes the database and creates all tables from models package"""
    # Importing models package ensures SQLModel metadata is populated
    import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
