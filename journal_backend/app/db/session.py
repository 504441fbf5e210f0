# journal_backend/app/db/session.py

# [DB Session] Engine + helpers
from __future__ import annotations

from functools import lru_cache

from sqlalchemy.engine import Engine
from sqlmodel import SQLModel, create_engine, Session

from journal_backend.app.config import get_db_url, ensure_data_dir_exists


@lru_cache(maxsize=1)
def get_engine() -> Engine:
    url = get_db_url()
    if url.startswith("sqlite"):
        # Ensure /data exists (needed for sqlite file URLs)
        ensure_data_dir_exists()
    # SQLite needs check_same_thread=False for typical FastAPI usage
    connect_args = {"check_same_thread": False} if url.startswith("sqlite") else {}
    engine = create_engine(url, echo=False, connect_args=connect_args)
    # Ensure table definitions are registered before create_all
    from . import models  # noqa: F401
    SQLModel.metadata.create_all(engine)
    return engine

def reset_engine() -> None:
    """Drop the cached engine so the next call re-reads DATABASE_URL/DATA_DIR."""
    if get_engine.cache_info().currsize:
        get_engine().dispose()
    get_engine.cache_clear()

def init_db() -> None:
    # tables are created the first time the engine is built
    get_engine()

def get_session():
    with Session(get_engine()) as session:
        yield session
