from __future__ import annotations
import os
import tempfile
from pathlib import Path

# --- Data tree override: must happen before the app (and its /media mount) is imported ---
_TMP_ROOT = Path(tempfile.mkdtemp(prefix="journal_tests_"))
os.environ["DATA_DIR"] = str(_TMP_ROOT)
os.environ.pop("MEDIA_DIR", None)
os.environ["DATABASE_URL"] = f"sqlite:///{_TMP_ROOT / 'test.sqlite3'}"

import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session, SQLModel

from journal_backend.app.main import app
from journal_backend.app.brew.stopwatch import TIMERS
from journal_backend.app.db.session import get_engine, reset_engine

@pytest.fixture(scope="session")
def client():
    return TestClient(app)

@pytest.fixture(scope="session")
def data_dir():
    return _TMP_ROOT

# --- Every test starts with empty tables and no live timers ---
@pytest.fixture(autouse=True)
def clean_db():
    reset_engine()
    engine = get_engine()
    SQLModel.metadata.drop_all(engine)
    SQLModel.metadata.create_all(engine)
    TIMERS.clear()
    yield

@pytest.fixture
def session():
    with Session(get_engine()) as s:
        yield s

# --- Used by review/radar tests ---
@pytest.fixture
def review_payload():
    return {
        "coffee_name": "Bourbon Amarelo",
        "brand": "Orfeu",
        "origin": "Cerrado Mineiro",
        "brew_method": "Coado (V60/Melitta)",
        "roast_level": "Média",
        "rating": 5,
        "acidity": 3.5,
        "body": 3,
        "notes": "Senti notas de chocolate, caramelo",
    }
