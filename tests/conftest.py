import os
import sys
from pathlib import Path

# Ajoute la racine du projet au PYTHONPATH EN PREMIER
sys.path.insert(0, str(Path(__file__).parent.parent))

# Base SQLite de test AVANT d'importer worklog (Settings lit l'env à l'import)
os.environ["DATABASE_URL"] = "sqlite:///./test.db"
os.environ["SEED_DEFAULTS"] = "false"
os.environ["REQUEST_LOG"] = "false"

import pytest
from datetime import datetime

from worklog.core.database import Base, SessionLocal, engine, get_db
from worklog.main import app


def override_get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture(autouse=True)
def setup_teardown():
    """Crée et nettoie la DB avant/après chaque test"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield
    Base.metadata.drop_all(bind=engine)

# Override la dépendance
app.dependency_overrides[get_db] = override_get_db


@pytest.fixture
def client():
    """Client de test FastAPI"""
    from fastapi.testclient import TestClient
    return TestClient(app)


@pytest.fixture
def db():
    """Session DB pour les tests"""
    db = SessionLocal()
    yield db
    db.close()


@pytest.fixture
def t0():
    """Instant de référence pour les tests de sessions"""
    return datetime(2024, 5, 6, 9, 0, 0)
