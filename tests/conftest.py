"""
Pytest Configuration

Cada test recibe una base SQLite en memoria nueva, con FKs activas, el trigger
de la bitácora y los datos iniciales cargados.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker

from config.database import Base, crear_engine
import models  # noqa: F401
from services.seed_service import cargar_datos_iniciales
from utils.dependencies import get_db
from main import app


@pytest.fixture
def engine():
    eng = crear_engine("sqlite://")
    Base.metadata.create_all(bind=eng)
    yield eng
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False, expire_on_commit=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    cargar_datos_iniciales(session)
    yield session
    session.close()


@pytest.fixture
def client(session_factory, db):
    def _get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_db
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
