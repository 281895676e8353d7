"""Shared fixtures: an in-memory database, tenant repositories and an API client."""

from __future__ import annotations

import os
import tempfile

# Settings are read at import time, so point them at throwaway locations first
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("STATIC_DIR", tempfile.mkdtemp(prefix="closet-static-"))
os.environ.setdefault("ENVIRONMENT", "test")

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from closet.config import settings
from closet.database import build_engine, get_db, init_db
from closet.main import app
from closet.models import User
from closet.repository import TenantRepository

from tests.factories import ALICE, BOB


@pytest.fixture
def engine():
    test_engine = build_engine("sqlite://", poolclass=StaticPool)
    init_db(test_engine)
    yield test_engine
    test_engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    session.add_all([User(id=ALICE, email="alice@example.com"), User(id=BOB, email="bob@example.com")])
    session.commit()
    yield session
    session.close()


@pytest.fixture
def alice_repo(db) -> TenantRepository:
    return TenantRepository(db, ALICE)


@pytest.fixture
def bob_repo(db) -> TenantRepository:
    return TenantRepository(db, BOB)


@pytest.fixture
def static_dir(tmp_path, monkeypatch):
    monkeypatch.setattr(settings, "STATIC_DIR", str(tmp_path))
    monkeypatch.setattr(settings, "USE_CLOUDINARY", False)
    return tmp_path


@pytest.fixture
def client(session_factory, db, static_dir):
    def _get_test_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _get_test_db
    yield TestClient(app)
    app.dependency_overrides.clear()

