"""
Shared fixtures: an isolated in-memory database per test, a TestClient wired
to it, and an admin-authenticated client.
"""
import os
import tempfile

# Settings are read at import time, so point them at throwaway locations first
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["UPLOAD_DIR"] = tempfile.mkdtemp(prefix="storefront-uploads-")
os.environ["ADMIN_PASSWORD"] = "test-admin-pass"
os.environ["STORAGE_BACKEND"] = "local"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from database import Base, get_db
from models.product import Product
from models.category import Category
from main import app

ADMIN_PASSWORD = "test-admin-pass"


@pytest.fixture
def db_session():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    TestingSession = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    session = TestingSession()
    try:
        yield session
    finally:
        session.close()
        engine.dispose()


@pytest.fixture
def test_client(db_session):
    def override_get_db():
        yield db_session

    app.dependency_overrides[get_db] = override_get_db
    with TestClient(app) as client:
        yield client
    app.dependency_overrides.clear()


@pytest.fixture
def admin_client(test_client):
    response = test_client.post("/auth/login", json={"password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return test_client


@pytest.fixture
def make_product(db_session):
    """Insert a product straight into the database."""
    def _make(**overrides):
        data = {
            "name": "Test Product",
            "description": "Test description",
            "price": 100.0,
            "category": "Test",
            "image": "/test.jpg",
        }
        data.update(overrides)
        product = Product(**data)
        db_session.add(product)
        db_session.commit()
        db_session.refresh(product)
        return product
    return _make


@pytest.fixture
def make_category(db_session):
    def _make(name, icon="📦", description=""):
        category = Category(name=name, icon=icon, description=description)
        db_session.add(category)
        db_session.commit()
        db_session.refresh(category)
        return category
    return _make
