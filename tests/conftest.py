"""
Pytest configuration and shared fixtures.
Points the application at an in-memory SQLite database and ensures the
project root is in sys.path for imports.
"""

import os
import sys
from pathlib import Path
from typing import Generator

# Must be set before app.config builds its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "testing"
os.environ["DB_INIT_ATTEMPTS"] = "1"

# Add project root to sys.path so we can import domain, services, etc.
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from app.config import settings
from domain.models import Base, SessionLocal, engine


@pytest.fixture(scope="function")
def reset_database() -> Generator[None, None, None]:
    """Give each test an empty schema"""
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture(scope="function")
def db_session(reset_database) -> Generator[Session, None, None]:
    """
    Database session for repository and service tests.

    Yields:
        Session: SQLAlchemy session bound to the in-memory database
    """
    session = SessionLocal()
    try:
        yield session
    finally:
        session.rollback()
        session.close()


@pytest.fixture(scope="function")
def client(reset_database) -> Generator[TestClient, None, None]:
    """TestClient with the application lifespan running; keeps its own cookie jar"""
    from main import app

    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture(scope="function")
def other_client(client) -> TestClient:
    """A second caller with a separate cookie jar (and so a separate session)"""
    from main import app

    return TestClient(app)


@pytest.fixture(scope="function")
def enforce_ownership(monkeypatch):
    """Turn on owner checks for id-scoped meal operations"""
    monkeypatch.setattr(settings, "enforce_meal_ownership", True)
