"""Pytest configuration and shared fixtures.

Every test gets its own in-memory SQLite database. ``StaticPool`` keeps a
single connection alive so the tables survive across sessions and threads
(FastAPI runs sync endpoints in a worker thread).
"""

from collections.abc import Generator

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from inventory_tracker.database.base import Base
from inventory_tracker.database.session import get_db
from inventory_tracker.main import create_app
from inventory_tracker.repositories.product import ProductRepository
from inventory_tracker.services.product import ProductService


@pytest.fixture
def engine() -> Generator[Engine, None, None]:
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine: Engine) -> sessionmaker:
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db_session(session_factory: sessionmaker) -> Generator[Session, None, None]:
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def repository(db_session: Session) -> ProductRepository:
    return ProductRepository(db_session)


@pytest.fixture
def service(repository: ProductRepository) -> ProductService:
    return ProductService(repository)


@pytest.fixture
def test_app(session_factory: sessionmaker) -> FastAPI:
    """App whose sessions come from the per-test database."""
    app = create_app()

    def override_get_db():
        db = session_factory()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    return app


@pytest.fixture
def client(test_app: FastAPI) -> TestClient:
    # Not used as a context manager: the startup hook would create tables in the
    # configured database instead of the test one.
    return TestClient(test_app)
