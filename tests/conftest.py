"""Pytest configuration and fixtures."""

import os

# Settings are cached on first use, so the test environment must be in place
# before the application is imported.
os.environ["DATABASE_URL"] = "sqlite:///:memory:"
os.environ["ENVIRONMENT"] = "test"
os.environ["SECRET_KEY"] = "test-secret-key-for-signing-tokens"

from collections.abc import Callable, Generator  # noqa: E402
from datetime import UTC, datetime  # noqa: E402
from typing import Any  # noqa: E402

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy import create_engine  # noqa: E402
from sqlalchemy.orm import Session, sessionmaker  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402

from tcg_catalog import models  # noqa: E402
from tcg_catalog.database import Base, get_db  # noqa: E402
from tcg_catalog.infrastructure.identity.auth import create_access_token  # noqa: E402
from tcg_catalog.main import app  # noqa: E402

# Test database URL (in-memory SQLite)
TEST_DATABASE_URL = "sqlite:///:memory:"

# One shared connection so the request threads see the same in-memory database
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)

# Create test session factory
TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


@pytest.fixture
def db_session() -> Generator[Session, None, None]:
    """Create a fresh database session for each test."""
    # Create all tables
    Base.metadata.create_all(bind=test_engine)

    session = TestSessionLocal()
    try:
        yield session
    finally:
        session.close()
        # Drop all tables after test
        Base.metadata.drop_all(bind=test_engine)


@pytest.fixture
def client(db_session: Session) -> Generator[TestClient, Any, None]:
    """Create a test client with database session."""

    def override_get_db() -> Generator[Session, None, None]:
        try:
            yield db_session
        finally:
            pass

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def auth_headers() -> dict[str, str]:
    """Authorization header carrying a valid access token."""
    token = create_access_token("ash.ketchum")
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def create_test_serie(db_session: Session) -> Callable[..., models.Serie]:
    """Factory storing a serie row directly in the database."""

    def _create(
        code: str = "SV",
        name: str = "Scarlet & Violet",
        release_year: int = 2023,
        image_url: str | None = None,
        expansions: str | None = None,
        created_at: datetime | None = None,
    ) -> models.Serie:
        serie = models.Serie(
            code=code,
            name=name,
            release_year=release_year,
            image_url=image_url,
            expansions=expansions,
            created_at=created_at or datetime(2024, 1, 1, tzinfo=UTC),
        )
        db_session.add(serie)
        db_session.commit()
        db_session.refresh(serie)
        return serie

    return _create


@pytest.fixture
def test_serie(create_test_serie: Callable[..., models.Serie]) -> models.Serie:
    """A stored serie with two expansions."""
    return create_test_serie(expansions="SV01,SV02")
