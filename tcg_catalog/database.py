"""Engine, session factory and the request-scoped session dependency."""

from collections.abc import Generator
from typing import Annotated

from fastapi import Depends
from sqlalchemy import create_engine
from sqlalchemy.engine import Engine
from sqlalchemy.orm import DeclarativeBase, Session, sessionmaker
from sqlalchemy.pool import StaticPool

from tcg_catalog.config import Settings, get_settings


class Base(DeclarativeBase):
    """Base class for all database models."""


# Application-scoped, set up once by initialize_database()
_engine: Engine | None = None
_session_factory: sessionmaker[Session] | None = None


def _build_engine(database_url: str) -> Engine:
    if database_url.startswith("sqlite"):
        # A single shared connection keeps in-memory databases alive across threads
        return create_engine(
            database_url,
            connect_args={"check_same_thread": False},
            poolclass=StaticPool,
        )
    return create_engine(
        database_url,
        pool_size=10,
        max_overflow=20,
        pool_pre_ping=True,
        pool_recycle=3600,
    )


def initialize_database(settings: Settings) -> None:
    """Create the engine and session factory for ``settings.DATABASE_URL``."""
    global _engine, _session_factory  # noqa: PLW0603

    _engine = _build_engine(settings.DATABASE_URL)
    _session_factory = sessionmaker(bind=_engine, autoflush=False)


def dispose_engine() -> None:
    """Release pooled connections on shutdown."""
    global _engine, _session_factory  # noqa: PLW0603
    if _engine is not None:
        _engine.dispose()
    _engine = None
    _session_factory = None


def get_session_factory() -> sessionmaker[Session]:
    """Return the session factory, initializing lazily outside the app lifespan."""
    if _session_factory is None:
        initialize_database(get_settings())
    if _session_factory is None:
        raise RuntimeError("Database session factory is not initialized.")
    return _session_factory


def get_db() -> Generator[Session, None, None]:
    """Yield one session per request; it is closed when the request ends."""
    with get_session_factory()() as db:
        yield db


DatabaseSession = Annotated[Session, Depends(get_db)]
