"""Database connection and session management."""

from typing import Optional

from sqlalchemy import Engine, StaticPool, create_engine
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from portfolio_tracker.config.settings import get_settings

Base = declarative_base()

# Module-level database state (can be reconfigured at runtime)
_engine: Optional[Engine] = None
_SessionLocal: Optional[sessionmaker] = None


def _create_engine(database_url: str) -> Engine:
    kwargs = {}
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        # One shared connection, otherwise every session sees an empty database
        kwargs["poolclass"] = StaticPool
    return create_engine(
        database_url,
        connect_args={"check_same_thread": False},  # SQLite-specific
        echo=False,
        **kwargs,
    )


def get_engine() -> Engine:
    """Get or create the database engine."""
    global _engine
    if _engine is None:
        _engine = _create_engine(get_settings().get_database_url())
    return _engine


def get_session_factory() -> sessionmaker:
    """Get or create the session factory."""
    global _SessionLocal
    if _SessionLocal is None:
        _SessionLocal = sessionmaker(
            autocommit=False,
            autoflush=False,
            bind=get_engine(),
        )
    return _SessionLocal


def get_session() -> Session:
    """Get a new database session (for non-generator use)."""
    SessionLocal = get_session_factory()
    return SessionLocal()


def init_db_with_url(database_url: str) -> None:
    """Initialize database at a specific URL, replacing the current engine."""
    global _engine, _SessionLocal

    reset_database()
    _engine = _create_engine(database_url)
    _SessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=_engine,
    )

    # Import ORM models and create tables
    from portfolio_tracker.repositories.sqlalchemy import orm_models  # noqa: F401
    Base.metadata.create_all(bind=_engine)


def reset_database() -> None:
    """Reset database state (for reconfiguration)."""
    global _engine, _SessionLocal

    if _engine is not None:
        _engine.dispose()

    _engine = None
    _SessionLocal = None
