"""SQLAlchemy repository implementations."""

from portfolio_tracker.repositories.sqlalchemy.database import (
    get_engine,
    get_session_factory,
    get_session,
    init_db_with_url,
    reset_database,
    Base,
)
from portfolio_tracker.repositories.sqlalchemy.kv_repo import SqlAlchemyKeyValueRepository

__all__ = [
    "get_engine",
    "get_session_factory",
    "get_session",
    "init_db_with_url",
    "reset_database",
    "Base",
    "SqlAlchemyKeyValueRepository",
]
