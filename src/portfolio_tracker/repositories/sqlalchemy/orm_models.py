"""SQLAlchemy ORM model definitions."""

from datetime import datetime

from sqlalchemy import Column, DateTime, String, Text

from portfolio_tracker.repositories.sqlalchemy.database import Base


class KeyValueEntryORM(Base):
    """SQLAlchemy model for one key-value document."""

    __tablename__ = "kv_store"

    key = Column(String(255), primary_key=True)
    value = Column(Text, nullable=False)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
