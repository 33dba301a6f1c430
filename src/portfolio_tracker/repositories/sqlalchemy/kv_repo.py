"""SQLAlchemy implementation of KeyValueRepository."""

from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from portfolio_tracker.repositories.sqlalchemy.orm_models import KeyValueEntryORM


class SqlAlchemyKeyValueRepository:
    """SQLAlchemy-backed key-value repository."""

    def __init__(self, db: Session):
        self._db = db

    def get(self, key: str) -> Optional[str]:
        """Return the stored value for ``key``."""
        entry = self._db.get(KeyValueEntryORM, key)
        return entry.value if entry else None

    def set(self, key: str, value: str) -> None:
        """Insert or update the value for ``key``."""
        entry = self._db.get(KeyValueEntryORM, key)
        if entry:
            entry.value = value
            entry.updated_at = datetime.utcnow()
        else:
            entry = KeyValueEntryORM(key=key, value=value, updated_at=datetime.utcnow())
            self._db.add(entry)
        self._db.commit()
