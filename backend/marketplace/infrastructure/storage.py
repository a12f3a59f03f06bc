"""Key/Value Storage — SQLAlchemy-backed durable records and an in-memory twin.

Invariants:
    - write() commits before returning (no partial-write window for callers)
    - Every write rolls back on exception (no partial commits leak)
    - All SQLAlchemy exceptions mapped to StorageError (core/errors.py)
    - Values are copied on read and write: callers never alias stored state

Design Decisions:
    - Synchronous engine: store operations are synchronous by contract and a
      single local write per mutation does not warrant an async driver
    - pool_pre_ping for stale connection detection on server databases
    - InMemoryStorage for tests and throwaway runs (DATABASE_URL=memory://)
"""

import copy
import logging
from contextlib import contextmanager
from typing import Any, Iterator

from sqlalchemy import create_engine, select, text
from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.orm import Session, sessionmaker

from marketplace.core.errors import StorageError
from marketplace.db.base import Base
from marketplace.models.storage_record import StorageRecord

logger = logging.getLogger(__name__)

MEMORY_URL = "memory://"


class SqlKeyValueStorage:
    """Durable key/value records in a single SQL table."""

    def __init__(self, database_url: str):
        self.engine = create_engine(database_url, pool_pre_ping=True)
        self._session_factory = sessionmaker(
            self.engine, expire_on_commit=False,
        )

    def create_tables(self) -> None:
        Base.metadata.create_all(self.engine)

    @contextmanager
    def session(self, operation: str) -> Iterator[Session]:
        """Provide session with auto-rollback on exception."""
        session = self._session_factory()
        try:
            yield session
        except IntegrityError as e:
            session.rollback()
            logger.error(f"Storage integrity error: {e}")
            raise StorageError("Integrity constraint violated", operation)
        except OperationalError as e:
            session.rollback()
            logger.error(f"Storage operational error: {e}")
            raise StorageError("Connection or operational error", operation)
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"SQLAlchemy error: {e}")
            raise StorageError("Storage operation failed", operation)
        finally:
            session.close()

    def read(self, key: str) -> Any | None:
        with self.session("read") as db:
            record = db.execute(
                select(StorageRecord).where(StorageRecord.key == key),
            ).scalar_one_or_none()
            return copy.deepcopy(record.value) if record else None

    def write(self, key: str, value: Any) -> None:
        with self.session("write") as db:
            record = db.get(StorageRecord, key)
            if record is None:
                db.add(StorageRecord(key=key, value=copy.deepcopy(value)))
            else:
                record.value = copy.deepcopy(value)
            db.commit()

    def remove(self, key: str) -> None:
        with self.session("remove") as db:
            record = db.get(StorageRecord, key)
            if record is not None:
                db.delete(record)
                db.commit()

    def health_check(self) -> bool:
        """Check storage connectivity (for readiness probes)."""
        try:
            with self.session("health_check") as db:
                db.execute(text("SELECT 1"))
            return True
        except StorageError as e:
            logger.error(f"Storage health check failed: {e}")
            return False

    def dispose(self) -> None:
        self.engine.dispose()


class InMemoryStorage:
    """Process-local key/value records with the same copy semantics."""

    def __init__(self, initial: dict[str, Any] | None = None):
        self._records: dict[str, Any] = copy.deepcopy(initial or {})

    def read(self, key: str) -> Any | None:
        return copy.deepcopy(self._records.get(key))

    def write(self, key: str, value: Any) -> None:
        self._records[key] = copy.deepcopy(value)

    def remove(self, key: str) -> None:
        self._records.pop(key, None)

    def health_check(self) -> bool:
        return True

    def dispose(self) -> None:
        pass


def create_storage(database_url: str) -> SqlKeyValueStorage | InMemoryStorage:
    """Build the storage backend named by DATABASE_URL."""
    if database_url == MEMORY_URL:
        logger.warning("Using in-memory storage; state is lost on restart")
        return InMemoryStorage()
    storage = SqlKeyValueStorage(database_url)
    storage.create_tables()
    return storage
