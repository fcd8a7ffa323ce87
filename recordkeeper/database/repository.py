"""
Record Repository - Query API over the records collection.

This module provides every read and write the service performs:
- find all records sorted by id
- case-insensitive substring search over name/value
- lookup and full update by id
- count and bulk replace (used by initialization and seeding)

Records leave the repository as plain dictionaries so callers never hold
ORM instances outside a session.
"""
import time
from typing import Any, Dict, Iterable, List, Optional

from sqlalchemy import delete, func, or_, select
from sqlalchemy.exc import SQLAlchemyError

from recordkeeper.core.exceptions import DatabaseError, RecordNotFoundError
from recordkeeper.core.logging_config import get_logger
from recordkeeper.database.connection import DatabaseConnection, get_database
from recordkeeper.database.models import Record

logger = get_logger(__name__)


class RecordRepository:
    """
    Data access for :class:`Record`.

    Example:
        >>> repo = RecordRepository()
        >>> repo.search("technology", limit=10)
        [{'id': 1, 'name': 'Client 1 - Technology', 'value': '...'}]
    """

    def __init__(self, db: Optional[DatabaseConnection] = None):
        self._db = db

    @property
    def db(self) -> DatabaseConnection:
        # Resolved per call so a reset connection singleton is picked up
        return self._db or get_database()

    def list_all(self) -> List[Dict[str, Any]]:
        """Return every record ordered by id ascending."""
        try:
            with self.db.get_session() as session:
                rows = session.execute(select(Record).order_by(Record.id)).scalars().all()
                return [row.to_dict() for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Error fetching records: {e}")
            raise DatabaseError("Error fetching records") from e

    def search(self, query: str, limit: int = 50) -> List[Dict[str, Any]]:
        """
        Case-insensitive substring search on ``name`` or ``value``.

        LIKE wildcards in ``query`` are escaped, so ``%`` and ``_`` only
        match themselves. An empty query matches every record.

        Args:
            query: Search text
            limit: Maximum number of records returned

        Returns:
            Matching records ordered by id
        """
        start_time = time.perf_counter()

        statement = select(Record).order_by(Record.id).limit(limit)
        if query:
            statement = statement.where(
                or_(
                    Record.name.icontains(query, autoescape=True),
                    Record.value.icontains(query, autoescape=True),
                )
            )

        try:
            with self.db.get_session() as session:
                rows = session.execute(statement).scalars().all()
                results = [row.to_dict() for row in rows]
        except SQLAlchemyError as e:
            logger.error(f"Search error: {e}")
            raise DatabaseError("Error searching records") from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"Search '{query[:50]}' returned {len(results)} records in {elapsed_ms:.2f}ms")
        return results

    def get(self, record_id: int) -> Optional[Dict[str, Any]]:
        """Return the record with ``record_id`` or None."""
        try:
            with self.db.get_session() as session:
                record = session.get(Record, record_id)
                return record.to_dict() if record else None
        except SQLAlchemyError as e:
            logger.error(f"Error fetching record {record_id}: {e}")
            raise DatabaseError("Error fetching records") from e

    def update(self, record_id: int, name: str, value: str) -> Dict[str, Any]:
        """
        Overwrite ``name`` and ``value`` of an existing record.

        Raises:
            RecordNotFoundError: If no record has ``record_id``.
            DatabaseError: If the write fails.
        """
        try:
            with self.db.get_session() as session:
                record = session.get(Record, record_id)
                if record is None:
                    raise RecordNotFoundError(record_id)
                record.name = name
                record.value = value
                session.flush()
                updated = record.to_dict()
        except SQLAlchemyError as e:
            logger.error(f"Update error for record {record_id}: {e}")
            raise DatabaseError("Error updating record") from e

        logger.info(f"Record {record_id} updated")
        return updated

    def count(self) -> int:
        """Number of stored records."""
        try:
            with self.db.get_session() as session:
                return session.execute(select(func.count()).select_from(Record)).scalar_one()
        except SQLAlchemyError as e:
            logger.error(f"Error counting records: {e}")
            raise DatabaseError("Error fetching records") from e

    def insert_many(self, records: Iterable[Dict[str, Any]]) -> int:
        """Insert records given as ``{id, name, value}`` dicts."""
        rows = [Record(id=r["id"], name=r["name"], value=r["value"]) for r in records]
        try:
            with self.db.get_session() as session:
                session.add_all(rows)
        except SQLAlchemyError as e:
            logger.error(f"Error inserting records: {e}")
            raise DatabaseError("Error inserting records") from e
        return len(rows)

    def delete_all(self) -> int:
        """Remove every record. Only the admin seed script calls this."""
        try:
            with self.db.get_session() as session:
                result = session.execute(delete(Record))
                return result.rowcount
        except SQLAlchemyError as e:
            logger.error(f"Error clearing records: {e}")
            raise DatabaseError("Error clearing records") from e
