"""
Database Connection Management.

This module handles the database connection via SQLAlchemy.
It provides:
- Connection pooling
- Session management
- Health checks
- Startup retry loop
"""
import time
from contextlib import contextmanager
from typing import Generator, Optional

from sqlalchemy import create_engine, text
from sqlalchemy.orm import sessionmaker, Session
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.pool import StaticPool

from recordkeeper.core.config import get_settings
from recordkeeper.core.exceptions import DatabaseError
from recordkeeper.core.logging_config import get_logger

logger = get_logger(__name__)


class DatabaseConnection:
    """
    Manages database connections and session lifecycle.

    Example:
        >>> db = DatabaseConnection()
        >>> with db.get_session() as session:
        ...     session.execute(text("SELECT 1"))
    """

    def __init__(self, connection_url: Optional[str] = None):
        """
        Initialize database engine with connection pooling.

        Args:
            connection_url: Optional connection URL. If not provided, uses settings.
        """
        self.settings = get_settings()
        db_url = connection_url or self.settings.database_url

        if db_url.startswith("sqlite"):
            # A single shared connection keeps in-memory databases alive
            # across the threads FastAPI runs sync handlers on.
            self.engine = create_engine(
                db_url,
                connect_args={"check_same_thread": False},
                poolclass=StaticPool,
                echo=False,
            )
        else:
            # pool_pre_ping: Test connections before using (handles stale connections)
            self.engine = create_engine(
                db_url,
                pool_pre_ping=True,
                pool_size=5,
                max_overflow=10,
                echo=False,
            )

        self._session_factory = sessionmaker(
            bind=self.engine,
            autocommit=False,
            autoflush=False,
            expire_on_commit=False,
        )

        logger.info(f"Database connection initialized: {db_url.split('@')[-1] if '@' in db_url else db_url}")

    @contextmanager
    def get_session(self) -> Generator[Session, None, None]:
        """
        Get a database session with automatic cleanup.

        Transactions are rolled back on error, committed on success.

        Yields:
            SQLAlchemy Session object
        """
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            logger.error(f"Database error, rolling back: {e}")
            raise
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def check_connection(self) -> bool:
        """
        Test database connectivity.

        Returns:
            True if connection is healthy, False otherwise.
        """
        try:
            with self.get_session() as session:
                session.execute(text("SELECT 1"))
            logger.debug("Database connection check: OK")
            return True
        except SQLAlchemyError as e:
            logger.error(f"Database connection check failed: {e}")
            return False

    def wait_until_available(self, retries: int, delay_seconds: float) -> None:
        """
        Block until the database answers, retrying a fixed number of times.

        Raises:
            DatabaseError: If every attempt fails.
        """
        for attempt in range(1, retries + 1):
            if self.check_connection():
                logger.info(f"Connected to database (attempt {attempt})")
                return
            logger.warning(f"Database connection attempt {attempt}/{retries} failed")
            if attempt < retries:
                time.sleep(delay_seconds)

        raise DatabaseError("Failed to connect to the database after multiple attempts")

    def close(self):
        """Close all connections in the pool."""
        self.engine.dispose()
        logger.info("Database connections closed")


# Module-level instance (singleton pattern)
_db_connection: DatabaseConnection | None = None


def get_database() -> DatabaseConnection:
    """
    Get or create the database connection instance.

    This lazy initialization prevents connection before app startup.
    """
    global _db_connection
    if _db_connection is None:
        _db_connection = DatabaseConnection()
    return _db_connection


def reset_database() -> None:
    """Dispose of the singleton so the next call builds a fresh engine."""
    global _db_connection
    if _db_connection is not None:
        _db_connection.close()
    _db_connection = None
