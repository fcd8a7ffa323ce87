"""
Database Initialization - Create the records table and sample data.

Called from the application lifespan on every start; both steps are
idempotent.
"""
from typing import Optional

from recordkeeper.core.logging_config import get_logger
from recordkeeper.database.connection import DatabaseConnection, get_database
from recordkeeper.database.models import Base
from recordkeeper.database.repository import RecordRepository

logger = get_logger(__name__)

SAMPLE_RECORDS = [
    {"id": 1, "name": "Record 1", "value": "Value 1"},
    {"id": 2, "name": "Record 2", "value": "Value 2"},
]


def init_record_tables(db: Optional[DatabaseConnection] = None) -> bool:
    """
    Create the records table if it doesn't exist.

    Returns:
        True if tables were created successfully
    """
    db = db or get_database()
    try:
        Base.metadata.create_all(db.engine)
        logger.info("Record tables initialized successfully")
        return True
    except Exception as e:
        logger.error(f"Failed to initialize record tables: {e}")
        raise


def initialize_sample_data(db: Optional[DatabaseConnection] = None) -> int:
    """
    Insert the two sample records when the table is empty.

    Returns:
        Number of records inserted (0 when data already exists)
    """
    repo = RecordRepository(db)
    if repo.count() > 0:
        logger.debug("Records present, skipping sample data")
        return 0

    inserted = repo.insert_many(SAMPLE_RECORDS)
    logger.info(f"Sample data initialized ({inserted} records)")
    return inserted


def drop_record_tables(db: Optional[DatabaseConnection] = None) -> bool:
    """
    Drop the records table (use with caution!).

    This is mainly for testing/development purposes.
    """
    db = db or get_database()
    Base.metadata.drop_all(db.engine)
    logger.warning("Record tables dropped")
    return True


if __name__ == "__main__":
    from recordkeeper.core.config import get_settings
    from recordkeeper.core.logging_config import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)
    init_record_tables()
    initialize_sample_data()
