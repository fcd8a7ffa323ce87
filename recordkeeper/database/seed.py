"""
Demo data seeding.

Replaces the whole records table with generated demo records whose names
carry a sector suffix (``"Client 1 - Technology"``) so the assistant's
sector analysis has something to group.

Run with: python -m recordkeeper.database.seed [count]
"""
import sys
from typing import Dict, List, Optional

from recordkeeper.core.logging_config import get_logger
from recordkeeper.database.connection import DatabaseConnection
from recordkeeper.database.init_db import init_record_tables
from recordkeeper.database.repository import RecordRepository

logger = get_logger(__name__)

INDUSTRIES = ["Technology", "Healthcare", "Finance", "Education", "Retail"]
TYPES = ["Client", "Project", "Product", "Service", "Report"]
STATUSES = ["Active", "Pending", "Completed", "Archived"]

DEFAULT_DEMO_COUNT = 100


def generate_demo_records(count: int = DEFAULT_DEMO_COUNT) -> List[Dict[str, object]]:
    """Build ``count`` demo records with ids 1..count."""
    records = []
    for i in range(count):
        industry = INDUSTRIES[i % len(INDUSTRIES)]
        record_type = TYPES[i % len(TYPES)]
        status = STATUSES[i % len(STATUSES)]
        number = i // 5 + 1

        records.append({
            "id": i + 1,
            "name": f"{record_type} {number} - {industry}",
            "value": f"{status} {record_type.lower()} in {industry} sector, Record #{i + 1}",
        })
    return records


def seed_demo_records(
    count: int = DEFAULT_DEMO_COUNT,
    db: Optional[DatabaseConnection] = None,
) -> int:
    """
    Clear existing records and insert ``count`` demo records.

    Returns:
        Number of records inserted
    """
    init_record_tables(db)
    repo = RecordRepository(db)

    removed = repo.delete_all()
    logger.info(f"Cleared {removed} existing records")

    inserted = repo.insert_many(generate_demo_records(count))
    logger.info(f"Successfully inserted {inserted} demo records")

    for sample in repo.list_all()[:3]:
        logger.info(f"Sample record: {sample}")

    return inserted


if __name__ == "__main__":
    from recordkeeper.core.config import get_settings
    from recordkeeper.core.logging_config import setup_logging

    settings = get_settings()
    setup_logging(settings.log_level, settings.log_dir)

    demo_count = int(sys.argv[1]) if len(sys.argv) > 1 else DEFAULT_DEMO_COUNT
    seed_demo_records(demo_count)
