"""
Database module - Record storage access layer.

This module handles:
- Database connection management
- The Record ORM model
- Record queries and updates
- Table initialization and demo seeding
"""
from recordkeeper.database.connection import DatabaseConnection, get_database, reset_database
from recordkeeper.database.models import Record, Base
from recordkeeper.database.repository import RecordRepository
from recordkeeper.database.init_db import (
    init_record_tables,
    initialize_sample_data,
    drop_record_tables,
    SAMPLE_RECORDS,
)
from recordkeeper.database.seed import generate_demo_records, seed_demo_records

__all__ = [
    # Connection
    "DatabaseConnection",
    "get_database",
    "reset_database",
    # Models
    "Record",
    "Base",
    # Repository
    "RecordRepository",
    # Init
    "init_record_tables",
    "initialize_sample_data",
    "drop_record_tables",
    "SAMPLE_RECORDS",
    # Seeding
    "generate_demo_records",
    "seed_demo_records",
]
