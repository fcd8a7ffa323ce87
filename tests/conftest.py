"""
Pytest configuration and shared fixtures.

Every test runs against a fresh in-memory SQLite database; the language
model is always replaced by a mock so no test touches the network.
"""
import os
import tempfile

# Environment must be in place before recordkeeper reads its settings
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["APP_ENV"] = "testing"
os.environ["LOG_LEVEL"] = "WARNING"
os.environ["LOG_DIR"] = tempfile.mkdtemp(prefix="recordkeeper_logs_")
os.environ["DB_CONNECT_RETRIES"] = "1"
os.environ["DB_RETRY_DELAY_SECONDS"] = "0"
os.environ["SEED_SAMPLE_DATA"] = "true"
os.environ["LLM_BASE_URL"] = "http://llm.test"

from unittest.mock import MagicMock

import pytest

from recordkeeper.database import (
    drop_record_tables,
    get_database,
    init_record_tables,
    reset_database,
    seed_demo_records,
)
from recordkeeper.database.repository import RecordRepository
from recordkeeper.llm.client import LLMClient


@pytest.fixture
def db():
    """Fresh in-memory database with the records table created."""
    reset_database()
    database = get_database()
    init_record_tables(database)
    yield database
    drop_record_tables(database)
    reset_database()


@pytest.fixture
def repository(db):
    return RecordRepository(db)


@pytest.fixture
def demo_records(db):
    """The 100 generated demo records."""
    seed_demo_records(100, db)
    return RecordRepository(db).list_all()


@pytest.fixture
def llm_client():
    """Mock LLM client returning a fixed answer."""
    client = MagicMock(spec=LLMClient)
    client.generate.return_value = "LLM answer"
    return client


@pytest.fixture
def client(db, llm_client):
    """TestClient with the LLM replaced by ``llm_client``."""
    from fastapi.testclient import TestClient

    from recordkeeper.api.main import app
    from recordkeeper.api.routes import records as records_routes
    from recordkeeper.api.routes.chat import get_chat_service
    from recordkeeper.services.chat_service import ChatService
    from recordkeeper.services.llm_service import LLMService

    records_routes._record_service = None
    chat_service = ChatService(llm_service=LLMService(client=llm_client))
    app.dependency_overrides[get_chat_service] = lambda: chat_service

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()
