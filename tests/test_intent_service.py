"""
Tests for chat dispatch over records (help/list/search/analyze).
"""
import pytest

from recordkeeper.analytics import EXAMPLE_COMMANDS
from recordkeeper.analytics.intent_classifier import Intent
from recordkeeper.database.seed import generate_demo_records
from recordkeeper.services.intent_service import (
    UNKNOWN_INTENT_MESSAGE,
    IntentService,
    analyze_sector_distribution,
    determine_visualization,
    extract_search_terms,
    filter_records,
    sector_of,
)


@pytest.fixture(scope="module")
def service():
    return IntentService()


@pytest.fixture
def records():
    return generate_demo_records(100)


@pytest.fixture
def small_records():
    return [
        {"id": 1, "name": "Client 1 - Technology", "value": "Active client in Technology sector, Record #1"},
        {"id": 2, "name": "Project 1 - Healthcare", "value": "Pending project in Healthcare sector, Record #2"},
        {"id": 3, "name": "Product 1 - Finance", "value": "Completed product in Finance sector, Record #3"},
    ]


class TestHelpers:
    def test_extract_search_terms_drops_short_words_and_stopwords(self):
        assert extract_search_terms("find records in Technology") == ["technology"]
        assert extract_search_terms("show the healthcare and finance") == ["healthcare", "finance"]

    def test_filter_records_matches_name_or_value(self, small_records):
        assert [r["id"] for r in filter_records(small_records, ["healthcare"])] == [2]
        assert [r["id"] for r in filter_records(small_records, ["completed"])] == [3]
        assert filter_records(small_records, []) == []

    def test_sector_of(self):
        assert sector_of("Client 1 - Technology") == "Technology"
        assert sector_of("Record 1") == "Unknown"

    def test_sector_distribution(self, records):
        distribution = analyze_sector_distribution(records)
        assert distribution == {
            "Technology": 20,
            "Healthcare": 20,
            "Finance": 20,
            "Education": 20,
            "Retail": 20,
        }

    def test_determine_visualization(self):
        assert determine_visualization(Intent.LIST, []) is None
        assert determine_visualization(Intent.LIST, [1]) == "table"
        assert determine_visualization(Intent.SEARCH, list(range(10))) == "list"
        assert determine_visualization(Intent.SEARCH, list(range(11))) == "table"
        assert determine_visualization(Intent.ANALYZE, [1]) == "chart"


class TestIntentService:
    def test_help_returns_command_catalog(self, service, records):
        reply = service.process_query("help", records)

        assert reply.intent == Intent.HELP
        assert reply.data == EXAMPLE_COMMANDS
        assert reply.visualization == "commands"
        assert reply.message.startswith("Here are some example commands you can try:")
        assert '• "show all records"' in reply.message
        assert "🔍 Searching Records:" in reply.message

    def test_list_returns_all_records(self, service, records):
        reply = service.process_query("show all records", records)

        assert reply.intent == Intent.LIST
        assert reply.message == "Here are all the records:"
        assert reply.data == records
        assert reply.visualization == "table"

    def test_list_with_no_records_is_still_structured(self, service):
        reply = service.process_query("show all records", [])

        assert reply.data == []
        assert reply.visualization is None
        assert not reply.needs_fallback

    def test_search_by_sector(self, service, records):
        reply = service.process_query("find records in Technology", records)

        assert reply.intent == Intent.SEARCH
        assert reply.message == "Found 20 matching records:"
        assert len(reply.data) == 20
        assert all("Technology" in r["name"] for r in reply.data)
        assert reply.visualization == "table"

    def test_search_with_few_matches_is_a_list(self, service, small_records):
        reply = service.process_query("look up healthcare", small_records)

        assert reply.intent == Intent.SEARCH
        assert [r["id"] for r in reply.data] == [2]
        assert reply.visualization == "list"

    def test_analyze_returns_pie_chart(self, service, records):
        reply = service.process_query("show distribution of records by sector", records)

        assert reply.intent == Intent.ANALYZE
        assert reply.visualization == "chart"
        assert reply.chart_type == "pie"
        assert sum(reply.data.values()) == 100

    def test_unknown_needs_fallback(self, service, records):
        reply = service.process_query("hello there", records)

        assert reply.intent == Intent.UNKNOWN
        assert reply.message == UNKNOWN_INTENT_MESSAGE
        assert reply.data is None
        assert reply.needs_fallback

    def test_to_dict_shape(self, service, records):
        payload = service.process_query("compare sectors", records).to_dict()

        assert set(payload) == {"success", "message", "intent", "data", "visualization", "chart_type"}
        assert payload["intent"] == "analyze"
