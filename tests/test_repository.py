"""
Tests for the record store: repository queries, initialization and seeding.
"""
import pytest

from recordkeeper.core.exceptions import RecordNotFoundError
from recordkeeper.database import (
    SAMPLE_RECORDS,
    generate_demo_records,
    initialize_sample_data,
    seed_demo_records,
)


class TestDemoSeed:
    def test_generate_demo_records_naming_scheme(self):
        records = generate_demo_records(100)

        assert len(records) == 100
        assert [r["id"] for r in records] == list(range(1, 101))
        assert records[0] == {
            "id": 1,
            "name": "Client 1 - Technology",
            "value": "Active client in Technology sector, Record #1",
        }
        assert records[6] == {
            "id": 7,
            "name": "Project 2 - Healthcare",
            "value": "Completed project in Healthcare sector, Record #7",
        }
        assert records[99]["name"] == "Report 20 - Retail"

    def test_seed_replaces_existing_records(self, repository, db):
        repository.insert_many(SAMPLE_RECORDS)

        inserted = seed_demo_records(10, db)

        assert inserted == 10
        assert repository.count() == 10
        assert repository.get(1)["name"] == "Client 1 - Technology"


class TestSampleData:
    def test_inserts_into_empty_table(self, repository, db):
        assert initialize_sample_data(db) == 2
        assert repository.list_all() == SAMPLE_RECORDS

    def test_skips_when_records_exist(self, repository, db, demo_records):
        assert initialize_sample_data(db) == 0
        assert repository.count() == 100


class TestRecordRepository:
    def test_list_all_is_sorted_by_id(self, repository):
        repository.insert_many([
            {"id": 3, "name": "c", "value": "z"},
            {"id": 1, "name": "a", "value": "x"},
            {"id": 2, "name": "b", "value": "y"},
        ])

        assert [r["id"] for r in repository.list_all()] == [1, 2, 3]

    def test_search_is_case_insensitive(self, repository, demo_records):
        upper = repository.search("TECHNOLOGY")
        lower = repository.search("technology")

        assert len(upper) == 20
        assert upper == lower

    def test_search_matches_value(self, repository, demo_records):
        results = repository.search("record #100")
        assert [r["id"] for r in results] == [100]

    def test_search_respects_limit(self, repository, demo_records):
        assert len(repository.search("", limit=50)) == 50
        assert len(repository.search("sector", limit=7)) == 7

    def test_search_treats_wildcards_literally(self, repository):
        repository.insert_many([
            {"id": 1, "name": "50% done", "value": "x"},
            {"id": 2, "name": "500 done", "value": "snake_case"},
            {"id": 3, "name": "plain", "value": "snakeXcase"},
        ])

        assert [r["id"] for r in repository.search("%")] == [1]
        assert [r["id"] for r in repository.search("_")] == [2]

    def test_update_overwrites_name_and_value(self, repository, demo_records):
        updated = repository.update(5, "Renamed", "New value")

        assert updated == {"id": 5, "name": "Renamed", "value": "New value"}
        assert repository.get(5) == updated
        assert repository.count() == 100

    def test_update_missing_id_raises(self, repository, demo_records):
        with pytest.raises(RecordNotFoundError):
            repository.update(999, "x", "y")

    def test_get_missing_returns_none(self, repository):
        assert repository.get(42) is None
