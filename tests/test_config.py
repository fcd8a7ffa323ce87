"""
Tests for settings loading and the search result ceiling.
"""
from unittest.mock import MagicMock

import pytest

from recordkeeper.core.config import MAX_SEARCH_RESULTS, get_settings
from recordkeeper.database.repository import RecordRepository
from recordkeeper.services.record_service import RecordService


@pytest.fixture
def fresh_settings(monkeypatch):
    """Rebuild settings from a patched environment, then drop the cache again."""
    get_settings.cache_clear()
    yield monkeypatch
    get_settings.cache_clear()


class TestSettings:
    def test_environment_overrides(self, fresh_settings):
        fresh_settings.setenv("LLM_BASE_URL", "http://models.internal:11434/")
        fresh_settings.setenv("SEED_SAMPLE_DATA", "no")

        settings = get_settings()

        assert settings.llm_base_url == "http://models.internal:11434"
        assert settings.seed_sample_data is False
        assert settings.database_url == "sqlite://"

    @pytest.mark.parametrize("raw, expected", [("500", 50), ("20", 20), ("-3", 0)])
    def test_search_limit_is_clamped(self, fresh_settings, raw, expected):
        fresh_settings.setenv("SEARCH_RESULT_LIMIT", raw)

        assert get_settings().search_result_limit == expected

    def test_is_development(self, fresh_settings):
        fresh_settings.setenv("APP_ENV", "Development")

        assert get_settings().is_development()


class TestRecordServiceLimit:
    @pytest.fixture
    def repository(self):
        repository = MagicMock(spec=RecordRepository)
        repository.search.return_value = []
        return repository

    def test_explicit_zero_is_kept(self, repository):
        service = RecordService(repository=repository, search_limit=0)

        service.search("tech")

        repository.search.assert_called_once_with("tech", limit=0)

    def test_limit_never_exceeds_ceiling(self, repository):
        service = RecordService(repository=repository, search_limit=500)

        service.search("")

        repository.search.assert_called_once_with("", limit=MAX_SEARCH_RESULTS)

    def test_default_comes_from_settings(self, repository):
        assert RecordService(repository=repository).search_limit == 50
