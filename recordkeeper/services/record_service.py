"""
Record Service - Search, listing and update rules.

Routes stay thin: they hand validated input to this service, which
applies the search cap and turns repository results into response
models.
"""
from typing import Optional

from recordkeeper.core.config import MAX_SEARCH_RESULTS, get_settings
from recordkeeper.core.logging_config import LoggerMixin
from recordkeeper.core.validators import validate_search_query
from recordkeeper.core.exceptions import ValidationError
from recordkeeper.database.repository import RecordRepository
from recordkeeper.models.records import (
    RecordListResponse,
    RecordSchema,
    RecordUpdateRequest,
    RecordUpdateResponse,
)


class RecordService(LoggerMixin):
    """Business operations on records."""

    def __init__(self, repository: Optional[RecordRepository] = None, search_limit: Optional[int] = None):
        self.repository = repository or RecordRepository()
        if search_limit is None:
            search_limit = get_settings().search_result_limit
        self.search_limit = min(search_limit, MAX_SEARCH_RESULTS)

    def list_records(self) -> RecordListResponse:
        """All records sorted by id."""
        records = self.repository.list_all()
        return RecordListResponse(
            count=len(records),
            data=[RecordSchema(**record) for record in records],
        )

    def search(self, query: Optional[str]) -> RecordListResponse:
        """
        Case-insensitive substring search, capped at ``search_limit``.

        Raises:
            ValidationError: If the query is too long.
        """
        is_valid, cleaned, error = validate_search_query(query)
        if not is_valid:
            raise ValidationError(error, field="q")

        records = self.repository.search(cleaned, limit=self.search_limit)
        self.logger.debug(f"Search '{cleaned[:50]}' -> {len(records)} records")
        return RecordListResponse(
            count=len(records),
            data=[RecordSchema(**record) for record in records],
        )

    def update(self, request: RecordUpdateRequest) -> RecordUpdateResponse:
        """
        Replace name and value of an existing record.

        Raises:
            RecordNotFoundError: If the id does not exist.
        """
        updated = self.repository.update(request.id, request.name, request.value)
        self.logger.info(f"Record {request.id} updated via API")
        return RecordUpdateResponse(record=RecordSchema(**updated))
