"""
Record Routes - Listing, search and update endpoints.

- GET  /records : every record sorted by id
- GET  /search  : case-insensitive substring search (max 50 results)
- POST /update  : replace name/value of an existing record
"""
from typing import Optional

from fastapi import APIRouter, Depends, Query

from recordkeeper.core.logging_config import get_logger
from recordkeeper.models.chat import ErrorResponse
from recordkeeper.models.records import (
    RecordListResponse,
    RecordUpdateRequest,
    RecordUpdateResponse,
)
from recordkeeper.services.record_service import RecordService

logger = get_logger(__name__)

router = APIRouter(
    tags=["Records"],
    responses={
        400: {"model": ErrorResponse, "description": "Invalid input"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

_record_service: RecordService | None = None


def get_record_service() -> RecordService:
    """Get or create the record service instance."""
    global _record_service
    if _record_service is None:
        _record_service = RecordService()
    return _record_service


@router.get(
    "/records",
    response_model=RecordListResponse,
    summary="List all records",
)
def list_records(service: RecordService = Depends(get_record_service)) -> RecordListResponse:
    """Return every record sorted by id."""
    return service.list_records()


@router.get(
    "/search",
    response_model=RecordListResponse,
    summary="Search records",
    description="""
    Case-insensitive substring match on `name` or `value`.

    At most 50 records are returned, ordered by id. An empty query
    returns the first 50 records.
    """,
)
def search_records(
    q: Optional[str] = Query(default="", description="Text to look for in name or value"),
    service: RecordService = Depends(get_record_service),
) -> RecordListResponse:
    return service.search(q)


@router.post(
    "/update",
    response_model=RecordUpdateResponse,
    summary="Update a record",
    responses={404: {"model": ErrorResponse, "description": "Record not found"}},
)
def update_record(
    request: RecordUpdateRequest,
    service: RecordService = Depends(get_record_service),
) -> RecordUpdateResponse:
    """Overwrite name and value of the record with the given id."""
    logger.info(f"Update requested for record {request.id}")
    return service.update(request)
