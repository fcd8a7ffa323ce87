"""
Models module - Pydantic schemas for data validation.

This module defines:
- Request models: Input validation for API endpoints
- Response models: Output formatting for API responses
"""
from recordkeeper.models.chat import (
    ChatRequest,
    ChatResponse,
    HealthResponse,
    ErrorResponse,
)
from recordkeeper.models.records import (
    FieldError,
    RecordSchema,
    RecordUpdateRequest,
    RecordListResponse,
    RecordUpdateResponse,
)

__all__ = [
    "ChatRequest",
    "ChatResponse",
    "HealthResponse",
    "ErrorResponse",
    "FieldError",
    "RecordSchema",
    "RecordUpdateRequest",
    "RecordListResponse",
    "RecordUpdateResponse",
]
