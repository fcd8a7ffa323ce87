"""
Request and Response models for the record endpoints.
"""
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator


class RecordSchema(BaseModel):
    """A stored record as returned by the API."""
    id: int
    name: str
    value: str


class RecordUpdateRequest(BaseModel):
    """
    Request model for POST /update.

    ``name`` and ``value`` are trimmed and must not be empty afterwards.
    """
    id: int = Field(..., description="Id of the record to update", examples=[1])
    name: str = Field(..., max_length=255, description="New name", examples=["Client 1 - Technology"])
    value: str = Field(..., max_length=1024, description="New value", examples=["Active client"])

    @field_validator("name", "value", mode="before")
    @classmethod
    def strip_text(cls, value):
        if isinstance(value, str):
            return value.strip()
        return value

    @field_validator("name")
    @classmethod
    def name_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Name is required")
        return value

    @field_validator("value")
    @classmethod
    def value_required(cls, value: str) -> str:
        if not value:
            raise ValueError("Value is required")
        return value


class RecordListResponse(BaseModel):
    """Response model for GET /records and GET /search."""
    success: bool = True
    count: int
    data: List[RecordSchema]


class RecordUpdateResponse(BaseModel):
    """Response model for a successful POST /update."""
    success: bool = True
    message: str = "Record updated successfully"
    record: RecordSchema


class FieldError(BaseModel):
    field: Optional[str] = None
    message: str
