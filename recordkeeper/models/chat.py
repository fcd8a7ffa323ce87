"""
Request and Response models for the Chat API.

These Pydantic models define the contract between client and server.
They provide:
- Type validation
- Automatic documentation
- Request/response serialization
"""
from datetime import datetime
from typing import Any, List, Optional

from pydantic import BaseModel, Field

from recordkeeper.models.records import FieldError


class ChatRequest(BaseModel):
    """
    Request model for the /chat endpoint.

    ``message`` is optional at the schema level so a missing message is
    reported as "Message is required" rather than a generic schema error.
    """
    message: Optional[str] = Field(
        default=None,
        description="The user's message or question",
        examples=["find records in Technology"],
    )


class ChatResponse(BaseModel):
    """
    Response model for the /chat endpoint.

    ``data`` depends on the intent: the command catalog for help, a list
    of records for list/search, a ``{sector: count}`` mapping for analyze
    and null for everything answered in free text.
    """
    success: bool = True
    message: str = Field(..., description="The assistant's reply")
    intent: Optional[str] = Field(default=None, description="Detected intent")
    data: Optional[Any] = Field(default=None, description="Structured payload")
    visualization: Optional[str] = Field(
        default=None,
        description="Display hint: commands, table, list or chart",
    )
    chart_type: Optional[str] = Field(default=None, description="Chart kind when visualization is 'chart'")


class HealthResponse(BaseModel):
    """Response model for the /health endpoints."""
    status: str = Field(default="healthy")
    version: str
    database: str = Field(default="connected")
    timestamp: datetime = Field(default_factory=datetime.utcnow)


class ErrorResponse(BaseModel):
    """Standard error response model."""
    success: bool = False
    error: str
    message: str
    details: Optional[str] = None
    errors: Optional[List[FieldError]] = None
