"""
Custom Exceptions - Application-specific error classes.

Each exception carries an HTTP status code and an error code; the API
layer renders them through ``to_dict()`` so every error response has the
same shape. Internal details are never leaked in production.
"""
from typing import Any, Dict, List, Optional


class RecordKeeperException(Exception):
    """
    Base exception for all application errors.

    Subclass this for specific error types.
    """
    status_code: int = 500
    error_code: str = "internal_error"

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def to_dict(self) -> Dict[str, Any]:
        """Convert to error response dict."""
        return {
            "success": False,
            "error": self.error_code,
            "message": self.message,
            "details": self.details,
        }


class ValidationError(RecordKeeperException):
    """Raised when input validation fails."""
    status_code = 400
    error_code = "validation_error"

    def __init__(
        self,
        message: str,
        field: Optional[str] = None,
        errors: Optional[List[Dict[str, str]]] = None,
    ):
        super().__init__(message, details=f"field={field}" if field else None)
        self.field = field
        if errors is None:
            errors = [{"field": field, "message": message}] if field else []
        self.errors = errors

    def to_dict(self) -> Dict[str, Any]:
        payload = super().to_dict()
        payload["errors"] = self.errors
        return payload


class RecordNotFoundError(RecordKeeperException):
    """Raised when no record exists for the requested id."""
    status_code = 404
    error_code = "record_not_found"

    def __init__(self, record_id: int):
        super().__init__(
            message="Record not found",
            details=f"id={record_id}",
        )
        self.record_id = record_id


class DatabaseError(RecordKeeperException):
    """Raised when database operations fail."""
    status_code = 500
    error_code = "database_error"

    def __init__(self, message: str = "Database operation failed"):
        super().__init__(message)
