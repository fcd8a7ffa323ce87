"""
Input Validators - Sanitization and validation utilities.

Chat messages and search terms arrive as free text; these helpers
normalize them before they reach the services.
"""
import re
from typing import Optional, Tuple

from recordkeeper.core.logging_config import get_logger

logger = get_logger(__name__)

MAX_MESSAGE_LENGTH = 2000
MAX_SEARCH_LENGTH = 200

_WHITESPACE = re.compile(r"\s+")


def sanitize_message(message: Optional[str], max_length: int = MAX_MESSAGE_LENGTH) -> str:
    """
    Sanitize a user message.

    - Removes null bytes
    - Strips leading/trailing whitespace
    - Normalizes runs of whitespace to a single space
    - Limits length

    Args:
        message: Raw user message
        max_length: Maximum allowed length

    Returns:
        Sanitized message
    """
    if not message:
        return ""

    cleaned = message.replace("\x00", "")
    cleaned = _WHITESPACE.sub(" ", cleaned.strip())

    if len(cleaned) > max_length:
        logger.debug(f"Truncating message from {len(cleaned)} to {max_length} characters")
        cleaned = cleaned[:max_length]

    return cleaned


def validate_message(message: Optional[str]) -> Tuple[bool, str, Optional[str]]:
    """
    Full validation and sanitization of a chat message.

    Args:
        message: Raw user message

    Returns:
        Tuple of (is_valid, sanitized_message, error_message)
    """
    sanitized = sanitize_message(message)

    if not sanitized:
        return False, "", "Message is required"

    return True, sanitized, None


def validate_search_query(query: Optional[str]) -> Tuple[bool, str, Optional[str]]:
    """
    Validate the ``q`` parameter of the search endpoint.

    An empty query is valid and matches every record.

    Returns:
        Tuple of (is_valid, cleaned_query, error_message)
    """
    cleaned = (query or "").replace("\x00", "").strip()

    if len(cleaned) > MAX_SEARCH_LENGTH:
        return False, "", f"Search query too long (max {MAX_SEARCH_LENGTH} characters)"

    return True, cleaned, None
