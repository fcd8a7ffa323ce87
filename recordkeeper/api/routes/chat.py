"""
Chat Routes - API endpoint for the conversational assistant.

The /chat endpoint answers from the records when the message matches a
known intent (help, list, search, analyze) and falls back to the
language model otherwise.
"""
from fastapi import APIRouter, Depends

from recordkeeper.core.exceptions import ValidationError
from recordkeeper.core.logging_config import get_logger
from recordkeeper.core.validators import validate_message
from recordkeeper.models.chat import ChatRequest, ChatResponse, ErrorResponse
from recordkeeper.services.chat_service import ChatService

logger = get_logger(__name__)

router = APIRouter(
    prefix="/chat",
    tags=["Chat"],
    responses={
        400: {"model": ErrorResponse, "description": "Message missing"},
        500: {"model": ErrorResponse, "description": "Internal server error"},
    },
)

_chat_service: ChatService | None = None


def get_chat_service() -> ChatService:
    """Get or create the chat service instance."""
    global _chat_service
    if _chat_service is None:
        _chat_service = ChatService()
    return _chat_service


@router.post(
    "",
    response_model=ChatResponse,
    summary="Send a message to the assistant",
    description="""
    Send a natural language message to the records assistant.

    **Examples:**
    - "help"
    - "show all records"
    - "find records in Technology"
    - "show distribution of records by sector"

    When `visualization` is `chart`, `data` holds `{sector: count}` pairs
    and `chart_type` names the chart to draw.
    """,
)
def send_message(
    request: ChatRequest,
    service: ChatService = Depends(get_chat_service),
) -> ChatResponse:
    """Process a user message and return the assistant's response."""
    is_valid, sanitized_message, error = validate_message(request.message)
    if not is_valid:
        raise ValidationError(error, field="message")

    logger.info(f"Processing chat message: {sanitized_message[:50]}")
    return service.process_message(sanitized_message)
