"""
Chat Service - Business logic for conversational interactions.

This service orchestrates the chat flow:
1. Loads every record for context
2. Lets the intent service answer from the records
3. Falls back to the language model when no structured answer exists
4. Returns the reply as a ChatResponse
"""
from typing import Optional

from recordkeeper.core.logging_config import get_logger
from recordkeeper.database.repository import RecordRepository
from recordkeeper.models.chat import ChatResponse
from recordkeeper.services.intent_service import IntentService
from recordkeeper.services.llm_service import LLMService

logger = get_logger(__name__)


class ChatService:
    """
    Service for handling chat messages.

    Example:
        >>> service = ChatService()
        >>> service.process_message("help").visualization
        'commands'
    """

    def __init__(
        self,
        repository: Optional[RecordRepository] = None,
        intent_service: Optional[IntentService] = None,
        llm_service: Optional[LLMService] = None,
    ):
        self.repository = repository or RecordRepository()
        self.intent_service = intent_service or IntentService()
        self.llm_service = llm_service or LLMService()
        logger.info("ChatService initialized")

    def process_message(self, message: str) -> ChatResponse:
        """
        Process a sanitized user message.

        Args:
            message: The user's message

        Returns:
            ChatResponse with the assistant's reply

        Raises:
            DatabaseError: If the records cannot be loaded.
        """
        records = self.repository.list_all()

        reply = self.intent_service.process_query(message, records)

        if reply.needs_fallback:
            logger.info(f"No structured answer for intent '{reply.intent.value}', using LLM")
            reply = self.llm_service.get_chat_response(message)

        logger.info(
            f"Message processed: intent={reply.intent.value}, "
            f"visualization={reply.visualization}, success={reply.success}"
        )

        return ChatResponse(**reply.to_dict())
