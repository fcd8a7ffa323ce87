"""
LLM Service - Free-text answers for messages the intent service can't handle.

Only messages that mention the records domain are forwarded to the model;
everything else gets the canned capability list. Model failures are
turned into an apology instead of an HTTP error.
"""
from typing import Optional

from recordkeeper.analytics.intent_classifier import Intent
from recordkeeper.core.logging_config import get_logger
from recordkeeper.llm.client import LLMClient, LLMError
from recordkeeper.llm.prompts import (
    DATABASE_KEYWORDS,
    LLM_UNAVAILABLE_MESSAGE,
    get_assistant_prompt,
    get_capabilities_message,
)
from recordkeeper.services.intent_service import IntentResponse

logger = get_logger(__name__)


def is_relevant_query(query: str) -> bool:
    """True if any whitespace-separated word of ``query`` is a domain keyword."""
    words = query.lower().split()
    return any(word in DATABASE_KEYWORDS for word in words)


class LLMService:
    """Relevance gate in front of :class:`LLMClient`."""

    def __init__(self, client: Optional[LLMClient] = None):
        self._client = client

    @property
    def client(self) -> LLMClient:
        # Created lazily so off-topic chats never touch the HTTP layer
        if self._client is None:
            self._client = LLMClient()
        return self._client

    def get_chat_response(self, query: str) -> IntentResponse:
        """
        Answer ``query`` with the language model.

        Returns:
            IntentResponse with free text only (no data, no visualization)
        """
        if not is_relevant_query(query):
            logger.info("Query outside the records domain, returning capabilities")
            return IntentResponse(intent=Intent.UNKNOWN, message=get_capabilities_message())

        try:
            answer = self.client.generate(get_assistant_prompt(query))
        except LLMError as e:
            logger.error(f"LLM Error: {e}")
            return IntentResponse(
                intent=Intent.UNKNOWN,
                message=LLM_UNAVAILABLE_MESSAGE,
                success=False,
            )

        return IntentResponse(intent=Intent.UNKNOWN, message=answer)
