"""
Services module - Business logic and orchestration.

Services contain the core application logic:
- No HTTP concerns (those belong in api/)
- No database queries (those belong in database/)
- Orchestrate between the classifier, LLM, and record store
"""
from recordkeeper.services.intent_service import IntentService, IntentResponse
from recordkeeper.services.llm_service import LLMService, is_relevant_query
from recordkeeper.services.chat_service import ChatService
from recordkeeper.services.record_service import RecordService

__all__ = [
    "IntentService",
    "IntentResponse",
    "LLMService",
    "is_relevant_query",
    "ChatService",
    "RecordService",
]
