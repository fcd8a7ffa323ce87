"""
Prompts module - LLM prompt templates and canned replies.
"""
from recordkeeper.llm.prompts.assistant_prompts import (
    CAPABILITIES,
    DATABASE_KEYWORDS,
    LLM_UNAVAILABLE_MESSAGE,
    get_assistant_prompt,
    get_capabilities_message,
)

__all__ = [
    "CAPABILITIES",
    "DATABASE_KEYWORDS",
    "LLM_UNAVAILABLE_MESSAGE",
    "get_assistant_prompt",
    "get_capabilities_message",
]
