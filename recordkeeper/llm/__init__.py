"""
LLM module - Language model integration.

This module handles all LLM interactions:
- Prompt construction
- HTTP calls to the generate endpoint
- Error handling for LLM failures
"""
from recordkeeper.llm.client import LLMClient, LLMError

__all__ = [
    "LLMClient",
    "LLMError",
]
