"""
LLM Client for an Ollama-compatible generate endpoint.

This module provides a thin interface to ``POST {base_url}/api/generate``.
It handles:
- Request construction (model, prompt, non-streaming)
- Response parsing
- Error handling and logging

Every failure mode surfaces as :class:`LLMError` so callers only have one
exception to handle.
"""
import time
from typing import Optional

import requests

from recordkeeper.core.config import get_settings
from recordkeeper.core.logging_config import get_logger

logger = get_logger(__name__)


class LLMClient:
    """
    Client for a generative-model HTTP server.

    Example:
        >>> client = LLMClient()
        >>> client.generate("Summarize the records")
        'There are 100 records across five sectors...'
    """

    def __init__(
        self,
        base_url: Optional[str] = None,
        model: Optional[str] = None,
        timeout: Optional[float] = None,
        session: Optional[requests.Session] = None,
    ):
        settings = get_settings()
        self.base_url = (base_url or settings.llm_base_url).rstrip("/")
        self.model = model or settings.llm_model
        self.timeout = timeout if timeout is not None else settings.llm_timeout_seconds
        self.session = session or requests.Session()

        logger.info(f"LLM client initialized: {self.base_url} model={self.model}")

    @property
    def generate_url(self) -> str:
        return f"{self.base_url}/api/generate"

    def generate(self, prompt: str) -> str:
        """
        Generate a completion for ``prompt``.

        Args:
            prompt: Full prompt text

        Returns:
            The model's response text

        Raises:
            LLMError: On connection failure, HTTP error or malformed response.
        """
        payload = {
            "model": self.model,
            "prompt": prompt,
            "stream": False,
        }

        start_time = time.perf_counter()
        try:
            response = self.session.post(self.generate_url, json=payload, timeout=self.timeout)
            response.raise_for_status()
            text = response.json()["response"]
            if not isinstance(text, str):
                raise TypeError(f"response is {type(text).__name__}, not text")
        except requests.exceptions.Timeout as e:
            logger.error(f"LLM request timed out after {self.timeout}s")
            raise LLMError("LLM request timed out") from e
        except requests.exceptions.RequestException as e:
            logger.error(f"LLM request failed: {e}")
            raise LLMError(f"LLM request failed: {e}") from e
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Malformed LLM response: {e}")
            raise LLMError("Malformed LLM response") from e

        elapsed_ms = (time.perf_counter() - start_time) * 1000
        logger.info(f"LLM response received: {len(text)} chars in {elapsed_ms:.0f}ms")
        return text


class LLMError(Exception):
    """
    Custom exception for LLM-related errors.

    This exception wraps all transport and parsing errors into a single
    type for easier handling in the service layer.
    """
    pass
