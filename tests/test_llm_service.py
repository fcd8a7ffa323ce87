"""
Tests for the language-model fallback (relevance gate + HTTP client).
"""
from unittest.mock import MagicMock

import pytest
import requests

from recordkeeper.llm.client import LLMClient, LLMError
from recordkeeper.llm.prompts import CAPABILITIES, LLM_UNAVAILABLE_MESSAGE, get_capabilities_message
from recordkeeper.services.llm_service import LLMService, is_relevant_query


class TestRelevanceGate:
    @pytest.mark.parametrize("query", [
        "show me something",
        "what is in the DATABASE",
        "technology please",
    ])
    def test_keyword_queries_are_relevant(self, query):
        assert is_relevant_query(query)

    @pytest.mark.parametrize("query", [
        "tell me a joke",
        "records",        # plural is not a keyword
        "databases?",
        "",
    ])
    def test_other_queries_are_not_relevant(self, query):
        assert not is_relevant_query(query)


class TestLLMService:
    def test_irrelevant_query_returns_capabilities_without_calling_model(self, llm_client):
        service = LLMService(client=llm_client)

        reply = service.get_chat_response("tell me a joke")

        assert reply.success is True
        assert reply.message == get_capabilities_message()
        assert reply.data is None
        assert reply.visualization is None
        llm_client.generate.assert_not_called()

    def test_capabilities_message_lists_every_capability(self):
        message = get_capabilities_message()
        assert message.startswith("I'm a specialized assistant that can help you with:\n\n")
        assert message.endswith("\n\nPlease ask me questions related to these topics.")
        for capability in CAPABILITIES:
            assert f"• {capability}" in message

    def test_relevant_query_is_sent_to_model(self, llm_client):
        service = LLMService(client=llm_client)

        reply = service.get_chat_response("explain the data")

        assert reply.success is True
        assert reply.message == "LLM answer"
        prompt = llm_client.generate.call_args[0][0]
        assert "The user asks: explain the data" in prompt

    def test_model_failure_returns_apology(self, llm_client):
        llm_client.generate.side_effect = LLMError("down")
        service = LLMService(client=llm_client)

        reply = service.get_chat_response("explain the data")

        assert reply.success is False
        assert reply.message == LLM_UNAVAILABLE_MESSAGE


class TestLLMClient:
    @pytest.fixture
    def session(self):
        return MagicMock(spec=requests.Session)

    @pytest.fixture
    def client(self, session):
        return LLMClient(base_url="http://ollama:11434/", model="mistral", timeout=5, session=session)

    def test_generate_posts_non_streaming_request(self, client, session):
        response = MagicMock()
        response.json.return_value = {"response": "hello"}
        session.post.return_value = response

        assert client.generate("prompt text") == "hello"

        session.post.assert_called_once_with(
            "http://ollama:11434/api/generate",
            json={"model": "mistral", "prompt": "prompt text", "stream": False},
            timeout=5,
        )

    def test_connection_error_raises_llm_error(self, client, session):
        session.post.side_effect = requests.exceptions.ConnectionError("refused")

        with pytest.raises(LLMError):
            client.generate("prompt")

    def test_http_error_raises_llm_error(self, client, session):
        response = MagicMock()
        response.raise_for_status.side_effect = requests.exceptions.HTTPError("500")
        session.post.return_value = response

        with pytest.raises(LLMError):
            client.generate("prompt")

    def test_malformed_body_raises_llm_error(self, client, session):
        response = MagicMock()
        response.json.return_value = {"unexpected": True}
        session.post.return_value = response

        with pytest.raises(LLMError):
            client.generate("prompt")

    @pytest.mark.parametrize("body", [{"response": None}, {"response": 42}, ["response"]])
    def test_non_text_response_raises_llm_error(self, client, session, body):
        response = MagicMock()
        response.json.return_value = body
        session.post.return_value = response

        with pytest.raises(LLMError):
            client.generate("prompt")

    def test_null_response_degrades_to_apology(self, client, session):
        response = MagicMock()
        response.json.return_value = {"response": None}
        session.post.return_value = response
        service = LLMService(client=client)

        reply = service.get_chat_response("explain the data")

        assert reply.success is False
        assert reply.message == LLM_UNAVAILABLE_MESSAGE
