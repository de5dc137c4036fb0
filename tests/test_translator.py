"""Unit tests for Translator and language lookup."""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

import pytest
from unittest.mock import Mock
from services.languages import LANGUAGE_NAMES, language_name
from services.llm_client import LLMResponse, LLMError, LLMClientError
from services.translator import (
    Translator,
    SYSTEM_PROMPT,
    UNAVAILABLE_PLACEHOLDER,
    is_translation_placeholder,
)


def make_response(text):
    """Build an LLMResponse carrying text."""
    return LLMResponse(
        text=text,
        tokens_input=120,
        tokens_output=40,
        latency_ms=15,
        model_used="llama-3.3-70b-versatile"
    )


class TestLanguageNames:
    """Test suite for the language lookup table."""

    def test_known_codes(self):
        """Test the ten supported codes resolve to names."""
        assert len(LANGUAGE_NAMES) == 10
        assert language_name("en") == "English"
        assert language_name("pt") == "Portuguese"
        assert language_name("ja") == "Japanese"

    def test_unknown_code_falls_back_to_code(self):
        """Test unknown codes pass through unchanged."""
        assert language_name("xx") == "xx"
        assert language_name("") == ""

    def test_mapping_is_read_only(self):
        """Test the lookup table cannot be modified."""
        with pytest.raises(TypeError):
            LANGUAGE_NAMES["xx"] = "Unknown"


class TestTranslator:
    """Test suite for Translator."""

    @pytest.fixture
    def llm_client(self):
        """Mock LLM client returning a fixed translation."""
        client = Mock()
        client.generate.return_value = make_response("  Olá mundo  ")
        return client

    def test_build_prompt_contains_text_context_and_names(self):
        """Test the prompt embeds context, text, and language names."""
        prompt = Translator.build_prompt(
            "Hello world",
            "en",
            "pt",
            "\n--- Page 1 ---\nPrimeira página\n"
        )

        assert "Hello world" in prompt
        assert "Primeira página" in prompt
        assert "ORIGINAL TEXT (English)" in prompt
        assert "TRANSLATION (Portuguese)" in prompt
        assert "from English to Portuguese" in prompt

    def test_build_prompt_lists_instructions(self):
        """Test the prompt carries every translation instruction."""
        prompt = Translator.build_prompt("Text", "en", "fr")

        assert "Translate faithfully" in prompt
        assert "technical terms, proper nouns and formatting" in prompt
        assert "natural, fluent language" in prompt
        assert "Preserve the original meaning" in prompt
        assert "consistent with the provided context" in prompt

    def test_build_prompt_uses_raw_unknown_code(self):
        """Test unknown codes appear verbatim in the prompt."""
        prompt = Translator.build_prompt("Text", "xx", "pt")

        assert "ORIGINAL TEXT (xx)" in prompt
        assert "from xx to Portuguese" in prompt

    def test_translate_returns_trimmed_text(self, llm_client):
        """Test a successful translation is stripped."""
        translator = Translator(llm_client)

        assert translator.translate("Hello world", "en", "pt") == "Olá mundo"

    def test_translate_request_parameters(self, llm_client):
        """Test the request uses low temperature, bounded output, and the system prompt."""
        translator = Translator(llm_client, model="test-model")

        translator.translate("Hello", "en", "pt", "earlier pages")

        kwargs = llm_client.generate.call_args.kwargs
        assert kwargs["model"] == "test-model"
        assert kwargs["temperature"] == 0.3
        assert kwargs["max_tokens"] == 2000
        assert kwargs["system_prompt"] == SYSTEM_PROMPT
        assert "earlier pages" in kwargs["prompt"]
        assert "Hello" in kwargs["prompt"]

    @pytest.mark.parametrize("content", [None, "", "   \n"])
    def test_empty_response_returns_unavailable_placeholder(self, llm_client, content):
        """Test an empty model response becomes a soft-failure placeholder."""
        llm_client.generate.return_value = make_response(content)
        translator = Translator(llm_client)

        result = translator.translate("Hello", "en", "pt")

        assert result == UNAVAILABLE_PLACEHOLDER
        assert is_translation_placeholder(result)

    def test_client_error_becomes_error_placeholder(self, llm_client):
        """Test structured client errors are caught and embedded in the placeholder."""
        llm_client.generate.side_effect = LLMClientError(LLMError(
            code="RATE_LIMIT_ERROR",
            message="Rate limit exceeded. Please try again in a few moments.",
            details={"retry_after": 60}
        ))
        translator = Translator(llm_client)

        result = translator.translate("Hello", "en", "pt")

        assert result == "[Translation error: Rate limit exceeded. Please try again in a few moments.]"
        assert is_translation_placeholder(result)

    def test_unexpected_error_becomes_error_placeholder(self, llm_client):
        """Test arbitrary exceptions never escape translate()."""
        llm_client.generate.side_effect = RuntimeError("connection reset")
        translator = Translator(llm_client)

        result = translator.translate("Hello", "en", "pt")

        assert result.startswith("[Translation error:")
        assert "connection reset" in result

    def test_token_counter_receives_prompt(self, llm_client):
        """Test the optional token counter sees the full prompt."""
        counter = Mock(return_value=42)
        translator = Translator(llm_client, token_counter=counter)

        translator.translate("Hello", "en", "pt", "ctx")

        counter.assert_called_once_with(llm_client.generate.call_args.kwargs["prompt"])

    def test_failing_token_counter_does_not_fail_translation(self, llm_client):
        """Test a token counter error only skips the prompt size log."""
        counter = Mock(side_effect=ValueError(
            "Encountered text corresponding to disallowed special token '<|endoftext|>'"
        ))
        translator = Translator(llm_client, token_counter=counter)

        result = translator.translate("Docs mention <|endoftext|> as a marker.", "en", "pt")

        assert result == "Olá mundo"
        counter.assert_called_once()
        llm_client.generate.assert_called_once()

    def test_is_translation_placeholder_rejects_real_text(self):
        """Test ordinary translations are not mistaken for placeholders."""
        assert not is_translation_placeholder("Olá mundo")
        assert not is_translation_placeholder("[Nota do tradutor] texto")
