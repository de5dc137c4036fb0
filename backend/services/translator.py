"""Translator that turns one page plus prior context into a model request."""
import logging
from typing import Callable, Optional

from config import TRANSLATION_MODEL, TRANSLATION_TEMPERATURE, TRANSLATION_MAX_TOKENS
from services.languages import language_name
from services.llm_client import LLMClient, LLMClientError

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = (
    "You are a professional translator specialized in accurate, "
    "context-aware document translation."
)

UNAVAILABLE_PLACEHOLDER = "[Translation unavailable]"
ERROR_PLACEHOLDER_PREFIX = "[Translation error:"


def is_translation_placeholder(text: str) -> bool:
    """Return True if text is a soft-failure marker rather than a translation."""
    return text == UNAVAILABLE_PLACEHOLDER or text.startswith(ERROR_PLACEHOLDER_PREFIX)


class Translator:
    """Translates single pages through the LLM, never raising on model failures."""

    def __init__(
        self,
        llm_client: LLMClient,
        model: str = TRANSLATION_MODEL,
        temperature: float = TRANSLATION_TEMPERATURE,
        max_tokens: int = TRANSLATION_MAX_TOKENS,
        token_counter: Optional[Callable[[str], int]] = None
    ):
        """
        Initialize Translator.

        Args:
            llm_client: Client used to reach the language model
            model: Model name sent with every request
            temperature: Sampling temperature, kept low for faithful output
            max_tokens: Output cap per page
            token_counter: Optional callable returning the token count of a prompt
        """
        self.llm_client = llm_client
        self.model = model
        self.temperature = temperature
        self.max_tokens = max_tokens
        self.token_counter = token_counter

    def translate(self, text: str, source_lang: str, target_lang: str, context: str = "") -> str:
        """
        Translate one page of text.

        Failures of the model call are converted into a visible placeholder
        string so that one bad page does not abort the whole document.

        Args:
            text: Page text to translate
            source_lang: Source language code
            target_lang: Target language code
            context: Previously translated pages, for consistency

        Returns:
            Translated text, or a placeholder on failure
        """
        prompt = self.build_prompt(text, source_lang, target_lang, context)

        if self.token_counter:
            # Prompt size is informational only
            try:
                logger.info(f"Translation prompt size: {self.token_counter(prompt)} tokens")
            except Exception as e:
                logger.warning(f"Could not count prompt tokens: {e}")

        try:
            response = self.llm_client.generate(
                model=self.model,
                prompt=prompt,
                max_tokens=self.max_tokens,
                temperature=self.temperature,
                system_prompt=SYSTEM_PROMPT
            )
        except LLMClientError as e:
            logger.error(f"Translation failed ({e.error.code}): {e.error.message}")
            return f"{ERROR_PLACEHOLDER_PREFIX} {e.error.message}]"
        except Exception as e:
            logger.error(f"Translation failed: {e}", exc_info=True)
            return f"{ERROR_PLACEHOLDER_PREFIX} {e}]"

        translated = (response.text or "").strip()
        if not translated:
            logger.warning("Model returned no content for translation request")
            return UNAVAILABLE_PLACEHOLDER

        return translated

    @staticmethod
    def build_prompt(text: str, source_lang: str, target_lang: str, context: str = "") -> str:
        """
        Build the translation prompt.

        Args:
            text: Page text to translate
            source_lang: Source language code
            target_lang: Target language code
            context: Previously translated pages

        Returns:
            Complete prompt string
        """
        source_name = language_name(source_lang)
        target_name = language_name(target_lang)

        prompt = f"""You are a professional translator specialized in document translation.

PREVIOUS CONTEXT (for consistency):
{context}

ORIGINAL TEXT ({source_name}):
{text}

INSTRUCTIONS:
1. Translate faithfully from {source_name} to {target_name}
2. Keep technical terms, proper nouns and formatting
3. Use natural, fluent language
4. Preserve the original meaning
5. Stay consistent with the provided context

TRANSLATION ({target_name}):"""

        return prompt.strip()
