"""Services for the Document Translator API."""
from .errors import TranslationPipelineError, ValidationError, ExtractionError
from .page_chunker import PageChunker
from .translation_context import TranslationContext
from .languages import LANGUAGE_NAMES, language_name
from .llm_client import LLMClient, LLMResponse, LLMError, LLMClientError
from .translator import Translator, is_translation_placeholder
from .document_extractor import DocumentExtractor
from .translation_pipeline import TranslationPipeline
from .report_exporter import render_report_text, export_filename

__all__ = ['TranslationPipelineError', 'ValidationError', 'ExtractionError', 'PageChunker', 'TranslationContext', 'LANGUAGE_NAMES', 'language_name', 'LLMClient', 'LLMResponse', 'LLMError', 'LLMClientError', 'Translator', 'is_translation_placeholder', 'DocumentExtractor', 'TranslationPipeline', 'render_report_text', 'export_filename']
