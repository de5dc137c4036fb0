"""Data models for the Document Translator API."""
from .document import ExtractedDocument
from .translation import PageResult, TranslationReport
from .api import PageResponse, TranslationResponse, Language, LanguagesResponse

__all__ = [
    "ExtractedDocument",
    "PageResult",
    "TranslationReport",
    "PageResponse",
    "TranslationResponse",
    "Language",
    "LanguagesResponse",
]
