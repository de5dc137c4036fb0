"""Translation result data models."""
from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class PageResult:
    """Represents a single translated page."""
    page_number: int  # 1-indexed
    original_text: str
    translated_text: str


@dataclass(frozen=True)
class TranslationReport:
    """Represents the outcome of translating one document."""
    source_filename: str
    total_pages: int
    pages: Tuple[PageResult, ...]
    source_language_code: str
    target_language_code: str
