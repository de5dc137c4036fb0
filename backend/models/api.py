"""API request and response models."""
from typing import List
from pydantic import BaseModel, Field

from .translation import PageResult, TranslationReport


class PageResponse(BaseModel):
    """A single page of the translation response."""
    page_number: int = Field(..., ge=1)
    original: str
    translated: str


class TranslationResponse(BaseModel):
    """Response body returned from the translate endpoint."""
    filename: str
    total_pages: int = Field(..., ge=0)
    pages: List[PageResponse]
    source_lang: str
    target_lang: str

    @classmethod
    def from_report(cls, report: TranslationReport) -> "TranslationResponse":
        """Build the wire representation of a translation report."""
        return cls(
            filename=report.source_filename,
            total_pages=report.total_pages,
            pages=[
                PageResponse(
                    page_number=page.page_number,
                    original=page.original_text,
                    translated=page.translated_text
                )
                for page in report.pages
            ],
            source_lang=report.source_language_code,
            target_lang=report.target_language_code
        )

    def to_report(self) -> TranslationReport:
        """Rebuild the domain report from a response body."""
        return TranslationReport(
            source_filename=self.filename,
            total_pages=self.total_pages,
            pages=tuple(
                PageResult(
                    page_number=page.page_number,
                    original_text=page.original,
                    translated_text=page.translated
                )
                for page in self.pages
            ),
            source_language_code=self.source_lang,
            target_language_code=self.target_lang
        )


class Language(BaseModel):
    """A supported language code and its display name."""
    code: str
    name: str


class LanguagesResponse(BaseModel):
    """Response body listing the known languages."""
    languages: List[Language]
