"""Plain-text export of translation reports."""
from models.translation import TranslationReport

SEPARATOR = "=" * 50


def render_report_text(report: TranslationReport) -> str:
    """Render every page of a report as original and translated text blocks."""
    blocks = [
        f"PAGE {page.page_number}\n\n"
        f"ORIGINAL ({report.source_language_code}):\n{page.original_text}\n\n"
        f"TRANSLATED ({report.target_language_code}):\n{page.translated_text}\n\n"
        f"{SEPARATOR}\n"
        for page in report.pages
    ]
    return "\n".join(blocks)


def export_filename(source_filename: str) -> str:
    """Name of the downloadable export for a source file."""
    return f"translated_{source_filename}.txt"
