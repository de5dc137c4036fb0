"""Unit tests for the report exporter."""
import os
import sys

sys.path.insert(0, os.path.join(os.path.dirname(__file__), '..', 'backend'))

from models.translation import PageResult, TranslationReport
from services.report_exporter import render_report_text, export_filename, SEPARATOR


def make_report(pages):
    return TranslationReport(
        source_filename="story.txt",
        total_pages=len(pages),
        pages=tuple(pages),
        source_language_code="en",
        target_language_code="pt"
    )


def test_render_single_page():
    """Test the layout of one exported page."""
    report = make_report([PageResult(1, "Hello", "Olá")])

    assert render_report_text(report) == (
        "PAGE 1\n\n"
        "ORIGINAL (en):\nHello\n\n"
        "TRANSLATED (pt):\nOlá\n\n"
        f"{SEPARATOR}\n"
    )


def test_render_pages_in_order():
    """Test pages appear in report order, each followed by a separator."""
    report = make_report([
        PageResult(1, "One", "Um"),
        PageResult(2, "Two", "Dois"),
        PageResult(3, "Three", "[Translation error: boom]"),
    ])

    text = render_report_text(report)

    assert text.index("PAGE 1") < text.index("PAGE 2") < text.index("PAGE 3")
    assert text.count(SEPARATOR) == 3
    assert "[Translation error: boom]" in text


def test_render_empty_report():
    """Test a report without pages renders as empty text."""
    assert render_report_text(make_report([])) == ""


def test_export_filename():
    """Test the export name derives from the source filename."""
    assert export_filename("story.txt") == "translated_story.txt.txt"
    assert len(SEPARATOR) == 50
