"""Document data models."""
from dataclasses import dataclass


@dataclass(frozen=True)
class ExtractedDocument:
    """Represents the text extracted from one uploaded file."""
    filename: str
    text: str
    file_type: str  # lowercase extension without the dot, "" when absent
    is_placeholder: bool = False  # True when the format has no real extractor
