"""Context accumulator for consistent multi-page translation."""
from typing import List, Tuple


class TranslationContext:
    """
    Growing record of previously translated pages.

    The full history is kept and handed to every subsequent translation
    request; there is no eviction. One instance belongs to one pipeline run.
    """

    def __init__(self):
        self._entries: List[Tuple[int, str]] = []
        self._buffer = ""

    def append(self, page_number: int, translated_text: str) -> None:
        """Record the translation of a page under its page label."""
        self._entries.append((page_number, translated_text))
        self._buffer += f"\n--- Page {page_number} ---\n{translated_text}\n"

    def current(self) -> str:
        """Return the whole accumulated context."""
        return self._buffer

    @property
    def page_numbers(self) -> List[int]:
        """Page numbers recorded so far, in insertion order."""
        return [page_number for page_number, _ in self._entries]

    def __len__(self) -> int:
        return len(self._entries)
