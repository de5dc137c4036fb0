"""Page chunker that splits document text into word-aligned pages."""
import logging
from typing import List

from config import PAGE_CHAR_BUDGET, MAX_PAGES

logger = logging.getLogger(__name__)


class PageChunker:
    """Splits text into an ordered, capped sequence of bounded-size pages."""

    def __init__(self, max_chars: int = PAGE_CHAR_BUDGET, max_pages: int = MAX_PAGES):
        """
        Initialize PageChunker.

        Args:
            max_chars: Character budget per page
            max_pages: Maximum number of pages retained per document
        """
        if max_chars <= 0:
            raise ValueError("max_chars must be a positive integer")
        if max_pages <= 0:
            raise ValueError("max_pages must be a positive integer")

        self.max_chars = max_chars
        self.max_pages = max_pages

    def chunk(self, text: str) -> List[str]:
        """
        Split text into pages along word boundaries.

        Words are packed greedily; a word that would push the current page
        past the budget starts a new page. A word longer than the budget is
        never split and forms a page of its own. Whitespace runs collapse to
        single spaces. Pages beyond ``max_pages`` are dropped.

        Args:
            text: Document text to split

        Returns:
            List of page texts, at most ``max_pages`` long
        """
        pages: List[str] = []
        current_words: List[str] = []
        current_length = 0

        for word in text.split():
            if current_words and current_length + len(word) + 1 > self.max_chars:
                pages.append(" ".join(current_words))
                current_words = [word]
                current_length = len(word)
            elif current_words:
                current_words.append(word)
                current_length += len(word) + 1
            else:
                current_words = [word]
                current_length = len(word)

        if current_words:
            pages.append(" ".join(current_words))

        if len(pages) > self.max_pages:
            logger.warning(
                f"Document produced {len(pages)} pages, keeping the first {self.max_pages}"
            )

        return pages[:self.max_pages]
