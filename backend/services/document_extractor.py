"""Document text extraction for uploaded files."""
import logging
import os
from typing import Union

from models.document import ExtractedDocument
from services.errors import ExtractionError

logger = logging.getLogger(__name__)

TEXT_EXTENSIONS = {"txt", "md"}


class DocumentExtractor:
    """Extracts plain text from uploaded files based on their extension."""

    def extract(self, content: Union[bytes, str], filename: str) -> ExtractedDocument:
        """
        Extract the text of an uploaded file.

        Plain-text formats are decoded as UTF-8. PDF and other formats have no
        parser yet and yield a bracketed placeholder naming the file.

        Args:
            content: Raw file bytes, or text that was already extracted
            filename: Original filename, used to infer the format

        Returns:
            ExtractedDocument with the extracted text

        Raises:
            ExtractionError: If a text file cannot be decoded
        """
        file_type = self._file_type(filename)

        if isinstance(content, str):
            return ExtractedDocument(filename=filename, text=content, file_type=file_type)

        if file_type in TEXT_EXTENSIONS:
            try:
                text = content.decode("utf-8-sig")
            except UnicodeDecodeError as e:
                logger.error(f"Failed to decode {filename}: {e}")
                raise ExtractionError(f"Could not decode {filename} as UTF-8 text") from e
            logger.info(f"Extracted {len(text)} characters from {filename}")
            return ExtractedDocument(filename=filename, text=text, file_type=file_type)

        if file_type == "pdf":
            text = f"[Content of PDF {filename} - PDF extraction not implemented]"
        else:
            text = f"[Content of file {filename}]"

        logger.warning(f"No extractor for .{file_type or '?'} files, using placeholder for {filename}")
        return ExtractedDocument(
            filename=filename,
            text=text,
            file_type=file_type,
            is_placeholder=True
        )

    @staticmethod
    def _file_type(filename: str) -> str:
        """Return the lowercase extension of filename without the dot."""
        return os.path.splitext(filename)[1].lstrip(".").lower()
