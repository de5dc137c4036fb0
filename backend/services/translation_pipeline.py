"""Pipeline that translates a whole document page by page."""
import logging
import time
from typing import List, Optional, Union

from config import MAX_UPLOAD_BYTES
from models.translation import PageResult, TranslationReport
from services.document_extractor import DocumentExtractor
from services.errors import ValidationError
from services.page_chunker import PageChunker
from services.translation_context import TranslationContext
from services.translator import Translator, is_translation_placeholder

logger = logging.getLogger(__name__)


class TranslationPipeline:
    """
    Runs validate -> extract -> chunk -> translate -> assemble for one document.

    Pages are translated strictly in order: each request carries the
    translations of all earlier pages as context, so pages cannot be sent
    concurrently. A failed page becomes a placeholder and the run continues.
    """

    def __init__(
        self,
        translator: Translator,
        extractor: Optional[DocumentExtractor] = None,
        chunker: Optional[PageChunker] = None,
        max_upload_bytes: int = MAX_UPLOAD_BYTES
    ):
        """
        Initialize TranslationPipeline.

        Args:
            translator: Translator used for every page
            extractor: Document extractor (defaults to DocumentExtractor())
            chunker: Page chunker (defaults to PageChunker())
            max_upload_bytes: Largest accepted file size
        """
        self.translator = translator
        self.extractor = extractor or DocumentExtractor()
        self.chunker = chunker or PageChunker()
        self.max_upload_bytes = max_upload_bytes

    def run(
        self,
        file_content: Union[bytes, str, None],
        filename: Optional[str],
        source_lang: str,
        target_lang: str
    ) -> TranslationReport:
        """
        Translate a document.

        Args:
            file_content: Raw uploaded bytes, or already extracted text
            filename: Original filename
            source_lang: Source language code
            target_lang: Target language code

        Returns:
            TranslationReport with one PageResult per processed page

        Raises:
            ValidationError: If no file content or filename was provided
            ExtractionError: If the file text cannot be extracted
        """
        start_time = time.time()

        # Step 1: Validate
        self._validate(file_content, filename)
        logger.info(f"Translating {filename} from {source_lang} to {target_lang}")

        # Step 2: Extract
        document = self.extractor.extract(file_content, filename)

        # Step 3: Chunk
        chunks = self.chunker.chunk(document.text)
        logger.info(f"Split {filename} into {len(chunks)} pages")

        # Step 4: Translate sequentially, growing the context
        context = TranslationContext()
        pages: List[PageResult] = []
        failed_pages = 0

        for index, chunk in enumerate(chunks):
            page_number = index + 1
            translated = self.translator.translate(
                chunk,
                source_lang,
                target_lang,
                context.current()
            )
            pages.append(PageResult(
                page_number=page_number,
                original_text=chunk,
                translated_text=translated
            ))

            if is_translation_placeholder(translated):
                failed_pages += 1
                logger.warning(f"Page {page_number} of {filename} was not translated")
            else:
                context.append(page_number, translated)
                logger.debug(f"Translated page {page_number}/{len(chunks)} of {filename}")

        # Step 5: Assemble
        latency_ms = int((time.time() - start_time) * 1000)
        logger.info(
            f"Translated {filename}: pages={len(pages)}, failed={failed_pages}, "
            f"context_chars={len(context.current())}, latency={latency_ms}ms"
        )

        return TranslationReport(
            source_filename=filename,
            total_pages=len(pages),
            pages=tuple(pages),
            source_language_code=source_lang,
            target_language_code=target_lang
        )

    def _validate(self, file_content: Union[bytes, str, None], filename: Optional[str]) -> None:
        """Reject missing, empty, or oversized uploads."""
        if not file_content:
            raise ValidationError("No file provided")
        if not filename:
            raise ValidationError("File name is required")

        size = len(file_content.encode("utf-8")) if isinstance(file_content, str) else len(file_content)
        if size > self.max_upload_bytes:
            raise ValidationError(
                f"File is too large (limit {self.max_upload_bytes} bytes)"
            )
