"""Main entry point for the Document Translator API."""
import logging
from typing import Callable, Optional
from urllib.parse import quote

import tiktoken
from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse

from config import PORT, CORS_ORIGINS, LOG_LEVEL, LOG_FORMAT, TOKEN_ENCODING, MAX_UPLOAD_BYTES
from logger import setup_logging
from models.api import TranslationResponse, Language, LanguagesResponse
from services.errors import ValidationError, ExtractionError
from services.languages import LANGUAGE_NAMES
from services.llm_client import LLMClient
from services.report_exporter import render_report_text, export_filename
from services.translation_pipeline import TranslationPipeline
from services.translator import Translator

# Initialize logging
if LOG_FORMAT == "json":
    setup_logging(LOG_LEVEL)
logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="Document Translator",
    description="Context-aware, page-by-page document translation",
    version="1.0.0"
)

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Initialize services (will be done on startup)
translation_pipeline: TranslationPipeline = None


def prompt_token_counter(encoder) -> Callable[[str], int]:
    """
    Build a prompt token counter from a tiktoken encoding.

    Uploaded text may contain special-token strings such as <|endoftext|>;
    they are counted as ordinary text instead of raising.
    """
    return lambda prompt: len(encoder.encode(prompt, disallowed_special=()))


@app.on_event("startup")
async def startup_event():
    """Initialize services on startup."""
    global translation_pipeline

    logger.info("Initializing Document Translator services...")

    try:
        # Token counting for prompt-size logging
        encoder = tiktoken.get_encoding(TOKEN_ENCODING)
        logger.info(f"Initialized tiktoken encoder ({TOKEN_ENCODING})")

        llm_client = LLMClient()
        logger.info("Initialized LLMClient")

        translator = Translator(
            llm_client,
            token_counter=prompt_token_counter(encoder)
        )
        translation_pipeline = TranslationPipeline(translator)
        logger.info("Initialized TranslationPipeline")

        logger.info("All services initialized successfully")
    except Exception as e:
        logger.error(f"Failed to initialize services: {e}", exc_info=True)
        raise


@app.get("/")
async def root():
    """Health check endpoint."""
    return {"status": "ok", "message": "Document Translator API"}


@app.get("/health")
async def health():
    """Detailed health check."""
    return {
        "status": "healthy",
        "service": "document-translator",
        "version": "1.0.0"
    }


@app.get("/languages", response_model=LanguagesResponse)
async def languages() -> LanguagesResponse:
    """List the language codes with known display names."""
    return LanguagesResponse(
        languages=[Language(code=code, name=name) for code, name in LANGUAGE_NAMES.items()]
    )


@app.post("/translate", response_model=TranslationResponse)
async def translate_endpoint(
    file: Optional[UploadFile] = File(None),
    source_lang: str = Form("en"),
    target_lang: str = Form("pt")
) -> TranslationResponse:
    """
    Translate an uploaded document page by page.

    The document is split into at most 10 pages which are translated in
    order, each with the earlier translations as context. Pages whose
    translation failed carry a placeholder instead of aborting the request.

    Args:
        file: Uploaded document
        source_lang: Source language code
        target_lang: Target language code

    Returns:
        TranslationResponse with every translated page

    Raises:
        HTTPException: 400 for missing input, 422 for unreadable files, 500 otherwise
    """
    try:
        if file is None:
            raise HTTPException(status_code=400, detail="No file provided")

        # One byte past the limit is enough for the pipeline to reject it
        content = await file.read(MAX_UPLOAD_BYTES + 1)

        # The pipeline blocks on the model for every page
        report = await run_in_threadpool(
            translation_pipeline.run,
            content,
            file.filename,
            source_lang,
            target_lang
        )

        return TranslationResponse.from_report(report)

    except HTTPException:
        # Re-raise HTTP exceptions
        raise
    except ValidationError as e:
        logger.warning(f"Rejected translation request: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except ExtractionError as e:
        logger.warning(f"Could not extract document text: {e}")
        raise HTTPException(status_code=422, detail=str(e))
    except Exception as e:
        # Handle unexpected errors
        logger.error(f"Unexpected error during translation: {e}", exc_info=True)
        raise HTTPException(
            status_code=500,
            detail=f"Internal server error: {str(e)}"
        )


@app.post("/translate/export", response_class=PlainTextResponse)
async def export_endpoint(result: TranslationResponse) -> PlainTextResponse:
    """Render a translation result as a downloadable plain-text file."""
    content = render_report_text(result.to_report())
    download_name = quote(export_filename(result.filename))
    return PlainTextResponse(
        content,
        headers={"Content-Disposition": f"attachment; filename*=UTF-8''{download_name}"}
    )


if __name__ == "__main__":
    import uvicorn
    logger.info(f"Starting Document Translator API on port {PORT}")
    uvicorn.run(app, host="0.0.0.0", port=PORT)
