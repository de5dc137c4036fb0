"""Error types raised by the translation pipeline."""


class TranslationPipelineError(Exception):
    """Base class for failures that abort a whole pipeline run."""


class ValidationError(TranslationPipelineError):
    """Raised when the uploaded input is missing or unacceptable."""


class ExtractionError(TranslationPipelineError):
    """Raised when text cannot be extracted from an uploaded file."""
