"""Language code to display name lookup."""
from types import MappingProxyType

LANGUAGE_NAMES = MappingProxyType({
    "en": "English",
    "es": "Spanish",
    "fr": "French",
    "de": "German",
    "it": "Italian",
    "pt": "Portuguese",
    "ja": "Japanese",
    "ko": "Korean",
    "zh": "Chinese",
    "ru": "Russian",
})


def language_name(code: str) -> str:
    """Return the display name for a language code, or the code itself if unknown."""
    return LANGUAGE_NAMES.get(code, code)
