"""
Language catalog and script classification.
"""

from .catalog import (
    SUPPORTED_CODES,
    SUPPORTED_LANGUAGES,
    LanguageInfo,
    display_name,
    find_matching_language,
    is_supported,
    normalize_code,
    sort_by_display_name,
    validate_codes,
)
from .script import Script

__all__ = [
    "LanguageInfo",
    "SUPPORTED_LANGUAGES",
    "SUPPORTED_CODES",
    "Script",
    "display_name",
    "find_matching_language",
    "is_supported",
    "normalize_code",
    "sort_by_display_name",
    "validate_codes",
]
