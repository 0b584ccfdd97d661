"""
Error kinds and classification for the translation engine.

Terminal conditions are raised as `TranslationEngineError` subclasses.
Per-language failures are classified into `TranslationError` records and
swallowed by the fan-out. Includes DeepL-specific exception handling.
"""

from lingua_engine.languages import display_name

from .models import TranslationError, TranslationErrorType

__all__ = [
    "TranslationErrorType",
    "TranslationEngineError",
    "EmptyInputError",
    "DetectionFailedError",
    "MissingLanguagePacksError",
    "TranslationFailedError",
    "InvalidConfigurationError",
    "classify_error",
    "is_retryable",
    "create_translation_error",
]


# -----------------------------------------------------------------------------
# Exceptions
# -----------------------------------------------------------------------------


class TranslationEngineError(Exception):
    """Base class for errors surfaced to the caller."""

    error_type: TranslationErrorType = TranslationErrorType.UNKNOWN
    recovery_suggestion: str = "Please try again"
    retryable: bool = True

    def to_record(self) -> TranslationError:
        """Convert to a structured error record."""
        return TranslationError(
            error_type=self.error_type,
            message=str(self),
            retryable=self.retryable,
        )


class EmptyInputError(TranslationEngineError):
    error_type = TranslationErrorType.EMPTY_INPUT
    recovery_suggestion = "Enter some text in the input field"
    retryable = False

    def __init__(self) -> None:
        super().__init__("Please enter text to translate")


class DetectionFailedError(TranslationEngineError):
    error_type = TranslationErrorType.DETECTION_FAILED
    recovery_suggestion = "Try entering more text or specify the source language manually"

    def __init__(self) -> None:
        super().__init__("Failed to detect language")


class MissingLanguagePacksError(TranslationEngineError):
    """All requested targets were unavailable (usually missing language packs)."""

    error_type = TranslationErrorType.MISSING_LANGUAGE_PACKS
    recovery_suggestion = "Download the language packs for the selected languages"

    def __init__(self, languages: list[str]) -> None:
        self.languages = list(languages)
        names = ", ".join(display_name(code) for code in self.languages)
        super().__init__(f"Language packs not installed: {names}" if names else "Language packs not installed")

    def to_record(self) -> TranslationError:
        record = super().to_record()
        record.details = {"languages": self.languages}
        return record


class TranslationFailedError(TranslationEngineError):
    """A single target failed. Swallowed by the fan-out, never terminal."""

    error_type = TranslationErrorType.TRANSLATION_FAILED

    def __init__(self, language: str, cause: Exception | None = None) -> None:
        self.language = language
        self.cause = cause
        reason = str(cause) if cause is not None and str(cause) else "unknown error"
        super().__init__(f"Translation to {display_name(language)} failed: {reason}")

    def to_record(self) -> TranslationError:
        """Record as TRANSLATION_FAILED; retryability follows the provider cause."""
        record = super().to_record()
        record.language = self.language
        if self.cause is not None:
            cause_type = classify_error(self.cause)
            record.retryable = is_retryable(cause_type)
            record.details = {
                "exception_type": type(self.cause).__name__,
                "cause_type": cause_type.value,
            }
        return record


class InvalidConfigurationError(TranslationEngineError):
    error_type = TranslationErrorType.INVALID_CONFIGURATION
    recovery_suggestion = "Please check your language selection"
    retryable = False

    def __init__(self, message: str = "No target languages selected") -> None:
        super().__init__(message)


# -----------------------------------------------------------------------------
# Classification
# -----------------------------------------------------------------------------

# Set of retryable error types
_RETRYABLE_ERRORS = {
    TranslationErrorType.TIMEOUT,
    TranslationErrorType.PROVIDER_ERROR,
    TranslationErrorType.DETECTION_FAILED,
    TranslationErrorType.MISSING_LANGUAGE_PACKS,
}

# DeepL exception types (lazy import to avoid import errors if deepl not installed)
_DEEPL_RATE_LIMIT_EXCEPTIONS: tuple[type, ...] = ()
_DEEPL_BASE_EXCEPTION: type | None = None

try:
    import deepl

    _DEEPL_BASE_EXCEPTION = deepl.DeepLException
    _DEEPL_RATE_LIMIT_EXCEPTIONS = (deepl.TooManyRequestsException,)
except ImportError:
    pass


def classify_error(exception: Exception) -> TranslationErrorType:
    """Classify a Python exception to a TranslationErrorType.

    Args:
        exception: The exception to classify

    Returns:
        The corresponding TranslationErrorType
    """
    if isinstance(exception, TranslationEngineError):
        return exception.error_type

    # DeepL-specific exception handling
    if _DEEPL_BASE_EXCEPTION and isinstance(exception, _DEEPL_BASE_EXCEPTION):
        if _DEEPL_RATE_LIMIT_EXCEPTIONS and isinstance(exception, _DEEPL_RATE_LIMIT_EXCEPTIONS):
            return TranslationErrorType.TIMEOUT  # Rate limiting is retryable
        return TranslationErrorType.PROVIDER_ERROR

    if isinstance(exception, TimeoutError):
        return TranslationErrorType.TIMEOUT
    elif isinstance(exception, ConnectionError):
        return TranslationErrorType.PROVIDER_ERROR
    else:
        return TranslationErrorType.UNKNOWN


def is_retryable(error_type: TranslationErrorType) -> bool:
    """Determine if an error type is worth retrying.

    Retryable errors are transient (TIMEOUT, PROVIDER_ERROR) or terminal
    conditions the caller may resolve and retry (DETECTION_FAILED,
    MISSING_LANGUAGE_PACKS).
    """
    return error_type in _RETRYABLE_ERRORS


def create_translation_error(exception: Exception, language: str | None = None) -> TranslationError:
    """Create a TranslationError from a Python exception.

    Args:
        exception: The exception to convert
        language: Target language the exception belongs to

    Returns:
        TranslationError with appropriate type and retryable flag
    """
    error_type = classify_error(exception)
    message = str(exception) if str(exception) else f"{type(exception).__name__}"

    return TranslationError(
        error_type=error_type,
        message=message,
        retryable=is_retryable(error_type),
        language=language,
        details={"exception_type": type(exception).__name__},
    )
