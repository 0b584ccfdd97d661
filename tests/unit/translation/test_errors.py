"""
Tests for error kinds and classification.
"""

import pytest

from lingua_engine.translation import (
    DetectionFailedError,
    EmptyInputError,
    InvalidConfigurationError,
    MissingLanguagePacksError,
    TranslationEngineError,
    TranslationErrorType,
    TranslationFailedError,
)
from lingua_engine.translation.errors import (
    classify_error,
    create_translation_error,
    is_retryable,
)


class TestErrorKinds:
    """Tests for TranslationEngineError subclasses."""

    @pytest.mark.parametrize(
        "error,expected_type",
        [
            (EmptyInputError(), TranslationErrorType.EMPTY_INPUT),
            (DetectionFailedError(), TranslationErrorType.DETECTION_FAILED),
            (MissingLanguagePacksError(["ja"]), TranslationErrorType.MISSING_LANGUAGE_PACKS),
            (TranslationFailedError("es"), TranslationErrorType.TRANSLATION_FAILED),
            (InvalidConfigurationError(), TranslationErrorType.INVALID_CONFIGURATION),
        ],
    )
    def test_error_types(self, error, expected_type):
        assert isinstance(error, TranslationEngineError)
        assert error.error_type == expected_type
        assert error.recovery_suggestion

    def test_missing_language_packs_lists_display_names(self):
        """Test the message names languages, not codes."""
        error = MissingLanguagePacksError(["ja", "ko"])

        assert error.languages == ["ja", "ko"]
        assert "Japanese" in str(error)
        assert "Korean" in str(error)

    def test_missing_language_packs_record_details(self):
        record = MissingLanguagePacksError(["ja"]).to_record()

        assert record.error_type == TranslationErrorType.MISSING_LANGUAGE_PACKS
        assert record.retryable is True
        assert record.details == {"languages": ["ja"]}

    def test_translation_failed_keeps_cause(self):
        cause = ConnectionError("socket closed")
        error = TranslationFailedError("es", cause)

        assert error.language == "es"
        assert error.cause is cause
        assert "Spanish" in str(error)
        assert "socket closed" in str(error)

    def test_translation_failed_record_from_provider_error(self):
        """Test a per-language record keeps its kind and takes retryability from the cause."""
        record = TranslationFailedError("es", ConnectionError("refused")).to_record()

        assert record.error_type == TranslationErrorType.TRANSLATION_FAILED
        assert record.language == "es"
        assert record.retryable is True
        assert record.details == {
            "exception_type": "ConnectionError",
            "cause_type": "provider_error",
        }

    def test_translation_failed_record_from_unknown_error(self):
        record = TranslationFailedError("es", RuntimeError("boom")).to_record()

        assert record.error_type == TranslationErrorType.TRANSLATION_FAILED
        assert record.retryable is False
        assert record.details["cause_type"] == "unknown"

    def test_translation_failed_record_without_cause(self):
        record = TranslationFailedError("es").to_record()

        assert record.error_type == TranslationErrorType.TRANSLATION_FAILED
        assert record.language == "es"
        assert record.details is None

    def test_terminal_user_errors_not_retryable(self):
        assert EmptyInputError().retryable is False
        assert InvalidConfigurationError().retryable is False


class TestClassifyError:
    """Tests for classify_error."""

    def test_engine_error_keeps_own_type(self):
        assert classify_error(DetectionFailedError()) == TranslationErrorType.DETECTION_FAILED

    def test_timeout_error(self):
        assert classify_error(TimeoutError("slow")) == TranslationErrorType.TIMEOUT

    def test_value_error_is_unknown(self):
        """Test a provider ValueError is not mistaken for empty input."""
        assert classify_error(ValueError("bad target argument")) == TranslationErrorType.UNKNOWN

    def test_connection_error(self):
        assert classify_error(ConnectionError("refused")) == TranslationErrorType.PROVIDER_ERROR

    def test_unknown_exception(self):
        assert classify_error(RuntimeError("boom")) == TranslationErrorType.UNKNOWN

    def test_deepl_rate_limit_is_timeout(self):
        deepl = pytest.importorskip("deepl")

        assert classify_error(deepl.TooManyRequestsException("429")) == TranslationErrorType.TIMEOUT

    def test_deepl_other_errors_are_provider_errors(self):
        deepl = pytest.importorskip("deepl")

        assert classify_error(deepl.DeepLException("bad")) == TranslationErrorType.PROVIDER_ERROR


class TestIsRetryable:
    """Tests for is_retryable."""

    @pytest.mark.parametrize(
        "error_type",
        [
            TranslationErrorType.TIMEOUT,
            TranslationErrorType.PROVIDER_ERROR,
            TranslationErrorType.DETECTION_FAILED,
            TranslationErrorType.MISSING_LANGUAGE_PACKS,
        ],
    )
    def test_retryable(self, error_type):
        assert is_retryable(error_type) is True

    @pytest.mark.parametrize(
        "error_type",
        [
            TranslationErrorType.EMPTY_INPUT,
            TranslationErrorType.INVALID_CONFIGURATION,
            TranslationErrorType.UNKNOWN,
        ],
    )
    def test_not_retryable(self, error_type):
        assert is_retryable(error_type) is False


class TestCreateTranslationError:
    """Tests for create_translation_error."""

    def test_from_connection_error(self):
        error = create_translation_error(ConnectionError("refused"), language="es")

        assert error.error_type == TranslationErrorType.PROVIDER_ERROR
        assert error.retryable is True
        assert error.language == "es"
        assert error.message == "refused"
        assert error.details == {"exception_type": "ConnectionError"}

    def test_empty_message_uses_exception_name(self):
        error = create_translation_error(RuntimeError())

        assert error.message == "RuntimeError"
