"""
Factory function for creating Transliterators.
"""

from .interface import Transliterator
from .mock import MockTransliterator, MockTransliteratorConfig


def create_transliterator(
    mock: bool = False,
    mock_config: MockTransliteratorConfig | None = None,
) -> Transliterator:
    """Create a Transliterator instance.

    Args:
        mock: If True, return MockTransliterator instead of the ICU provider
        mock_config: Behavior of the mock when mock=True

    Raises:
        ImportError: If PyICU is not installed and mock is False
    """
    if mock:
        return MockTransliterator(mock_config)

    from .icu_provider import IcuTransliterator

    return IcuTransliterator()
