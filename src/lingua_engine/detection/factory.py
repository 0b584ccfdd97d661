"""
Factory function for creating Language Identifiers.
"""

from .interface import LanguageIdentifier
from .mock import MockIdentifierConfig, MockLanguageIdentifier


def create_language_identifier(
    mock: bool = False,
    mock_config: MockIdentifierConfig | None = None,
) -> LanguageIdentifier:
    """Create a LanguageIdentifier instance.

    Args:
        mock: If True, return MockLanguageIdentifier instead of langdetect
        mock_config: Behavior of the mock when mock=True
    """
    if mock:
        return MockLanguageIdentifier(mock_config)

    from .langdetect_provider import LangDetectIdentifier

    return LangDetectIdentifier()
