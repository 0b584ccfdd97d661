"""
Factory function for creating Translators.

Provides a unified interface for creating Translator instances.
"""

import os

from .interface import Translator
from .mock import MockTranslator, MockTranslatorConfig


def create_translator(
    mock: bool = False,
    provider: str = "deepl",
    mock_config: MockTranslatorConfig | None = None,
) -> Translator:
    """Create a Translator instance.

    Args:
        mock: If True, return MockTranslator instead of real implementation
        provider: Provider name ("deepl" is the only supported provider currently)
        mock_config: Behavior of the mock when mock=True

    Returns:
        Translator instance (either DeepLTranslator or MockTranslator)

    Raises:
        ValueError: If provider is "deepl" and no auth key is available
    """
    if mock:
        return MockTranslator(mock_config)

    if provider == "deepl":
        auth_key = os.environ.get("DEEPL_AUTH_KEY")
        if not auth_key:
            raise ValueError(
                "DeepL auth key required. Set DEEPL_AUTH_KEY environment variable "
                "or use mock=True for testing."
            )

        # Import here to avoid loading deepl when not needed
        from .deepl_provider import DeepLTranslator

        return DeepLTranslator(auth_key=auth_key)

    raise ValueError(f"Unknown provider: {provider}. Supported: deepl")
