"""
Language Identifier Interface Contract.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class LanguageIdentifier(Protocol):
    """Protocol for the external language-identification capability."""

    @property
    def component_instance(self) -> str:
        """Return the provider identifier (e.g., 'langdetect-v1')."""
        ...

    def identify(self, text: str, max_results: int = 10) -> list[tuple[str, float]]:
        """Return (language_code, confidence) pairs ranked by confidence.

        An empty list means no language could be identified.
        """
        ...
