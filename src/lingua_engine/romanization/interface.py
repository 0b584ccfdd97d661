"""
Transliterator Interface Contract.
"""

from typing import Protocol, runtime_checkable


@runtime_checkable
class Transliterator(Protocol):
    """Protocol for the external script transliteration capability."""

    @property
    def component_instance(self) -> str:
        """Return the provider identifier (e.g., 'icu-transliterator')."""
        ...

    def transform(self, text: str, system_id: str) -> str:
        """Apply the transform identified by system_id.

        Raises:
            Exception: If the transform is unknown or fails
        """
        ...
