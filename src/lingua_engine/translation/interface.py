"""
Translator Interface Contract.

This module defines the interface that all Translator implementations must follow.
Both real provider implementations (e.g., DeepL) and mock implementations conform to this contract.
"""

from abc import ABC, abstractmethod
from typing import Protocol, runtime_checkable

from .models import PairStatus


@runtime_checkable
class Translator(Protocol):
    """Protocol defining the external Translator capability.

    Implementations are synchronous; the fan-out runs each call in a worker
    thread so that targets translate concurrently.
    """

    @property
    def component_name(self) -> str:
        """Return the component name (always 'translate')."""
        ...

    @property
    def component_instance(self) -> str:
        """Return the provider identifier (e.g., 'mock-dictionary-v1')."""
        ...

    @property
    def is_ready(self) -> bool:
        """Check if the component is ready to process requests."""
        ...

    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Translate text from source to target language.

        Args:
            text: Text to translate
            source_language: Source language code (e.g., "fr")
            target_language: Target language code (e.g., "en")

        Returns:
            Translated text

        Raises:
            Exception: If the pair is not installed/available or the provider fails
        """
        ...

    def pair_status(self, source_language: str, target_language: str) -> PairStatus:
        """Report availability of a source/target pair."""
        ...

    def shutdown(self) -> None:
        """Release resources (API connections, loaded models, etc.)."""
        ...


class BaseTranslator(ABC):
    """Abstract base class for Translator implementations.

    Provides common functionality and enforces the Translator contract.
    """

    _component_name: str = "translate"

    @property
    def component_name(self) -> str:
        """Return the component name (always 'translate')."""
        return self._component_name

    @property
    @abstractmethod
    def component_instance(self) -> str:
        """Subclasses must provide their instance identifier."""
        pass

    @property
    @abstractmethod
    def is_ready(self) -> bool:
        """Subclasses must indicate readiness."""
        pass

    @abstractmethod
    def translate(self, text: str, source_language: str, target_language: str) -> str:
        """Subclasses must implement translation logic."""
        pass

    @abstractmethod
    def pair_status(self, source_language: str, target_language: str) -> PairStatus:
        """Subclasses must report pair availability."""
        pass

    def is_pair_installed(self, source_language: str, target_language: str) -> bool:
        """Convenience check for an installed pair."""
        return self.pair_status(source_language, target_language) == PairStatus.INSTALLED

    def shutdown(self) -> None:
        """Default implementation does nothing. Override if cleanup needed."""
        return  # noqa: B027 - intentionally empty default implementation
