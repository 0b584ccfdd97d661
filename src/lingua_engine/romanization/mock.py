"""
Mock Transliterator for testing.
"""

from dataclasses import dataclass, field


@dataclass
class MockTransliteratorConfig:
    """Canned transforms keyed by (text, system_id)."""

    transforms: dict[tuple[str, str], str] = field(default_factory=dict)
    failing_systems: set[str] = field(default_factory=set)


class MockTransliterator:
    """Deterministic transliterator.

    Returns canned output when configured, otherwise the input unchanged.
    """

    def __init__(self, config: MockTransliteratorConfig | None = None):
        self._config = config or MockTransliteratorConfig()
        self.calls: list[tuple[str, str]] = []

    @property
    def component_instance(self) -> str:
        return "mock-transliterator-v1"

    def transform(self, text: str, system_id: str) -> str:
        self.calls.append((text, system_id))
        if system_id in self._config.failing_systems:
            raise RuntimeError(f"Mock transform failure: {system_id}")
        return self._config.transforms.get((text, system_id), text)
