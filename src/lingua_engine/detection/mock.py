"""
Mock Language Identifier for testing.
"""

from dataclasses import dataclass, field


@dataclass
class MockIdentifierConfig:
    """Canned hypotheses keyed by input text, with a default for unknown text."""

    hypotheses: dict[str, list[tuple[str, float]]] = field(default_factory=dict)
    default: list[tuple[str, float]] = field(default_factory=list)


class MockLanguageIdentifier:
    """Deterministic identifier returning canned hypotheses."""

    def __init__(self, config: MockIdentifierConfig | None = None):
        self._config = config or MockIdentifierConfig()
        self.calls: list[str] = []

    @property
    def component_instance(self) -> str:
        return "mock-identifier-v1"

    def identify(self, text: str, max_results: int = 10) -> list[tuple[str, float]]:
        self.calls.append(text)
        ranked = self._config.hypotheses.get(text, self._config.default)
        return sorted(ranked, key=lambda p: -p[1])[:max_results]
