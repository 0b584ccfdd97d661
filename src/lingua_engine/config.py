"""Environment-based configuration for the translation engine.

All configuration is loaded from environment variables with sensible defaults.
Invalid values cause `EngineConfig.from_env()` to fail fast.
"""

import os
from dataclasses import dataclass, field


def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).lower() == "true"


@dataclass(frozen=True)
class DetectionConfig:
    """Language detection and ranking configuration."""

    max_hypotheses: int = field(
        default_factory=lambda: int(os.getenv("LINGUA_MAX_HYPOTHESES", "5"))
    )
    identifier_top_k: int = field(
        default_factory=lambda: int(os.getenv("LINGUA_IDENTIFIER_TOP_K", "10"))
    )
    preferred_boost: float = field(
        default_factory=lambda: float(os.getenv("LINGUA_PREFERRED_BOOST", "0.2"))
    )


@dataclass(frozen=True)
class MemoryConfig:
    """Translation memory configuration."""

    similarity_threshold: float = field(
        default_factory=lambda: float(os.getenv("LINGUA_MEMORY_THRESHOLD", "0.7"))
    )
    max_suggestions: int = field(
        default_factory=lambda: int(os.getenv("LINGUA_MEMORY_MAX_SUGGESTIONS", "5"))
    )


@dataclass(frozen=True)
class SchedulerConfig:
    """Debounce and pipeline configuration."""

    debounce_ms: int = field(default_factory=lambda: int(os.getenv("LINGUA_DEBOUNCE_MS", "300")))
    include_romanization: bool = field(
        default_factory=lambda: _env_bool("LINGUA_INCLUDE_ROMANIZATION", "true")
    )
    auto_save: bool = field(default_factory=lambda: _env_bool("LINGUA_AUTO_SAVE", "false"))


@dataclass(frozen=True)
class ObservabilityConfig:
    """Logging configuration."""

    log_level: str = field(default_factory=lambda: os.getenv("LOG_LEVEL", "INFO"))
    log_format: str = field(default_factory=lambda: os.getenv("LOG_FORMAT", "json"))


@dataclass(frozen=True)
class EngineConfig:
    """Complete configuration for the translation engine."""

    detection: DetectionConfig = field(default_factory=DetectionConfig)
    memory: MemoryConfig = field(default_factory=MemoryConfig)
    scheduler: SchedulerConfig = field(default_factory=SchedulerConfig)
    observability: ObservabilityConfig = field(default_factory=ObservabilityConfig)

    def validate(self) -> None:
        """Validate configuration values.

        Raises:
            ValueError: If any value is out of range.
        """
        if self.detection.max_hypotheses < 1:
            raise ValueError(
                f"LINGUA_MAX_HYPOTHESES must be at least 1, got {self.detection.max_hypotheses}"
            )
        if self.detection.identifier_top_k < self.detection.max_hypotheses:
            raise ValueError(
                "LINGUA_IDENTIFIER_TOP_K must be >= LINGUA_MAX_HYPOTHESES "
                f"({self.detection.identifier_top_k} < {self.detection.max_hypotheses})"
            )
        if not 0 <= self.detection.preferred_boost <= 1:
            raise ValueError(
                f"LINGUA_PREFERRED_BOOST must be between 0 and 1, got {self.detection.preferred_boost}"
            )
        if not 0 <= self.memory.similarity_threshold <= 1:
            raise ValueError(
                f"LINGUA_MEMORY_THRESHOLD must be between 0 and 1, got {self.memory.similarity_threshold}"
            )
        if self.memory.max_suggestions < 1:
            raise ValueError(
                f"LINGUA_MEMORY_MAX_SUGGESTIONS must be at least 1, got {self.memory.max_suggestions}"
            )
        if self.scheduler.debounce_ms < 0:
            raise ValueError(
                f"LINGUA_DEBOUNCE_MS must be non-negative, got {self.scheduler.debounce_ms}"
            )
        if self.observability.log_format not in ("json", "console"):
            raise ValueError(
                f"LOG_FORMAT must be 'json' or 'console', got {self.observability.log_format}"
            )

    @classmethod
    def from_env(cls) -> "EngineConfig":
        """Create configuration from environment variables.

        Raises:
            ValueError: If configuration is invalid.
        """
        config = cls(
            detection=DetectionConfig(),
            memory=MemoryConfig(),
            scheduler=SchedulerConfig(),
            observability=ObservabilityConfig(),
        )
        config.validate()
        return config


# Global singleton configuration
_config: EngineConfig | None = None


def get_config() -> EngineConfig:
    """Get the global configuration instance.

    Raises:
        ValueError: If configuration validation fails.
    """
    global _config
    if _config is None:
        _config = EngineConfig.from_env()
    return _config


def reset_config() -> None:
    """Reset the global configuration (for testing)."""
    global _config
    _config = None


def set_config(config: EngineConfig) -> None:
    """Set the global configuration (for testing).

    Args:
        config: The configuration to use.
    """
    global _config
    _config = config
