"""
Structured logging configuration for the translation engine.

Uses structlog with context binding for session_id and generation throughout
a pipeline run. Output format and level come from ObservabilityConfig.
"""

import logging
import sys

import structlog

from lingua_engine.config import ObservabilityConfig


def _renderer(log_format: str) -> structlog.types.Processor:
    if log_format == "console":
        return structlog.dev.ConsoleRenderer(colors=False)
    return structlog.processors.JSONRenderer()


def setup_logging(config: ObservabilityConfig | None = None) -> None:
    """
    Configure structlog for the engine.

    Args:
        config: Log level and format (defaults to LOG_LEVEL / LOG_FORMAT from env)
    """
    config = config or ObservabilityConfig()
    level = logging.getLevelName(config.log_level.upper())
    if not isinstance(level, int):
        raise ValueError(f"Unknown log level: {config.log_level}")

    logging.basicConfig(format="%(message)s", stream=sys.stdout, level=level)
    # The host application may own the root logger; the engine's own level is set explicitly
    logging.getLogger("lingua_engine").setLevel(level)

    structlog.configure(
        processors=[
            structlog.stdlib.filter_by_level,
            structlog.stdlib.add_log_level,
            structlog.stdlib.add_logger_name,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            _renderer(config.log_format),
        ],
        wrapper_class=structlog.stdlib.BoundLogger,
        context_class=dict,
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.BoundLogger:
    """
    Get a structlog logger instance.

    Args:
        name: Logger name (typically __name__)

    Returns:
        Configured BoundLogger instance
    """
    return structlog.get_logger(name)


def bind_session_context(
    logger: structlog.BoundLogger,
    session_id: str,
    generation: int | None = None,
) -> structlog.BoundLogger:
    """
    Bind input-session context to logger.

    Args:
        logger: Base logger instance
        session_id: Input session identifier
        generation: Generation token of the pipeline run (optional)

    Returns:
        BoundLogger with context bound

    Example:
        >>> logger = get_logger(__name__)
        >>> logger = bind_session_context(logger, session_id="sess-1", generation=4)
        >>> logger.info("pipeline_started")  # Includes session_id and generation
    """
    context: dict[str, object] = {"session_id": session_id}
    if generation is not None:
        context["generation"] = generation

    return logger.bind(**context)
