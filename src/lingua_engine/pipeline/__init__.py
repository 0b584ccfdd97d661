"""
Pipeline component.

Exports:
    - TranslationSession: Caller-facing debounced input session
    - create_session: Factory wiring a session from configuration
    - PipelineCoordinator / PipelineRun: One generation of the pipeline
    - DebouncedScheduler: Generation-counted debounce scheduler
    - ResultBuffer: Generation-owned outcome buffer
"""

from .coordinator import PipelineCoordinator, PipelineRun
from .factory import create_session
from .result_buffer import ResultBuffer
from .scheduler import DebouncedScheduler
from .session import TranslationSession

__all__ = [
    "TranslationSession",
    "create_session",
    "PipelineCoordinator",
    "PipelineRun",
    "DebouncedScheduler",
    "ResultBuffer",
]
