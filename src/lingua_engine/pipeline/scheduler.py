"""
Debounced Request Scheduler.

Coalesces rapid input changes into a single pipeline run. Every submission
restarts the delay and supersedes whatever was scheduled or running before
it. Ownership is tracked with an explicit generation counter, so callers
check staleness with `is_current(generation)` instead of relying on task
cancellation reaching them.
"""

import asyncio
from collections.abc import Awaitable, Callable

from lingua_engine.observability import get_logger

# Pipeline entry point: receives the generation token and the latest text
RunCallback = Callable[[int, str], Awaitable[None]]

DEFAULT_DEBOUNCE_MS = 300


class DebouncedScheduler:
    """Single-flight debounce scheduler for one input session.

    Attributes:
        delay_ms: Debounce delay applied to submit()
        generation: Token of the most recent submission (0 before any)
    """

    def __init__(self, run: RunCallback, delay_ms: int = DEFAULT_DEBOUNCE_MS) -> None:
        """Initialize scheduler.

        Args:
            run: Coroutine function executing one pipeline run
            delay_ms: Debounce delay in milliseconds
        """
        self._run = run
        self.delay_ms = delay_ms
        self._generation = 0
        self._task: asyncio.Task | None = None
        self.logger = get_logger(__name__)

    @property
    def generation(self) -> int:
        return self._generation

    @property
    def is_pending(self) -> bool:
        """True while a scheduled run is waiting or executing."""
        return self._task is not None and not self._task.done()

    def is_current(self, generation: int) -> bool:
        """Whether `generation` still owns the session."""
        return generation == self._generation

    def submit(self, text: str) -> int:
        """Schedule a run for `text` after the debounce delay.

        Returns:
            Generation token of the scheduled run
        """
        return self._schedule(text, self.delay_ms / 1000)

    def run_now(self, text: str) -> int:
        """Schedule a run for `text` without delay, superseding any other."""
        return self._schedule(text, 0.0)

    def cancel(self) -> None:
        """Invalidate the current generation and cancel its task."""
        self._generation += 1
        self._cancel_task()

    async def wait(self) -> None:
        """Wait until the current scheduled run has finished or been cancelled."""
        while self._task is not None and not self._task.done():
            task = self._task
            await asyncio.wait({task})
            # A run may have been superseded while waiting
            if task is self._task:
                break

    def _schedule(self, text: str, delay: float) -> int:
        self._generation += 1
        self._cancel_task()
        generation = self._generation
        self._task = asyncio.create_task(self._delayed(generation, text, delay))
        self.logger.debug("run_scheduled", generation=generation, delay_ms=int(delay * 1000))
        return generation

    def _cancel_task(self) -> None:
        if self._task is not None and not self._task.done():
            self._task.cancel()
            self.logger.debug("run_superseded", generation=self._generation)
        self._task = None

    async def _delayed(self, generation: int, text: str, delay: float) -> None:
        if delay > 0:
            await asyncio.sleep(delay)
        if not self.is_current(generation):
            return
        await self._run(generation, text)
