"""
Tests for the DebouncedScheduler.
"""

import asyncio

import pytest

from lingua_engine.pipeline import DebouncedScheduler


class Recorder:
    """Records pipeline runs started by the scheduler."""

    def __init__(self, duration: float = 0.0):
        self.duration = duration
        self.started: list[tuple[int, str]] = []
        self.finished: list[tuple[int, str]] = []

    async def __call__(self, generation: int, text: str) -> None:
        self.started.append((generation, text))
        if self.duration:
            await asyncio.sleep(self.duration)
        self.finished.append((generation, text))


class TestDebounce:
    """Tests for coalescing rapid submissions."""

    @pytest.mark.asyncio
    async def test_rapid_submissions_coalesce(self):
        """Test only the latest text is run after a burst of edits."""
        recorder = Recorder()
        scheduler = DebouncedScheduler(recorder, delay_ms=20)

        scheduler.submit("B")
        scheduler.submit("Bo")
        generation = scheduler.submit("Bon")
        await scheduler.wait()

        assert recorder.started == [(generation, "Bon")]
        assert generation == 3

    @pytest.mark.asyncio
    async def test_run_waits_for_delay(self):
        recorder = Recorder()
        scheduler = DebouncedScheduler(recorder, delay_ms=50)

        scheduler.submit("Bonjour")
        await asyncio.sleep(0.01)

        assert recorder.started == []
        assert scheduler.is_pending is True

        await scheduler.wait()

        assert recorder.started == [(1, "Bonjour")]
        assert scheduler.is_pending is False

    @pytest.mark.asyncio
    async def test_run_now_skips_delay(self):
        recorder = Recorder()
        scheduler = DebouncedScheduler(recorder, delay_ms=10_000)

        generation = scheduler.run_now("Bonjour")
        await scheduler.wait()

        assert recorder.started == [(generation, "Bonjour")]


class TestCancellation:
    """Tests for superseding and cancelling runs."""

    @pytest.mark.asyncio
    async def test_cancel_before_delay_runs_nothing(self):
        recorder = Recorder()
        scheduler = DebouncedScheduler(recorder, delay_ms=20)

        scheduler.submit("Bonjour")
        scheduler.cancel()
        await asyncio.sleep(0.05)

        assert recorder.started == []

    @pytest.mark.asyncio
    async def test_new_submission_supersedes_running_run(self):
        """Test an in-flight run is cancelled and never finishes."""
        recorder = Recorder(duration=0.05)
        scheduler = DebouncedScheduler(recorder, delay_ms=0)

        first = scheduler.submit("Bon")
        await asyncio.sleep(0.01)
        second = scheduler.submit("Bonjour")
        await scheduler.wait()

        assert (first, "Bon") in recorder.started
        assert recorder.finished == [(second, "Bonjour")]

    @pytest.mark.asyncio
    async def test_generation_tracking(self):
        scheduler = DebouncedScheduler(Recorder(), delay_ms=20)

        first = scheduler.submit("a")
        assert scheduler.is_current(first)

        scheduler.cancel()

        assert not scheduler.is_current(first)
        assert scheduler.generation == first + 1

    @pytest.mark.asyncio
    async def test_wait_without_task(self):
        scheduler = DebouncedScheduler(Recorder())

        await scheduler.wait()

        assert scheduler.generation == 0
