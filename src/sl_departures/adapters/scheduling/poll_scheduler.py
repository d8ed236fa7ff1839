"""Poll scheduler with an adaptive interval."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from sl_departures.domain.contracts.poll_scheduler import PollSchedulerProtocol
from sl_departures.domain.errors import ConfigurationError

if TYPE_CHECKING:
    from sl_departures.domain.contracts.batch_runner import BatchRunnerProtocol
    from sl_departures.domain.contracts.interval_policy import IntervalPolicyProtocol

logger = logging.getLogger(__name__)


class PollScheduler(PollSchedulerProtocol):
    """Fires poll cycles and re-arms a single timer with a freshly computed interval.

    Each cycle starts its batch as a background task and does not wait for it,
    so a slow batch can still be running when the next one starts. Set
    ``allow_overlapping_polls`` to False to skip a cycle while the previous
    batch is in flight.
    """

    def __init__(
        self,
        batch_runner: BatchRunnerProtocol,
        interval_policy: IntervalPolicyProtocol,
        allow_overlapping_polls: bool = True,
    ) -> None:
        """Initialize the scheduler.

        Args:
            batch_runner: Runs one poll cycle and reports it.
            interval_policy: Computes the wait before the next cycle.
            allow_overlapping_polls: Whether a cycle may start while the previous
                batch is still running.
        """
        self.batch_runner = batch_runner
        self.interval_policy = interval_policy
        self.allow_overlapping_polls = allow_overlapping_polls
        self._task: asyncio.Task | None = None
        self._wake = asyncio.Event()
        self._in_flight: set[asyncio.Task] = set()

    @property
    def running(self) -> bool:
        return self._task is not None and not self._task.done()

    @property
    def in_flight(self) -> int:
        """Number of batches currently running."""
        return len(self._in_flight)

    async def start(self) -> None:
        """Start polling; the first cycle runs immediately."""
        if self.running:
            logger.warning("Poll scheduler already running")
            return
        self._wake.clear()
        self._task = asyncio.create_task(self._poll_loop())
        logger.info("Started poll scheduler")

    async def stop(self) -> None:
        """Cancel the timer and wait for batches already in flight."""
        if self._task and not self._task.done():
            self._task.cancel()
            try:
                await self._task
            except asyncio.CancelledError:
                logger.info("Poll scheduler cancelled")
        if self._in_flight:
            await asyncio.gather(*self._in_flight, return_exceptions=True)
        logger.info("Stopped poll scheduler")

    async def wait(self) -> None:
        """Wait until the scheduler ends.

        Raises:
            ConfigurationError: If the interval rules turned out to be unusable.
        """
        if self._task is not None:
            await self._task

    def poll_now(self) -> None:
        """Drop the pending wait so the next cycle starts right away."""
        self._wake.set()

    def fire(self) -> asyncio.Task | None:
        """Start one batch in the background; returns None if the cycle is skipped."""
        if not self.allow_overlapping_polls and self._in_flight:
            logger.info("Previous poll still in progress, skipping this cycle")
            return None
        task = asyncio.create_task(self._run_batch())
        self._in_flight.add(task)
        task.add_done_callback(self._in_flight.discard)
        return task

    async def _run_batch(self) -> None:
        try:
            await self.batch_runner.run_batch()
        except Exception as e:
            # A failed poll must not stop future polls
            logger.error(f"Poll cycle failed (will retry on next cycle): {e}", exc_info=True)

    async def _poll_loop(self) -> None:
        """Main polling loop."""
        try:
            while True:
                self.fire()
                interval_ms = self.interval_policy.get_next_update_interval()
                logger.debug(f"Next update in {interval_ms} ms")
                await self._wait_for_timer(interval_ms / 1000.0)
        except asyncio.CancelledError:
            logger.info("Poll scheduler cancelled")
            raise
        except ConfigurationError as e:
            logger.error(f"Stopping poll scheduler, invalid configuration: {e}")
            raise

    async def _wait_for_timer(self, seconds: float) -> None:
        try:
            await asyncio.wait_for(self._wake.wait(), timeout=seconds)
        except asyncio.TimeoutError:
            pass
        finally:
            self._wake.clear()
