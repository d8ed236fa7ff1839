"""Protocol for running one poll cycle."""

from typing import Protocol

from sl_departures.domain.models.batch_result import BatchResult


class BatchRunnerProtocol(Protocol):
    """Protocol for fetching all stations once and reporting the outcome."""

    async def run_batch(self) -> BatchResult:
        """Run one poll cycle."""
        ...
