"""Protocol for the departure poll scheduler."""

from typing import Protocol


class PollSchedulerProtocol(Protocol):
    """Protocol for scheduling repeated departure polls."""

    async def start(self) -> None:
        """Start polling."""
        ...

    async def stop(self) -> None:
        """Stop polling."""
        ...

    def poll_now(self) -> None:
        """Start the next poll cycle immediately."""
        ...
