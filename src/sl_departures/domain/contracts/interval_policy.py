"""Protocol for computing the next poll interval."""

from datetime import datetime
from typing import Protocol


class IntervalPolicyProtocol(Protocol):
    """Protocol for choosing how long to wait before the next poll."""

    def get_next_update_interval(self, now: datetime | None = None) -> int:
        """Return the interval in milliseconds."""
        ...
