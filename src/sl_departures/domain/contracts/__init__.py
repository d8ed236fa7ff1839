"""Contracts (protocols) between application and adapters."""

from sl_departures.domain.contracts.batch_runner import BatchRunnerProtocol
from sl_departures.domain.contracts.interval_policy import IntervalPolicyProtocol
from sl_departures.domain.contracts.poll_scheduler import PollSchedulerProtocol

__all__ = ["BatchRunnerProtocol", "IntervalPolicyProtocol", "PollSchedulerProtocol"]
