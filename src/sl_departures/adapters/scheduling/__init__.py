"""Scheduling adapters."""

from sl_departures.adapters.scheduling.poll_scheduler import PollScheduler

__all__ = ["PollScheduler"]
